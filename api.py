from __future__ import annotations

import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from archnotes.config import load_config
from archnotes.errors import ArchNotesError
from archnotes.model import ArchitectureResult
from archnotes.pipeline import gather_architecture_notes
from archnotes.render import render_notes


app = FastAPI(title="Architecture Notes")


class ArchitectureRequest(BaseModel):
	root_path: str
	patterns: Optional[List[str]] = None
	title_level: Optional[str] = None
	base: Optional[str] = None


@app.post("/architecture", response_model=ArchitectureResult)
async def architecture(req: ArchitectureRequest) -> ArchitectureResult:
	root = os.path.abspath(req.root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")

	try:
		config = load_config(
			root,
			{"patterns": req.patterns, "title_level": req.title_level, "base": req.base, "eol": "\n"},
		)
		notes = await gather_architecture_notes(config)
	except ArchNotesError as err:
		raise HTTPException(status_code=400, detail=err.to_dict()) from err

	return ArchitectureResult(markdown=render_notes(notes, config.render_options()), notes=notes)