from __future__ import annotations

import os
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SourceRange(BaseModel):
	model_config = ConfigDict(frozen=True)

	start_line: int
	end_line: int


class SourceComment(BaseModel):
	"""A comment (or docstring) located in a source file, lines are 1-based."""

	model_config = ConfigDict(frozen=True)

	text: str
	start_line: int
	end_line: int


class ParsedNote(BaseModel):
	model_config = ConfigDict(frozen=True)

	id: Tuple[int, ...]
	title: str
	body: str


class Note(BaseModel):
	"""An architecture note with its location in the source tree."""

	model_config = ConfigDict(frozen=True)

	id: Tuple[int, ...]
	title: str
	body: str
	source_path: str
	source_range: SourceRange

	@field_validator("id")
	@classmethod
	def _check_id(cls, value: Tuple[int, ...]) -> Tuple[int, ...]:
		if not value:
			raise ValueError("note id needs at least one component")
		if any(part < 0 for part in value):
			raise ValueError(f"note id components must be non-negative: {value}")
		return value

	@property
	def number(self) -> str:
		return ".".join(str(part) for part in self.id)


class RenderOptions(BaseModel):
	model_config = ConfigDict(frozen=True)

	cwd: str
	eol: str = Field(default_factory=lambda: os.linesep)
	title_level: str = "#"
	base: str = "."


class ArchitectureResult(BaseModel):
	markdown: str
	notes: List[Note] = []
