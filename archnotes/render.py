from __future__ import annotations

import os
from pathlib import PurePath
from typing import Iterable, List

from .model import Note, RenderOptions

# Architecture Note #1.3: Rendering
#
# Every note becomes a heading nested under `title_level` as deep as its
# number, its body and a link back to the commented lines. Set
# `title_level` to `##` or more when the notes go into an existing README,
# and `base` to where links should resolve from.


def context_link(note: Note, options: RenderOptions) -> str:
	rel_path = PurePath(os.path.relpath(note.source_path, options.cwd)).as_posix()
	return (
		f"[See in context]({options.base}/{rel_path}"
		f"#L{note.source_range.start_line}-L{note.source_range.end_line})"
	)


def render_note(note: Note, options: RenderOptions) -> str:
	eol = options.eol
	heading = options.title_level + "#" * len(note.id)
	parts: List[str] = [
		eol + eol,
		f"{heading} {note.title}" + eol + eol,
		note.body + eol + eol,
		context_link(note, options) + eol + eol,
	]
	return "".join(parts)


def render_notes(notes: Iterable[Note], options: RenderOptions) -> str:
	"""Render ordered notes as a markdown document, empty input gives ``""``."""
	content = "".join(render_note(note, options) for note in notes)
	if not content:
		return ""
	return options.title_level + " Architecture Notes" + options.eol + options.eol + content
