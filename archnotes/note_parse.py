from __future__ import annotations

import re
from typing import Optional

from .model import ParsedNote

# Architecture Note #1.1: Extraction
#
# A note is any comment or docstring starting with
# `Architecture Note #<number>: <title>`, the number having one to eight
# dot separated groups. What follows the marker line is the note body.
ARCHITECTURE_NOTE_RE = re.compile(
	r"^\s*Architecture Note #([0-9]+(?:\.[0-9]+){0,7}):[^\S\r\n]+([^\r\n]*)"
)


def parse_note(comment_text: str) -> Optional[ParsedNote]:
	match = ARCHITECTURE_NOTE_RE.match(comment_text)
	if not match:
		return None
	number, title = match.groups()
	return ParsedNote(
		id=tuple(int(part, 10) for part in number.split(".")),
		title=title.strip(),
		body=comment_text[match.end():].strip(),
	)
