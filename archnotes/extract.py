from __future__ import annotations

import logging
import re
import tokenize
from typing import Awaitable, Callable, Iterable, List, Optional

from .ast_parse import SHEBANG_COMMENT, parse_comments
from .errors import FileFailureError, FileParseFailureError
from .fs_scan import read_source
from .model import Note, ParsedNote, SourceComment, SourceRange
from .note_parse import parse_note

logger = logging.getLogger(__name__)

ReadFile = Callable[[str], Awaitable[str]]
ParseComments = Callable[[str, str], List[SourceComment]]

SHEBANG_RE = re.compile(r"\A#![ \t]*(?:/[\w.+-]+)+(?:[ \t]+[\w.+-]+)*[ \t]*$", re.MULTILINE)


def neutralize_shebang(content: str) -> str:
	if SHEBANG_RE.match(content):
		return SHEBANG_COMMENT + content
	return content


def extract_file_notes(
	file_path: str,
	comments: Iterable[SourceComment],
	parse: Callable[[str], Optional[ParsedNote]] = parse_note,
) -> List[Note]:
	"""Build the notes found in a file's comments, in discovery order."""
	notes: List[Note] = []
	for comment in comments:
		parsed = parse(comment.text)
		if parsed is None:
			continue
		notes.append(
			Note(
				id=parsed.id,
				title=parsed.title,
				body=parsed.body,
				source_path=file_path,
				source_range=SourceRange(start_line=comment.start_line, end_line=comment.end_line),
			)
		)
	return notes


async def extract_architecture_notes(
	file_path: str,
	read_file: ReadFile = read_source,
	parse: ParseComments = parse_comments,
) -> List[Note]:
	logger.debug("Reading file at %s", file_path)
	try:
		content = await read_file(file_path)
	except (OSError, UnicodeDecodeError) as err:
		logger.error("File read failure: %s", file_path)
		raise FileFailureError(file_path) from err
	logger.debug("File successfully read: %s", file_path)

	neutralized = neutralize_shebang(content)
	if neutralized is not content:
		logger.debug("Found a shebang, commenting it: %s", file_path)

	try:
		comments = parse(neutralized, file_path)
	except (SyntaxError, ValueError, tokenize.TokenError) as err:
		logger.error("File parse failure: %s", file_path)
		raise FileParseFailureError(file_path) from err

	notes = extract_file_notes(file_path, comments)
	logger.debug("File successfully processed: %s", file_path)
	logger.debug("Architecture notes found: %s", [n.title for n in notes])
	return notes
