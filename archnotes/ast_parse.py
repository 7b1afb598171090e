from __future__ import annotations

import ast
import inspect
import io
import re
import tokenize
from typing import Iterator, List, Tuple

from .model import SourceComment
from .note_parse import ARCHITECTURE_NOTE_RE

SHEBANG_COMMENT = "# Shebang commented by archnotes: "
# PEP 263 encoding declaration
CODING_RE = re.compile(r"^[ \t\f]*#.*?coding[:=][ \t]*[-\w.]+")


def _strip_comment_marker(token_text: str) -> str:
	text = token_text[1:]
	if text.startswith(" "):
		text = text[1:]
	return text


def _is_header_directive(row: int, token_text: str) -> bool:
	"""Shebang or encoding declaration, only found on the first two lines."""
	if row > 2:
		return False
	if row == 1 and token_text.startswith(("#!", SHEBANG_COMMENT)):
		return True
	return bool(CODING_RE.match(token_text))


def _line_comments(text: str) -> List[SourceComment]:
	"""Group ``#`` comments written on consecutive lines into single comments.

	A comment sharing its line with code stands alone, as do a shebang and an
	encoding declaration. A line starting an architecture note always opens
	a new comment.
	"""
	comments: List[SourceComment] = []
	run: List[Tuple[int, str]] = []

	def flush() -> None:
		if run:
			comments.append(
				SourceComment(
					text="\n".join(line for _, line in run),
					start_line=run[0][0],
					end_line=run[-1][0],
				)
			)
			run.clear()

	for tok in tokenize.generate_tokens(io.StringIO(text).readline):
		if tok.type != tokenize.COMMENT:
			continue
		row = tok.start[0]
		line = _strip_comment_marker(tok.string)
		standalone = not tok.line[: tok.start[1]].strip() and not _is_header_directive(row, tok.string)
		continues_run = (
			standalone
			and bool(run)
			and run[-1][0] == row - 1
			and not ARCHITECTURE_NOTE_RE.match(line)
		)
		if not continues_run:
			flush()
		run.append((row, line))
		if not standalone:
			flush()
	flush()
	return comments


def _string_statements(tree: ast.AST) -> Iterator[SourceComment]:
	# Docstrings and bare string statements.
	for node in ast.walk(tree):
		if (
			isinstance(node, ast.Expr)
			and isinstance(node.value, ast.Constant)
			and isinstance(node.value.value, str)
		):
			yield SourceComment(
				text=inspect.cleandoc(node.value.value),
				start_line=node.lineno,
				end_line=node.end_lineno or node.lineno,
			)


def parse_comments(text: str, path: str = "<unknown>") -> List[SourceComment]:
	"""Return the comments of a Python source in source order.

	Raises ``SyntaxError`` when the source cannot be parsed.
	"""
	tree = ast.parse(text, filename=path)
	comments = _line_comments(text)
	comments.extend(_string_statements(tree))
	return sorted(comments, key=lambda c: (c.start_line, c.end_line))
