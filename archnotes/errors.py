"""Errors raised by the extraction pipeline.

Each error carries a code and the parameters that identify what failed. The
original exception is chained with ``raise ... from err``. Nothing in the
pipeline recovers from them; callers decide how to report.
"""

from __future__ import annotations

from typing import Tuple

E_PATTERN_FAILURE = "E_PATTERN_FAILURE"
E_FILE_FAILURE = "E_FILE_FAILURE"
E_FILE_PARSE_FAILURE = "E_FILE_PARSE_FAILURE"
E_CONFIG_FAILURE = "E_CONFIG_FAILURE"


class ArchNotesError(Exception):
	"""Base error with a code discriminator and its parameters."""

	code: str = "E_UNEXPECTED"

	def __init__(self, *params: str) -> None:
		self.params: Tuple[str, ...] = params
		super().__init__(f"{self.code} {params!r}")

	def to_dict(self) -> dict:
		return {"code": self.code, "params": list(self.params)}


class PatternFailureError(ArchNotesError):
	"""A glob pattern could not be resolved."""

	code = E_PATTERN_FAILURE

	def __init__(self, pattern: str) -> None:
		self.pattern = pattern
		super().__init__(pattern)


class FileFailureError(ArchNotesError):
	"""A source file could not be read."""

	code = E_FILE_FAILURE

	def __init__(self, path: str) -> None:
		self.path = path
		super().__init__(path)


class FileParseFailureError(ArchNotesError):
	"""A source file could not be turned into a syntax tree."""

	code = E_FILE_PARSE_FAILURE

	def __init__(self, path: str) -> None:
		self.path = path
		super().__init__(path)


class ConfigFailureError(ArchNotesError):
	"""The ``pyproject.toml`` configuration is unreadable or invalid."""

	code = E_CONFIG_FAILURE

	def __init__(self, path: str) -> None:
		self.path = path
		super().__init__(path)
