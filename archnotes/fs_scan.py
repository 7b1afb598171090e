from __future__ import annotations

import asyncio
import glob
import logging
import os
from typing import Iterable, List, Sequence

from .errors import PatternFailureError

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE: Sequence[str] = (".git", "node_modules", "dist", "build", "__pycache__", ".venv")


def _is_excluded(path: str, cwd: str, exclude: Iterable[str]) -> bool:
	rel_dirs = os.path.relpath(path, cwd).split(os.sep)[:-1]
	return any(part in exclude for part in rel_dirs)


def glob_files(pattern: str, cwd: str, exclude: Iterable[str] = DEFAULT_EXCLUDE) -> List[str]:
	"""Expand a glob pattern below ``cwd`` into sorted absolute file paths.

	``**`` recurses, dot files match and directories are skipped.
	"""
	if not os.path.isdir(cwd):
		raise NotADirectoryError(cwd)
	exclude = set(exclude)
	files: List[str] = []
	for match in glob.glob(pattern, root_dir=cwd, recursive=True, include_hidden=True):
		path = os.path.normpath(os.path.join(cwd, match))
		if os.path.isdir(path) or _is_excluded(path, cwd, exclude):
			continue
		files.append(path)
	return sorted(files)


async def _resolve_pattern(pattern: str, cwd: str, exclude: Iterable[str]) -> List[str]:
	logger.debug("Processing pattern: %s", pattern)
	try:
		files = await asyncio.to_thread(glob_files, pattern, cwd, exclude)
	except (OSError, ValueError) as err:
		logger.error("Pattern failure: %s", pattern)
		raise PatternFailureError(pattern) from err
	logger.debug("Pattern successfully resolved: %s", pattern)
	logger.debug("Files: %s", files)
	return files


async def resolve_patterns(
	patterns: Iterable[str],
	cwd: str,
	exclude: Iterable[str] = DEFAULT_EXCLUDE,
) -> List[str]:
	cwd = os.path.abspath(cwd)
	exclude = tuple(exclude)
	bulks = await asyncio.gather(*(_resolve_pattern(p, cwd, exclude) for p in patterns))
	return [path for bulk in bulks for path in bulk]


def _read_text(path: str) -> str:
	with open(path, "r", encoding="utf-8") as fh:
		return fh.read()


async def read_source(path: str) -> str:
	return await asyncio.to_thread(_read_text, path)
