from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List

from .ast_parse import parse_comments
from .extract import ParseComments, ReadFile, extract_architecture_notes
from .fs_scan import read_source
from .model import Note

logger = logging.getLogger(__name__)


async def collect_notes(
	file_paths: Iterable[str],
	read_file: ReadFile = read_source,
	parse: ParseComments = parse_comments,
) -> List[Note]:
	"""Extract notes from every file concurrently and flatten the results.

	The first failing file aborts the whole collection, no partial result is
	returned. Cross-file order is unspecified until the notes are sorted.
	"""
	paths = list(file_paths)
	bulks = await asyncio.gather(
		*(extract_architecture_notes(path, read_file=read_file, parse=parse) for path in paths)
	)
	notes = [note for bulk in bulks for note in bulk]
	logger.debug("Collected %d architecture notes from %d files", len(notes), len(paths))
	return notes
