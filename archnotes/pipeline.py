from __future__ import annotations

import logging
from typing import Awaitable, Callable, Iterable, List

from .ast_parse import parse_comments
from .collect import collect_notes
from .config import ArchNotesConfig
from .extract import ParseComments, ReadFile
from .fs_scan import read_source, resolve_patterns
from .model import Note
from .order import sort_notes
from .render import render_notes

logger = logging.getLogger(__name__)

# Architecture Note #1: Pipeline
#
# A run resolves the glob patterns, extracts the notes of every file
# concurrently, sorts them and renders a single markdown document.
#
# Collaborators (pattern resolution, file reading, comment parsing) are
# plain keyword parameters so tests can swap them.

ResolvePatterns = Callable[[Iterable[str], str, Iterable[str]], Awaitable[List[str]]]


async def gather_architecture_notes(
	config: ArchNotesConfig,
	resolve: ResolvePatterns = resolve_patterns,
	read_file: ReadFile = read_source,
	parse: ParseComments = parse_comments,
) -> List[Note]:
	"""Resolve the configured patterns and return every note in outline order."""
	files = await resolve(config.patterns, config.cwd, config.exclude)
	notes = await collect_notes(files, read_file=read_file, parse=parse)
	return sort_notes(notes)


async def build_architecture(
	config: ArchNotesConfig,
	resolve: ResolvePatterns = resolve_patterns,
	read_file: ReadFile = read_source,
	parse: ParseComments = parse_comments,
) -> str:
	notes = await gather_architecture_notes(config, resolve=resolve, read_file=read_file, parse=parse)
	logger.debug("Rendering %d architecture notes", len(notes))
	return render_notes(notes, config.render_options())
