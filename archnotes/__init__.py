"""Extract architecture notes from source comments and render them as markdown.

Modules:
- note_parse.py: Recognizes the ``Architecture Note #<id>: <title>`` marker.
- ast_parse.py: Python comment and docstring extraction with line ranges.
- fs_scan.py: Glob pattern resolution and source file reading.
- extract.py: Per-file note extraction.
- collect.py: Concurrent extraction across files.
- order.py: Outline ordering of notes.
- render.py: Markdown rendering with links back to the source.
- pipeline.py: The whole run, from patterns to markdown.
- config.py: Defaults and ``pyproject.toml`` configuration.
- model.py: Data structures for notes and comments.
- errors.py: Pipeline errors.
"""

__all__ = [
	"note_parse",
	"ast_parse",
	"fs_scan",
	"extract",
	"collect",
	"order",
	"render",
	"pipeline",
	"config",
	"model",
	"errors",
]
