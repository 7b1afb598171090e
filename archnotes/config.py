"""Configuration for an architecture notes run.

Values come from, in increasing priority: built-in defaults, the
``[tool.archnotes]`` table of the project's ``pyproject.toml`` and explicit
overrides (CLI flags, API request fields).
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigFailureError
from .fs_scan import DEFAULT_EXCLUDE
from .model import RenderOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
	"patterns": ["**/*.py"],
	"title_level": "#",
	"base": ".",
	"exclude": list(DEFAULT_EXCLUDE),
}


class ArchNotesConfig(BaseModel):
	cwd: str
	patterns: List[str] = Field(default_factory=lambda: list(DEFAULT_CONFIG["patterns"]))
	title_level: str = "#"
	base: str = "."
	eol: str = Field(default_factory=lambda: os.linesep)
	exclude: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE))

	def render_options(self) -> RenderOptions:
		return RenderOptions(cwd=self.cwd, eol=self.eol, title_level=self.title_level, base=self.base)


def _deep_merge(base: dict, override: dict) -> dict:
	result = base.copy()
	for key, value in override.items():
		if key in result and isinstance(result[key], dict) and isinstance(value, dict):
			result[key] = _deep_merge(result[key], value)
		else:
			result[key] = value
	return result


def read_project_config(cwd: str) -> Dict[str, Any]:
	"""Return the ``[tool.archnotes]`` table of ``<cwd>/pyproject.toml``, or ``{}``."""
	pyproject = Path(cwd) / "pyproject.toml"
	if not pyproject.is_file():
		return {}
	try:
		with open(pyproject, "rb") as fh:
			data = tomllib.load(fh)
	except (OSError, tomllib.TOMLDecodeError) as err:
		logger.error("Configuration failure: %s", pyproject)
		raise ConfigFailureError(str(pyproject)) from err
	section = data.get("tool", {}).get("archnotes", {})
	if not isinstance(section, dict):
		logger.error("Configuration failure: %s", pyproject)
		raise ConfigFailureError(str(pyproject))
	if section:
		logger.debug("Loaded configuration from %s", pyproject)
	# TOML keys use dashes, model fields use underscores
	return {key.replace("-", "_"): value for key, value in section.items()}


def load_config(cwd: str, overrides: Optional[Dict[str, Any]] = None) -> ArchNotesConfig:
	cwd = os.path.abspath(cwd)
	merged = _deep_merge(DEFAULT_CONFIG, read_project_config(cwd))
	explicit = {key: value for key, value in (overrides or {}).items() if value is not None}
	merged = _deep_merge(merged, explicit)
	merged["cwd"] = cwd
	try:
		return ArchNotesConfig(**merged)
	except ValidationError as err:
		logger.error("Invalid configuration for %s", cwd)
		raise ConfigFailureError(str(Path(cwd) / "pyproject.toml")) from err
