import os
import tomllib
from textwrap import dedent

import pytest
from pydantic import ValidationError

from archnotes.config import load_config
from archnotes.errors import E_CONFIG_FAILURE, ConfigFailureError
from archnotes.fs_scan import DEFAULT_EXCLUDE


def test_defaults(tmp_path):
	config = load_config(str(tmp_path))
	assert config.cwd == str(tmp_path)
	assert config.patterns == ["**/*.py"]
	assert config.title_level == "#"
	assert config.base == "."
	assert config.eol == os.linesep
	assert config.exclude == list(DEFAULT_EXCLUDE)


def test_pyproject_table_and_overrides(tmp_path):
	(tmp_path / "pyproject.toml").write_text(
		dedent(
			"""\
			[project]
			name = "demo"

			[tool.archnotes]
			patterns = ["src/**/*.py"]
			title-level = "##"
			base = "./docs"
			"""
		)
	)
	config = load_config(str(tmp_path), {"base": "..", "title_level": None})
	assert config.patterns == ["src/**/*.py"]
	assert config.title_level == "##"
	assert config.base == ".."
	options = config.render_options()
	assert (options.cwd, options.title_level, options.base) == (str(tmp_path), "##", "..")


def test_pyproject_without_table(tmp_path):
	(tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n')
	assert load_config(str(tmp_path)).patterns == ["**/*.py"]


def test_malformed_pyproject_is_a_config_failure(tmp_path):
	pyproject = tmp_path / "pyproject.toml"
	pyproject.write_text("[tool.archnotes\npatterns = \n")
	with pytest.raises(ConfigFailureError) as excinfo:
		load_config(str(tmp_path))
	assert excinfo.value.code == E_CONFIG_FAILURE
	assert excinfo.value.path == str(pyproject)
	assert isinstance(excinfo.value.__cause__, tomllib.TOMLDecodeError)


def test_invalid_value_is_a_config_failure(tmp_path):
	(tmp_path / "pyproject.toml").write_text("[tool.archnotes]\npatterns = 3\n")
	with pytest.raises(ConfigFailureError) as excinfo:
		load_config(str(tmp_path))
	assert isinstance(excinfo.value.__cause__, ValidationError)
