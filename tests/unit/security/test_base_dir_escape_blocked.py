from __future__ import annotations

from pathlib import Path

import pytest

from classlint.config import LintConfig
from classlint.security import ConfigurationError, resolve_base_dir


def test_default_base_dir_is_project_root(tmp_path: Path) -> None:
    assert resolve_base_dir(tmp_path) == tmp_path.resolve()
    assert resolve_base_dir(tmp_path, "") == tmp_path.resolve()


def test_nested_base_dir_is_allowed(tmp_path: Path) -> None:
    assert resolve_base_dir(tmp_path, "./src/../web") == (tmp_path / "web").resolve()


def test_traversal_outside_root_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError) as error:
        resolve_base_dir(tmp_path, "../elsewhere")

    assert error.value.reason.startswith("base_dir must be within the project directory.")
    assert error.value.hint


def test_absolute_path_outside_root_is_fatal(tmp_path: Path) -> None:
    outside = tmp_path.parent / "outside"
    with pytest.raises(ConfigurationError):
        resolve_base_dir(tmp_path / "project", str(outside))


def test_null_byte_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError) as error:
        resolve_base_dir(tmp_path, "src\0evil")

    assert error.value.reason == "base_dir contains invalid characters."


def test_config_surfaces_configuration_error_as_value_error(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="base_dir must be within"):
        LintConfig.from_options({"base_dir": "../../"}, tmp_path)
