"""Lint configuration loading and deterministic merge order."""

from __future__ import annotations

import re
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from classlint.security import compile_ignore_patterns, resolve_base_dir
from classlint.stylesheets.discovery import DEFAULT_EXCLUDE_GLOBS, DEFAULT_STYLESHEET_GLOBS

CONFIG_FILE_NAME = "classlint.toml"
CONFIG_TABLE = "classlint"
DEFAULT_TRACE_PATH = Path(".classlint") / "trace.jsonl"

_LIST_FIELDS = ("css_files", "exclude_patterns", "ignore_class_patterns")
_BOOL_FIELDS = ("ignore_tailwind", "require_tailwind_config", "allow_dynamic_classes", "debug")
_STRING_FIELDS = ("base_dir", "trace_path")
KNOWN_OPTIONS = frozenset(_LIST_FIELDS + _BOOL_FIELDS + _STRING_FIELDS)


@dataclass(slots=True, frozen=True)
class LintConfig:
    """Validated settings for one analysis run."""

    project_root: Path
    base_dir: Path
    css_files: tuple[str, ...] = DEFAULT_STYLESHEET_GLOBS
    exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_GLOBS
    ignore_class_patterns: tuple[re.Pattern[str], ...] = ()
    ignore_tailwind: bool = True
    require_tailwind_config: bool = True
    allow_dynamic_classes: bool = True
    debug: bool = False
    trace_path: Path | None = None

    @classmethod
    def from_options(cls, options: Mapping[str, object], project_root: Path) -> LintConfig:
        """Validate raw options and build the config value object."""
        unknown = sorted(set(options) - KNOWN_OPTIONS)
        if unknown:
            raise ValueError(f"Unknown config field(s): {', '.join(unknown)}.")

        root = project_root.resolve()
        base_dir = resolve_base_dir(root, _optional_string(options.get("base_dir"), "base_dir"))

        css_files = DEFAULT_STYLESHEET_GLOBS
        if options.get("css_files") is not None:
            css_files = _tuple_of_strings(options["css_files"], "css_files")
        exclude_patterns = DEFAULT_EXCLUDE_GLOBS
        if options.get("exclude_patterns") is not None:
            exclude_patterns = _tuple_of_strings(options["exclude_patterns"], "exclude_patterns")
        raw_patterns: tuple[str, ...] = ()
        if options.get("ignore_class_patterns") is not None:
            raw_patterns = _tuple_of_strings(
                options["ignore_class_patterns"], "ignore_class_patterns"
            )

        debug = _optional_bool(options.get("debug"), "debug", False)
        trace_path = None
        raw_trace = _optional_string(options.get("trace_path"), "trace_path")
        if raw_trace:
            trace_path = (root / raw_trace).resolve(strict=False)
        elif debug:
            trace_path = root / DEFAULT_TRACE_PATH

        return cls(
            project_root=root,
            base_dir=base_dir,
            css_files=css_files,
            exclude_patterns=exclude_patterns,
            ignore_class_patterns=compile_ignore_patterns(raw_patterns),
            ignore_tailwind=_optional_bool(options.get("ignore_tailwind"), "ignore_tailwind", True),
            require_tailwind_config=_optional_bool(
                options.get("require_tailwind_config"), "require_tailwind_config", True
            ),
            allow_dynamic_classes=_optional_bool(
                options.get("allow_dynamic_classes"), "allow_dynamic_classes", True
            ),
            debug=debug,
            trace_path=trace_path,
        )

    def to_public_dict(self) -> dict[str, object]:
        """Return a serializable snapshot, used for trace records."""
        return {
            "project_root": str(self.project_root),
            "base_dir": str(self.base_dir),
            "css_files": list(self.css_files),
            "exclude_patterns": list(self.exclude_patterns),
            "ignore_class_patterns": [pattern.pattern for pattern in self.ignore_class_patterns],
            "ignore_tailwind": self.ignore_tailwind,
            "require_tailwind_config": self.require_tailwind_config,
            "allow_dynamic_classes": self.allow_dynamic_classes,
            "debug": self.debug,
            "trace_path": str(self.trace_path) if self.trace_path is not None else None,
        }


def default_config(project_root: Path) -> LintConfig:
    """Build default config for a given project root."""
    return LintConfig.from_options({}, project_root)


def load_config_file(project_root: Path) -> dict[str, object]:
    """Load the optional ``[classlint]`` table from classlint.toml."""
    config_path = project_root / CONFIG_FILE_NAME
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    table = payload.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ValueError(f"Config section '{CONFIG_TABLE}' must be a table.")
    return table


def load_effective_config(
    project_root: Path, overrides: Mapping[str, object] | None = None
) -> LintConfig:
    """Load effective config using merge order defaults -> classlint.toml -> overrides."""
    resolved_root = project_root.resolve()
    merged: dict[str, object] = dict(load_config_file(resolved_root))
    merged.update(overrides or {})
    return LintConfig.from_options(merged, resolved_root)


def _tuple_of_strings(value: object, field: str) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"Config field '{field}' must be a list of strings.")
    output: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError(f"Config field '{field}' must contain only strings.")
        output.append(item)
    return tuple(output)


def _optional_bool(value: object, field: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"Config field '{field}' must be a boolean.")
    return value


def _optional_string(value: object, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Config field '{field}' must be a string.")
    return value
