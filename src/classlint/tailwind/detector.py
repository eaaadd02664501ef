"""Detection of a Tailwind setup in a project directory."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Final

from classlint.stylesheets.discovery import (
    DEFAULT_EXCLUDE_GLOBS,
    DEFAULT_STYLESHEET_GLOBS,
    discover_stylesheets,
)
from classlint.stylesheets.theme import TAILWIND_IMPORT_RE, THEME_BLOCK_RE

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES: Final[tuple[str, ...]] = (
    "tailwind.config.js",
    "tailwind.config.cjs",
    "tailwind.config.mjs",
    "tailwind.config.ts",
)
POSTCSS_CONFIG_NAMES: Final[tuple[str, ...]] = (
    "postcss.config.js",
    "postcss.config.cjs",
    "postcss.config.mjs",
)
PACKAGE_NAME = "tailwindcss"


class TailwindDetector:
    """Looks for any framework marker under ``project_root`` and memoises the verdict."""

    def __init__(
        self,
        project_root: Path,
        exclude_globs: tuple[str, ...] = DEFAULT_EXCLUDE_GLOBS,
    ) -> None:
        self._project_root = project_root.resolve()
        self._exclude_globs = exclude_globs
        self._marker: str | None = None
        self._checked = False

    @property
    def project_root(self) -> Path:
        return self._project_root

    def is_tailwind_project(self) -> bool:
        return self.marker() is not None

    def marker(self) -> str | None:
        """Return a description of the first marker found, or None."""
        if not self._checked:
            self._marker = self._find_marker()
            self._checked = True
            logger.debug("Tailwind marker under %s: %s", self._project_root, self._marker)
        return self._marker

    def stylesheets_with_markers(self) -> tuple[Path, ...]:
        """Return stylesheets that import the framework or declare a theme block."""
        matched: list[Path] = []
        discovery = discover_stylesheets(
            self._project_root, DEFAULT_STYLESHEET_GLOBS, self._exclude_globs
        )
        for path in discovery.paths:
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                continue
            if TAILWIND_IMPORT_RE.search(text) or THEME_BLOCK_RE.search(text):
                matched.append(path)
        return tuple(matched)

    def clear(self) -> None:
        self._marker = None
        self._checked = False

    def _find_marker(self) -> str | None:
        for name in CONFIG_FILE_NAMES:
            if (self._project_root / name).is_file():
                return name
        if self._package_declares_tailwind():
            return "package.json"
        for name in POSTCSS_CONFIG_NAMES:
            path = self._project_root / name
            if not path.is_file():
                continue
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as error:
                logger.warning("Failed to read %s: %s", name, error)
                continue
            if PACKAGE_NAME in content:
                return name
        stylesheets = self.stylesheets_with_markers()
        if stylesheets:
            return stylesheets[0].relative_to(self._project_root).as_posix()
        return None

    def _package_declares_tailwind(self) -> bool:
        path = self._project_root / "package.json"
        if not path.is_file():
            return False
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
            logger.warning("Failed to parse package.json: %s", error)
            return False
        if not isinstance(payload, dict):
            return False
        for section in ("dependencies", "devDependencies"):
            dependencies = payload.get(section)
            if isinstance(dependencies, dict) and PACKAGE_NAME in dependencies:
                return True
        return False
