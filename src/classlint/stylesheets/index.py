"""Memoised index of class names defined by project stylesheets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from classlint.stylesheets.discovery import (
    DEFAULT_EXCLUDE_GLOBS,
    DEFAULT_STYLESHEET_GLOBS,
    discover_stylesheets,
)
from classlint.stylesheets.parser import classes_from_file

logger = logging.getLogger(__name__)

CacheKey = tuple[str, tuple[str, ...], tuple[str, ...]]


@dataclass(slots=True, frozen=True)
class IndexBuild:
    """Result of one uncached index build."""

    classes: frozenset[str]
    files: tuple[str, ...]
    warnings: tuple[str, ...]


def cache_key(
    base_dir: Path,
    include_globs: tuple[str, ...],
    exclude_globs: tuple[str, ...],
) -> CacheKey:
    """Return the memoisation key for one stylesheet corpus."""
    return (str(base_dir.resolve()), tuple(include_globs), tuple(exclude_globs))


class DefinedClassIndex:
    """Builds and caches the set of classes defined by stylesheets.

    One instance belongs to one analysis run. Builds with an equal
    ``(base_dir, include_globs, exclude_globs)`` key return the identical
    ``frozenset`` until :meth:`clear` is called.
    """

    def __init__(self) -> None:
        self._cache: dict[CacheKey, IndexBuild] = {}

    def build(
        self,
        base_dir: Path,
        include_globs: tuple[str, ...] = DEFAULT_STYLESHEET_GLOBS,
        exclude_globs: tuple[str, ...] = DEFAULT_EXCLUDE_GLOBS,
    ) -> frozenset[str]:
        return self.build_details(base_dir, include_globs, exclude_globs).classes

    def build_details(
        self,
        base_dir: Path,
        include_globs: tuple[str, ...] = DEFAULT_STYLESHEET_GLOBS,
        exclude_globs: tuple[str, ...] = DEFAULT_EXCLUDE_GLOBS,
    ) -> IndexBuild:
        """Return the cached build for this corpus, parsing files on first use."""
        key = cache_key(base_dir, include_globs, exclude_globs)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        discovery = discover_stylesheets(base_dir, include_globs, exclude_globs)
        classes: set[str] = set()
        warnings: list[str] = []
        for path in discovery.paths:
            parsed = classes_from_file(path)
            classes.update(parsed.names)
            warnings.extend(parsed.warnings)

        result = IndexBuild(
            classes=frozenset(classes),
            files=tuple(path.as_posix() for path in discovery.paths),
            warnings=tuple(warnings),
        )
        logger.debug(
            "Indexed %d classes from %d stylesheets under %s (%d candidates, %d excluded)",
            len(result.classes),
            len(result.files),
            key[0],
            discovery.total_candidates,
            discovery.excluded_by_glob,
        )
        self._cache[key] = result
        return result

    def warnings(self) -> tuple[str, ...]:
        """Return parse warnings from every cached build, in build order."""
        output: list[str] = []
        for build in self._cache.values():
            output.extend(build.warnings)
        return tuple(output)

    def clear(self) -> None:
        self._cache.clear()
