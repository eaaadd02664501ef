"""Deterministic stylesheet discovery with fnmatch include/exclude globs."""

from __future__ import annotations

import fnmatch
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_STYLESHEET_GLOBS = ("**/*.css",)
DEFAULT_EXCLUDE_GLOBS = ("**/node_modules/**",)


@dataclass(slots=True, frozen=True)
class DiscoveryResult:
    """Matched stylesheet paths and deterministic scan counters."""

    paths: tuple[Path, ...]
    total_candidates: int
    excluded_by_glob: int


def matches_glob(relative_path: str, globs: tuple[str, ...]) -> bool:
    """Return True when a POSIX relative path matches any glob.

    Each path is tested bare and anchored with a leading ``/`` so that
    ``**/*.css`` also matches files sitting directly under the root; a
    ``**/`` segment may also match zero directories (``src/**/*.css``
    matches ``src/app.css``).
    """
    anchored = f"/{relative_path}"
    for pattern in globs:
        for candidate in {pattern, pattern.replace("**/", "")}:
            if fnmatch.fnmatch(relative_path, candidate) or fnmatch.fnmatch(anchored, candidate):
                return True
    return False


def discover_stylesheets(
    base_dir: Path,
    include_globs: tuple[str, ...] = DEFAULT_STYLESHEET_GLOBS,
    exclude_globs: tuple[str, ...] = DEFAULT_EXCLUDE_GLOBS,
) -> DiscoveryResult:
    """List files under ``base_dir`` matching include globs, sorted by relative path."""
    root = base_dir.resolve()
    excluded_dir_names = _excluded_dir_names(exclude_globs)
    matched: list[tuple[str, Path]] = []
    total_candidates = 0
    excluded_by_glob = 0
    stack: list[Path] = [root]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as entries:
                ordered_entries = sorted(entries, key=lambda item: item.name)
        except OSError:
            continue
        for entry in reversed(ordered_entries):
            full_path = Path(entry.path)
            relative = full_path.relative_to(root).as_posix()
            if entry.is_dir(follow_symlinks=False):
                if entry.name in excluded_dir_names and matches_glob(
                    f"{relative}/", exclude_globs
                ):
                    continue
                stack.append(full_path)
                continue
            if not entry.is_file(follow_symlinks=False):
                continue
            if not matches_glob(relative, include_globs):
                continue
            total_candidates += 1
            if matches_glob(relative, exclude_globs):
                excluded_by_glob += 1
                continue
            matched.append((relative, full_path))
    matched.sort(key=lambda item: item[0])
    return DiscoveryResult(
        paths=tuple(path for _, path in matched),
        total_candidates=total_candidates,
        excluded_by_glob=excluded_by_glob,
    )


def _excluded_dir_names(exclude_globs: tuple[str, ...]) -> set[str]:
    """Extract directory-name prunes from **/name/** glob patterns."""
    output: set[str] = set()
    for pattern in exclude_globs:
        if not pattern.startswith("**/") or not pattern.endswith("/**"):
            continue
        name = pattern[3:-3].strip("/")
        if not name:
            continue
        if any(char in name for char in "*?[]{}"):
            continue
        output.add(name)
    return output
