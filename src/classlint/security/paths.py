"""Base-directory resolution scoped to the project root."""

from __future__ import annotations

from pathlib import Path


class ConfigurationError(ValueError):
    """Raised when configuration would let analysis read outside the project."""

    def __init__(self, reason: str, hint: str) -> None:
        super().__init__(reason)
        self.reason = reason
        self.hint = hint


def resolve_base_dir(project_root: Path, candidate: str | None = None) -> Path:
    """Resolve ``candidate`` against the project root, refusing anything outside it."""
    root = project_root.resolve()
    if candidate is None or candidate == "":
        return root

    if "\0" in candidate:
        raise ConfigurationError(
            reason="base_dir contains invalid characters.",
            hint="Remove null bytes from the configured base_dir.",
        )

    normalized = candidate.replace("\\", "/")
    resolved = (root / normalized).resolve(strict=False)
    if not resolved.is_relative_to(root):
        raise ConfigurationError(
            reason=f"base_dir must be within the project directory. Attempted path: {resolved}",
            hint="Use a directory located under the project root.",
        )
    return resolved
