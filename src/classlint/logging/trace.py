"""Structured JSONL debug trace."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path


@dataclass(slots=True, frozen=True)
class TraceEvent:
    """One record of analysis activity."""

    timestamp: str
    kind: str
    metadata: dict[str, object]


def utc_timestamp() -> str:
    """Return an ISO-8601 UTC timestamp."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def make_event(kind: str, **metadata: object) -> TraceEvent:
    return TraceEvent(timestamp=utc_timestamp(), kind=kind, metadata=dict(sorted(metadata.items())))


class DebugTrace:
    """Append-only JSONL trace writer and bounded reader."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        """Return on-disk JSONL path."""
        return self._path

    def append(self, event: TraceEvent) -> None:
        """Append an event as one JSON object per line."""
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(asdict(event), sort_keys=True, default=str))
            handle.write("\n")

    def record(self, kind: str, **metadata: object) -> None:
        self.append(make_event(kind, **metadata))

    def read(self, kind: str | None = None, limit: int = 50) -> list[dict[str, object]]:
        """Read the most recent events, optionally filtered by kind."""
        if limit < 1:
            return []
        entries: list[dict[str, object]] = []
        if not self._path.exists():
            return entries
        with self._path.open("r", encoding="utf-8") as handle:
            for line in handle:
                stripped = line.strip()
                if not stripped:
                    continue
                try:
                    record = json.loads(stripped)
                except json.JSONDecodeError:
                    continue
                if kind is not None and record.get("kind") != kind:
                    continue
                entries.append(record)
        if len(entries) <= limit:
            return entries
        return entries[-limit:]
