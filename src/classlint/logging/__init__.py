"""Structured logging utilities."""

from .trace import DebugTrace, TraceEvent, make_event, utc_timestamp

__all__ = ["DebugTrace", "TraceEvent", "make_event", "utc_timestamp"]
