"""Structured event logging for tabexpr.

Provides the event schema, a filesystem NDJSON sink, and safe emit
helpers that never raise uncaught exceptions.
"""

from tabexpr.logging.events import (
    EventLevel,
    EventType,
    TabexprEvent,
    emit,
    emit_error,
    emit_info,
    emit_warning,
    get_sink,
    set_project_dir,
)
from tabexpr.logging.sink import EventSink

__all__ = [
    "EventLevel",
    "EventSink",
    "EventType",
    "TabexprEvent",
    "emit",
    "emit_error",
    "emit_info",
    "emit_warning",
    "get_sink",
    "set_project_dir",
]
