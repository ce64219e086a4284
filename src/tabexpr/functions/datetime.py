"""Date/time component bindings."""

from __future__ import annotations

from typing import Any

COMPONENTS = ("year", "month", "day", "hour", "minute", "second")


def register_bindings_datetime(session: Any) -> None:
    """Register ``year()``, ``month()`` ... as component extractors."""
    for component in COMPONENTS:
        session.register(f"lubridate::{component}", _component(session, component))

    def _yday(x: Any) -> Any:
        # Arrow counts day_of_year from 1 like lubridate
        return session.build_expr("day_of_year", x)

    session.register("yday", _yday)


def _component(session: Any, native: str) -> Any:
    def binding(x: Any) -> Any:
        return session.build_expr(native, x)

    binding.__name__ = native
    return binding
