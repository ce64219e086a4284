"""Duration bindings: ``difftime()`` over Arrow's ``*_between`` kernels."""

from __future__ import annotations

from typing import Any

# difftime() units -> Arrow kernel counting unit boundaries between two times.
DIFFTIME_UNITS: dict[str, str] = {
    "secs": "seconds_between",
    "mins": "minutes_between",
    "hours": "hours_between",
    "days": "days_between",
}


def register_bindings_duration(session: Any) -> None:
    """Register ``difftime(time1, time2, units=...)`` as ``time1 - time2``."""

    def _difftime(time1: Any, time2: Any, units: str = "secs") -> Any:
        if units not in DIFFTIME_UNITS:
            raise ValueError(
                f"difftime: unsupported units {units!r}. Supported: {list(DIFFTIME_UNITS)}"
            )
        # *_between(start, end) measures end - start
        return session.build_expr(DIFFTIME_UNITS[units], time2, time1)

    session.register("base::difftime", _difftime)
