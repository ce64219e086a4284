"""Conditional and missing-value bindings."""

from __future__ import annotations

from typing import Any

import pyarrow.compute as pc


def register_bindings_conditional(session: Any) -> None:
    """Register ``if_else``, ``is.na``, ``coalesce`` and ``between``."""
    build = session.build_expr

    def _if_else(condition: Any, true: Any, false: Any) -> Any:
        return build("if_else", condition, true, false)

    def _is_na(x: Any) -> Any:
        return build("is_null", x, options=pc.NullOptions(nan_is_null=True))

    def _coalesce(*args: Any) -> Any:
        return build("coalesce", *args)

    def _between(x: Any, left: Any, right: Any) -> Any:
        return build(
            "and_kleene",
            build("greater_equal", x, left),
            build("less_equal", x, right),
        )

    session.register("dplyr::if_else", _if_else)
    session.register("is.na", _is_na)
    session.register("coalesce", _coalesce)
    session.register("between", _between)
