"""Math bindings: R-style names over Arrow arithmetic kernels."""

from __future__ import annotations

from typing import Any

import pyarrow.compute as pc

# R name -> Arrow kernel, for one-argument functions.
UNARY_MATH: dict[str, str] = {
    "abs": "abs",
    "sqrt": "sqrt",
    "exp": "exp",
    "log": "ln",
    "log2": "log2",
    "log10": "log10",
    "ceiling": "ceil",
    "floor": "floor",
    "trunc": "trunc",
    "sign": "sign",
}


def register_bindings_math(session: Any) -> None:
    """Register math bindings on *session*'s scalar registry."""
    for name, native in UNARY_MATH.items():
        session.register(name, _unary(session, native))

    def _round(x: Any, digits: int = 0) -> Any:
        # R rounds halves to even
        options = pc.RoundOptions(ndigits=digits, round_mode="half_to_even")
        return session.build_expr("round", x, options=options)

    session.register("round", _round)


def _unary(session: Any, native: str) -> Any:
    def binding(x: Any) -> Any:
        return session.build_expr(native, x)

    binding.__name__ = native
    return binding
