"""Type-cast bindings (``as.*``)."""

from __future__ import annotations

from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

CASTS: dict[str, pa.DataType] = {
    "as.integer": pa.int64(),
    "as.numeric": pa.float64(),
    "as.double": pa.float64(),
    "as.character": pa.string(),
    "as.logical": pa.bool_(),
}


def register_bindings_type(session: Any) -> None:
    for name, target in CASTS.items():
        session.register(name, _cast(session, target))


def _cast(session: Any, target: pa.DataType) -> Any:
    # as.integer() truncates toward zero rather than erroring
    options = pc.CastOptions(target, allow_float_truncate=True)

    def binding(x: Any) -> Any:
        return session.build_expr("cast", x, options=options)

    return binding
