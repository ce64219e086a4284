"""Built-in binding catalogue, grouped by domain.

Each group is a ``register_bindings_<group>(session)`` function that calls
``session.register`` / ``session.register_agg``.
"""

from __future__ import annotations

from typing import Any, Callable

from tabexpr.functions.array import register_bindings_array
from tabexpr.functions.aggregate import register_bindings_aggregate
from tabexpr.functions.conditional import register_bindings_conditional
from tabexpr.functions.datetime import register_bindings_datetime
from tabexpr.functions.duration import register_bindings_duration
from tabexpr.functions.math import register_bindings_math
from tabexpr.functions.string import register_bindings_string
from tabexpr.functions.type import register_bindings_type

BINDING_GROUPS: dict[str, Callable[[Any], None]] = {
    "array": register_bindings_array,
    "aggregate": register_bindings_aggregate,
    "conditional": register_bindings_conditional,
    "datetime": register_bindings_datetime,
    "duration": register_bindings_duration,
    "math": register_bindings_math,
    "string": register_bindings_string,
    "type": register_bindings_type,
}

__all__ = [
    "BINDING_GROUPS",
    "register_bindings_array",
    "register_bindings_aggregate",
    "register_bindings_conditional",
    "register_bindings_datetime",
    "register_bindings_duration",
    "register_bindings_math",
    "register_bindings_string",
    "register_bindings_type",
]
