"""Columnar compute backend and table evaluation helpers."""

from tabexpr.engine.backend import ArrowBackend, ComputeBackend, as_expression, field
from tabexpr.engine.evaluate import filter_rows, mutate, summarise

__all__ = [
    "ArrowBackend",
    "ComputeBackend",
    "as_expression",
    "field",
    "filter_rows",
    "mutate",
    "summarise",
]
