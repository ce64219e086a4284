"""Aggregate bindings; registered in the aggregate namespace only."""

from __future__ import annotations

from typing import Any

from tabexpr.bindings.aggregate import AggregateDescriptor
from tabexpr.engine.backend import as_expression

# Aggregates whose Arrow kernel shares the R name.
SIMPLE_AGGREGATES = ("sum", "mean", "min", "max", "any", "all")


def register_bindings_aggregate(session: Any) -> None:
    """Register summary bindings such as ``sum``, ``sd`` and ``n_distinct``."""
    for name in SIMPLE_AGGREGATES:
        session.register_agg(f"base::{name}", _simple(name))

    def _n_distinct(x: Any, na_rm: bool = False) -> AggregateDescriptor:
        return AggregateDescriptor(
            function="count_distinct",
            data=as_expression(x),
            options={"mode": "only_valid" if na_rm else "all"},
        )

    def _sd(x: Any, na_rm: bool = False, ddof: int = 1) -> AggregateDescriptor:
        return _variance_like("stddev", x, na_rm, ddof)

    def _var(x: Any, na_rm: bool = False, ddof: int = 1) -> AggregateDescriptor:
        return _variance_like("variance", x, na_rm, ddof)

    session.register_agg("dplyr::n_distinct", _n_distinct)
    session.register_agg("stats::sd", _sd)
    session.register_agg("stats::var", _var)


def _simple(function: str) -> Any:
    def binding(x: Any, na_rm: bool = False) -> AggregateDescriptor:
        return AggregateDescriptor(
            function=function,
            data=as_expression(x),
            options={"skip_nulls": na_rm, "min_count": 0},
        )

    binding.__name__ = function
    return binding


def _variance_like(function: str, x: Any, na_rm: bool, ddof: int) -> AggregateDescriptor:
    return AggregateDescriptor(
        function=function,
        data=as_expression(x),
        options={"ddof": ddof, "skip_nulls": na_rm, "min_count": 0},
    )
