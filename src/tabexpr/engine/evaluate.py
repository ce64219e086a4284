"""Run binding-built expressions over a table.

Accepts either a ``pyarrow.Table`` or a ``polars.DataFrame`` and returns the
same kind it was given.  Projection and filtering go through
``pyarrow.dataset``; aggregation through ``Table.group_by`` or, with no
grouping keys, ``pyarrow.compute.call_function``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable

import polars as pl
import pyarrow as pa
import pyarrow.compute as pc
import pyarrow.dataset as ds

from tabexpr.bindings.aggregate import AggregateDescriptor

# Options classes for aggregate kernels that do not take ScalarAggregateOptions.
_AGG_OPTIONS: dict[str, Callable[..., pc.FunctionOptions]] = {
    "count": pc.CountOptions,
    "count_distinct": pc.CountOptions,
    "stddev": pc.VarianceOptions,
    "variance": pc.VarianceOptions,
}

_STAGE_PREFIX = "__agg_"


def _to_arrow(table: Any) -> tuple[pa.Table, bool]:
    if isinstance(table, pl.DataFrame):
        return table.to_arrow(), True
    if isinstance(table, pa.Table):
        return table, False
    raise TypeError(f"Expected pyarrow.Table or polars.DataFrame, got {type(table).__name__}")


def _restore(table: pa.Table, was_polars: bool) -> Any:
    if was_polars:
        return pl.from_arrow(table)
    return table


def _agg_options(desc: AggregateDescriptor) -> pc.FunctionOptions | None:
    if not desc.options:
        return None
    options_cls = _AGG_OPTIONS.get(desc.function, pc.ScalarAggregateOptions)
    return options_cls(**desc.options)


def mutate(table: Any, **exprs: pc.Expression) -> Any:
    """Add (or replace) columns computed from expressions.

    Args:
        table: Input table.
        **exprs: Output column name to expression.

    Returns:
        The input columns plus the projected ones.
    """
    arrow, was_polars = _to_arrow(table)
    columns: dict[str, pc.Expression] = {name: pc.field(name) for name in arrow.column_names}
    columns.update(exprs)
    result = ds.dataset(arrow).to_table(columns=columns)
    return _restore(result, was_polars)


def filter_rows(table: Any, predicate: pc.Expression) -> Any:
    """Keep the rows for which *predicate* is true."""
    arrow, was_polars = _to_arrow(table)
    result = ds.dataset(arrow).to_table(filter=predicate)
    return _restore(result, was_polars)


def summarise(
    table: Any,
    group_by: Sequence[str] = (),
    **aggregations: AggregateDescriptor,
) -> Any:
    """Evaluate aggregate descriptors, optionally per group.

    Each descriptor's ``data`` expression is projected into a staging column
    first, so descriptors may aggregate computed values, not just fields.

    Args:
        table: Input table.
        group_by: Grouping key columns; empty for a single-row result.
        **aggregations: Output column name to descriptor.

    Returns:
        One row per group (or one row total), keys first.
    """
    arrow, was_polars = _to_arrow(table)
    keys = list(group_by)

    staging = {f"{_STAGE_PREFIX}{name}": desc.data for name, desc in aggregations.items()}
    projection: dict[str, pc.Expression] = {k: pc.field(k) for k in keys}
    projection.update(staging)
    staged = ds.dataset(arrow).to_table(columns=projection)

    if keys:
        specs: list[tuple[Any, ...]] = []
        for name, desc in aggregations.items():
            options = _agg_options(desc)
            spec: tuple[Any, ...] = (f"{_STAGE_PREFIX}{name}", desc.function)
            if options is not None:
                spec += (options,)
            specs.append(spec)
        grouped = staged.group_by(keys).aggregate(specs)
        out_cols = [
            f"{_STAGE_PREFIX}{name}_{desc.function}" for name, desc in aggregations.items()
        ]
        result = grouped.select(keys + out_cols).rename_columns(keys + list(aggregations))
    else:
        values = {
            name: [
                pc.call_function(
                    desc.function, [staged[f"{_STAGE_PREFIX}{name}"]], _agg_options(desc)
                ).as_py()
            ]
            for name, desc in aggregations.items()
        }
        result = pa.table(values)

    return _restore(result, was_polars)
