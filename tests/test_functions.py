"""End-to-end tests: catalogue bindings evaluated by Arrow compute."""

from __future__ import annotations

import datetime
import math

import polars as pl
import pyarrow as pa
import pyarrow.compute as pc
import pytest

from tabexpr.engine import field, filter_rows, mutate, summarise
from tabexpr.session import BindingSession, init_session


@pytest.fixture(scope="module")
def session() -> BindingSession:
    return init_session()


def _eval(table: pa.Table, expr: pc.Expression) -> list:
    return mutate(table, out=expr)["out"].to_pylist()


# ────────────────────────────────────────────────────────────────
# Backend
# ────────────────────────────────────────────────────────────────


class TestArrowBackend:
    def test_available(self, session: BindingSession) -> None:
        assert session.backend.available()

    def test_lists_real_functions(self, session: BindingSession) -> None:
        names = session.backend.list_functions()
        assert "abs" in names
        assert list(names) == sorted(names)

    def test_build_expr_matches_pyarrow(self, session: BindingSession) -> None:
        built = session.build_expr("add", field("x"), 1)
        assert built.equals(pc.add(pc.field("x"), pc.scalar(1)))

    def test_cache_has_native_bindings(self, session: BindingSession) -> None:
        assert session.cache is not None
        assert "arrow_abs" in session.cache
        assert "arrow_utf8_upper" in session.cache

    def test_native_binding_via_cache(self, session: BindingSession) -> None:
        expr = session.call_cached("arrow_abs", field("x"))
        assert expr.equals(pc.abs(pc.field("x")))


# ────────────────────────────────────────────────────────────────
# Math
# ────────────────────────────────────────────────────────────────


class TestMath:
    table = pa.table({"x": [-1.5, 2.5, 4.0]})

    def test_abs(self, session: BindingSession) -> None:
        assert _eval(self.table, session.call("abs", field("x"))) == [1.5, 2.5, 4.0]

    def test_ceiling_floor(self, session: BindingSession) -> None:
        assert _eval(self.table, session.call("ceiling", field("x"))) == [-1.0, 3.0, 4.0]
        assert _eval(self.table, session.call("floor", field("x"))) == [-2.0, 2.0, 4.0]

    def test_log_is_natural(self, session: BindingSession) -> None:
        t = pa.table({"x": [1.0, math.e]})
        out = _eval(t, session.call("log", field("x")))
        assert out[0] == 0.0
        assert out[1] == pytest.approx(1.0)

    def test_round_half_to_even(self, session: BindingSession) -> None:
        assert _eval(self.table, session.call("round", field("x"))) == [-2.0, 2.0, 4.0]

    def test_round_digits(self, session: BindingSession) -> None:
        t = pa.table({"x": [1.234, 5.678]})
        assert _eval(t, session.call("round", field("x"), digits=2)) == [1.23, 5.68]

    def test_cached_call_matches_direct(self, session: BindingSession) -> None:
        direct = session.call("sqrt", field("x"))
        cached = session.call_cached("sqrt", field("x"))
        assert direct.equals(cached)


# ────────────────────────────────────────────────────────────────
# String
# ────────────────────────────────────────────────────────────────


class TestString:
    table = pa.table({"s": ["  Apple ", "banana", "Cherry"], "t": ["x", "y", "z"]})

    def test_case(self, session: BindingSession) -> None:
        assert _eval(self.table, session.call("toupper", field("t"))) == ["X", "Y", "Z"]
        assert _eval(self.table, session.call("tolower", field("s")))[2] == "cherry"

    def test_trim_and_nchar(self, session: BindingSession) -> None:
        trimmed = session.call("str_trim", field("s"))
        assert _eval(self.table, trimmed) == ["Apple", "banana", "Cherry"]
        assert _eval(self.table, session.call("nchar", trimmed)) == [5, 6, 6]

    def test_starts_ends_with(self, session: BindingSession) -> None:
        assert _eval(self.table, session.call("startsWith", field("s"), "ban")) == [False, True, False]
        assert _eval(self.table, session.call("endsWith", field("s"), "rry")) == [False, False, True]

    def test_str_detect(self, session: BindingSession) -> None:
        assert _eval(self.table, session.call("stringr::str_detect", field("s"), "an+")) == [False, True, False]
        negated = session.call("str_detect", field("s"), "an+", negate=True)
        assert _eval(self.table, negated) == [True, False, True]

    def test_paste0(self, session: BindingSession) -> None:
        assert _eval(self.table, session.call("paste0", field("t"), "-", field("t"))) == ["x-x", "y-y", "z-z"]


# ────────────────────────────────────────────────────────────────
# Conditional
# ────────────────────────────────────────────────────────────────


class TestConditional:
    table = pa.table({"x": [1.0, None, float("nan"), 5.0], "y": [9.0, 8.0, 7.0, 6.0]})

    def test_is_na(self, session: BindingSession) -> None:
        assert _eval(self.table, session.call("is.na", field("x"))) == [False, True, True, False]

    def test_coalesce(self, session: BindingSession) -> None:
        out = _eval(self.table, session.call("coalesce", field("x"), field("y")))
        assert out[0] == 1.0
        assert out[1] == 8.0
        assert out[3] == 5.0

    def test_if_else(self, session: BindingSession) -> None:
        cond = session.call_cached("arrow_greater", field("y"), 7.5)
        out = _eval(self.table, session.call("if_else", cond, "big", "small"))
        assert out == ["big", "big", "small", "small"]

    def test_between(self, session: BindingSession) -> None:
        assert _eval(self.table, session.call("between", field("y"), 7, 8)) == [False, True, True, False]


# ────────────────────────────────────────────────────────────────
# Type and datetime
# ────────────────────────────────────────────────────────────────


class TestType:
    def test_as_integer_truncates(self, session: BindingSession) -> None:
        t = pa.table({"x": [1.7, -1.7]})
        assert _eval(t, session.call("as.integer", field("x"))) == [1, -1]

    def test_as_character(self, session: BindingSession) -> None:
        t = pa.table({"x": [1, 22]})
        assert _eval(t, session.call("as.character", field("x"))) == ["1", "22"]

    def test_as_numeric(self, session: BindingSession) -> None:
        t = pa.table({"x": [1, 2]})
        result = mutate(t, y=session.call("as.numeric", field("x")))
        assert result.schema.field("y").type == pa.float64()


class TestDatetime:
    table = pa.table(
        {"ts": pa.array([datetime.datetime(2024, 3, 5, 10, 30, 15)], pa.timestamp("s"))}
    )

    def test_components(self, session: BindingSession) -> None:
        assert _eval(self.table, session.call("year", field("ts"))) == [2024]
        assert _eval(self.table, session.call("lubridate::month", field("ts"))) == [3]
        assert _eval(self.table, session.call("day", field("ts"))) == [5]
        assert _eval(self.table, session.call("hour", field("ts"))) == [10]
        assert _eval(self.table, session.call("minute", field("ts"))) == [30]

    def test_yday(self, session: BindingSession) -> None:
        assert _eval(self.table, session.call("yday", field("ts"))) == [65]


class TestArray:
    table = pa.table({"xs": pa.array([[1, 2, 3], [4], []], pa.list_(pa.int64()))})

    def test_lengths(self, session: BindingSession) -> None:
        assert _eval(self.table, session.call("lengths", field("xs"))) == [3, 1, 0]

    def test_pluck_is_one_based(self, session: BindingSession) -> None:
        t = pa.table({"xs": pa.array([[1, 2], [3, 4]], pa.list_(pa.int64()))})
        assert _eval(t, session.call("pluck", field("xs"), 2)) == [2, 4]


class TestDuration:
    table = pa.table(
        {
            "start": pa.array([datetime.datetime(2024, 3, 5, 10, 0, 0)], pa.timestamp("s")),
            "end": pa.array([datetime.datetime(2024, 3, 5, 10, 30, 0)], pa.timestamp("s")),
        }
    )

    def test_difftime_default_seconds(self, session: BindingSession) -> None:
        assert _eval(self.table, session.call("difftime", field("end"), field("start"))) == [1800]

    def test_difftime_units(self, session: BindingSession) -> None:
        expr = session.call("difftime", field("end"), field("start"), units="mins")
        assert _eval(self.table, expr) == [30]

    def test_difftime_unknown_units(self, session: BindingSession) -> None:
        with pytest.raises(ValueError, match="unsupported units 'weeks'"):
            session.call("difftime", field("end"), field("start"), units="weeks")


# ────────────────────────────────────────────────────────────────
# Evaluation helpers and aggregates
# ────────────────────────────────────────────────────────────────


class TestEvaluate:
    table = pa.table({"g": ["a", "a", "b"], "x": [1, 2, 3]})

    def test_mutate_keeps_columns(self, session: BindingSession) -> None:
        result = mutate(self.table, y=session.call("abs", field("x")))
        assert result.column_names == ["g", "x", "y"]

    def test_mutate_replaces_column(self, session: BindingSession) -> None:
        result = mutate(self.table, x=session.call_cached("arrow_negate", field("x")))
        assert result.column_names == ["g", "x"]
        assert result["x"].to_pylist() == [-1, -2, -3]

    def test_filter_rows(self, session: BindingSession) -> None:
        result = filter_rows(self.table, session.call_cached("arrow_greater", field("x"), 1))
        assert result["x"].to_pylist() == [2, 3]

    def test_rejects_other_inputs(self) -> None:
        with pytest.raises(TypeError, match="Expected pyarrow.Table or polars.DataFrame"):
            mutate({"x": [1]})

    def test_polars_round_trip(self, session: BindingSession) -> None:
        df = pl.DataFrame({"x": [-1, 2]})
        result = mutate(df, y=session.call("abs", field("x")))
        assert isinstance(result, pl.DataFrame)
        assert result["y"].to_list() == [1, 2]

    def test_summarise_ungrouped(self, session: BindingSession) -> None:
        result = summarise(
            self.table,
            total=session.call_agg("sum", field("x")),
            avg=session.call_agg("mean", field("x")),
            spread=session.call_agg("stats::sd", field("x")),
        )
        assert result.num_rows == 1
        assert result["total"].to_pylist() == [6]
        assert result["avg"].to_pylist() == [2.0]
        assert result["spread"].to_pylist() == [pytest.approx(1.0)]

    def test_summarise_grouped(self, session: BindingSession) -> None:
        result = summarise(
            self.table,
            group_by=["g"],
            total=session.call_agg("sum", field("x")),
            distinct=session.call_agg("n_distinct", field("x")),
        ).sort_by("g")
        assert result.column_names == ["g", "total", "distinct"]
        assert result["g"].to_pylist() == ["a", "b"]
        assert result["total"].to_pylist() == [3, 3]
        assert result["distinct"].to_pylist() == [2, 1]

    def test_summarise_computed_input(self, session: BindingSession) -> None:
        doubled = session.call_cached("arrow_multiply", field("x"), 2)
        result = summarise(self.table, total=session.call_agg("sum", doubled))
        assert result["total"].to_pylist() == [12]

    def test_summarise_na_rm(self, session: BindingSession) -> None:
        t = pa.table({"x": [1.0, None, 3.0]})
        kept = summarise(t, m=session.call_agg("max", field("x")))
        dropped = summarise(t, m=session.call_agg("max", field("x"), na_rm=True))
        assert kept["m"].to_pylist() == [None]
        assert dropped["m"].to_pylist() == [3.0]

    def test_summarise_polars(self, session: BindingSession) -> None:
        df = pl.DataFrame({"g": [1, 2, 2], "x": [1, 2, 3]})
        result = summarise(df, group_by=["g"], n=session.call_agg("sum", field("x"))).sort("g")
        assert isinstance(result, pl.DataFrame)
        assert result["n"].to_list() == [1, 5]
