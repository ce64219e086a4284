"""Compute backends: availability check, native catalogue and expression builder.

:class:`ArrowBackend` targets ``pyarrow.compute``.  Anything with the same
three methods can stand in for it (see :class:`ComputeBackend`).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol, cast

import pyarrow.compute as pc


class ComputeBackend(Protocol):
    """What the binding layer needs from a columnar engine."""

    def available(self) -> bool: ...

    def list_functions(self) -> Sequence[str]: ...

    def build_expr(self, native_name: str, *args: Any, options: Any = None) -> Any: ...


def field(name: str) -> pc.Expression:
    """Reference a column by name."""
    return pc.field(name)


def as_expression(value: Any) -> pc.Expression:
    """Wrap a literal as a scalar expression; expressions pass through."""
    if isinstance(value, pc.Expression):
        return value
    return pc.scalar(value)


class ArrowBackend:
    """Backend over the Arrow C++ compute function registry.

    Args:
        enabled: When False the backend reports itself unavailable, which
            turns native-function discovery off.
    """

    def __init__(self, *, enabled: bool = True) -> None:
        self._enabled = enabled

    def available(self) -> bool:
        if not self._enabled:
            return False
        return callable(getattr(pc, "list_functions", None))

    def list_functions(self) -> tuple[str, ...]:
        """Return sorted native compute function names.

        Raises:
            TypeError: If ``pyarrow.compute.list_functions`` is unavailable.
        """
        list_functions = getattr(pc, "list_functions", None)
        if not callable(list_functions):
            raise TypeError("pyarrow.compute.list_functions is unavailable.")
        callable_list = cast("Callable[[], Sequence[str]]", list_functions)
        return tuple(sorted(callable_list()))

    def build_expr(
        self,
        native_name: str,
        *args: Any,
        options: pc.FunctionOptions | None = None,
    ) -> pc.Expression:
        """Build a call node for the native function *native_name*.

        Non-expression arguments become scalar literals; use :func:`field`
        for column references.

        Args:
            native_name: Arrow compute function name, e.g. ``"abs"``.
            *args: Expressions or literals.
            options: Optional ``FunctionOptions``, e.g. ``pc.RoundOptions(2)``.

        Returns:
            The unevaluated call expression.
        """
        arguments = [as_expression(a) for a in args]
        return pc.Expression._call(native_name, arguments, options)
