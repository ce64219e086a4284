"""List-column bindings over Arrow's element-wise list kernels."""

from __future__ import annotations

from typing import Any

# R name -> Arrow kernel.
ARRAY_FUNCTION_MAP: dict[str, str] = {
    "lengths": "list_value_length",
}


def register_bindings_array(session: Any) -> None:
    for name, native in ARRAY_FUNCTION_MAP.items():
        session.register(name, _forward(session, native))

    def _pluck(x: Any, index: int) -> Any:
        # R positions start at 1, Arrow list indices at 0
        return session.build_expr("list_element", x, index - 1)

    session.register("purrr::pluck", _pluck)


def _forward(session: Any, native: str) -> Any:
    def binding(*args: Any) -> Any:
        return session.build_expr(native, *args)

    binding.__name__ = native
    return binding
