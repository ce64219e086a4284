"""Generate forwarding bindings for every native function the backend exposes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tabexpr.bindings.registry import Binding

if TYPE_CHECKING:
    from tabexpr.engine.backend import ComputeBackend

NATIVE_PREFIX = "arrow_"


def _forwarder(backend: ComputeBackend, native_name: str) -> Binding:
    def binding(*args: Any, **kwargs: Any) -> Any:
        return backend.build_expr(native_name, *args, **kwargs)

    binding.__name__ = f"{NATIVE_PREFIX}{native_name}"
    binding.__qualname__ = binding.__name__
    return binding


def discover_native_bindings(backend: ComputeBackend) -> dict[str, Binding]:
    """Return ``{"arrow_<name>": forwarder}`` for each native function.

    An unavailable backend yields an empty dict; the catalogue is listed at
    most once per call.

    Args:
        backend: The compute backend to check and enumerate.

    Returns:
        Generated bindings keyed with the ``arrow_`` prefix.
    """
    if not backend.available():
        return {}
    return {
        f"{NATIVE_PREFIX}{name}": _forwarder(backend, name)
        for name in backend.list_functions()
    }
