"""Immutable, once-built lookup table for the query translation hot path."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from tabexpr.bindings.discovery import discover_native_bindings
from tabexpr.bindings.registry import Binding, BindingRegistry

if TYPE_CHECKING:
    from tabexpr.engine.backend import ComputeBackend


class BindingCache(Mapping[str, Binding]):
    """Read-only union of registered and discovered scalar bindings.

    Built by :func:`assemble_cache`; later registrations are not reflected
    until the cache is assembled again.
    """

    def __init__(self, bindings: Mapping[str, Binding]) -> None:
        self._bindings = MappingProxyType(dict(bindings))

    def __getitem__(self, name: str) -> Binding:
        return self._bindings[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"BindingCache({len(self)} bindings)"


def assemble_cache(registry: BindingRegistry, backend: ComputeBackend) -> BindingCache:
    """Merge *registry*'s current bindings with discovered native bindings.

    Registry entries go in first and are never replaced by a discovered
    binding of the same name.  Aggregate bindings are not cached.

    Args:
        registry: The scalar registry to snapshot.
        backend: Backend used for native-function discovery.

    Returns:
        A new immutable :class:`BindingCache`.
    """
    merged = registry.snapshot()
    for name, fn in discover_native_bindings(backend).items():
        merged.setdefault(name, fn)
    return BindingCache(merged)
