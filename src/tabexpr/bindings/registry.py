"""Name-keyed registries for scalar and aggregate bindings.

A binding is a closure that takes compute expressions and returns either an
expression (scalar namespace) or an :class:`AggregateDescriptor` (aggregate
namespace).  The two namespaces are separate registry instances and never
see each other's entries.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Callable

from tabexpr.bindings.names import bare_name

Binding = Callable[..., Any]


class BindingRegistry:
    """Mutable mapping from bare name to a scalar binding.

    Registration is the only way in: :meth:`register` overwrites silently and
    hands back whatever was bound before, so callers can detect shadowing.
    """

    kind = "scalar"

    def __init__(self) -> None:
        self._bindings: dict[str, Binding] = {}

    def register(self, name: str, fn: Binding | None) -> Binding | None:
        """Bind *fn* under the bare form of *name*, or unbind when *fn* is None.

        Unbinding a name that was never bound leaves the registry untouched.

        Args:
            name: ``"fn"`` or ``"pkg::fn"``; the package part is dropped.
            fn: The binding, or ``None`` to remove an existing one.

        Returns:
            The previously bound closure, or ``None``.
        """
        key = self._key(name)
        previous = self._bindings.get(key)

        if fn is None:
            if previous is not None:
                del self._bindings[key]
        else:
            self._bindings[key] = fn

        return previous

    def unregister(self, name: str) -> Binding | None:
        """Remove the binding for *name*; same as ``register(name, None)``."""
        return self.register(name, None)

    def lookup(self, name: str) -> Binding | None:
        """Return the binding for *name* (namespace stripped), or ``None``."""
        return self._bindings.get(self._key(name))

    def _key(self, name: str) -> str:
        # An exact key wins, so a stored bare name that itself contains
        # "::" (registered as "a::b::c") stays reachable.
        if name in self._bindings:
            return name
        return bare_name(name)

    def snapshot(self) -> dict[str, Binding]:
        """Return a plain-dict copy of the current bindings."""
        return dict(self._bindings)

    def names(self) -> list[str]:
        """Return the registered bare names, sorted."""
        return sorted(self._bindings)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} bindings)"


class AggregateRegistry(BindingRegistry):
    """Registry for bindings that return an :class:`AggregateDescriptor`."""

    kind = "aggregate"
