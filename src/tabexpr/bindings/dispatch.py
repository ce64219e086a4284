"""Invoke bindings by name from a registry or a binding cache."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tabexpr.bindings.aggregate import AggregateDescriptor
from tabexpr.bindings.errors import BindingNotFoundError, BindingTypeError
from tabexpr.bindings.names import bare_name
from tabexpr.bindings.registry import AggregateRegistry, Binding, BindingRegistry


def call_binding(registry: BindingRegistry, name: str, *args: Any, **kwargs: Any) -> Any:
    """Call the scalar binding registered as *name*.

    Raises:
        BindingNotFoundError: If nothing is bound under *name*.
    """
    fn = registry.lookup(name)
    if fn is None:
        raise BindingNotFoundError(name, registry.kind)
    return fn(*args, **kwargs)


def call_binding_agg(
    registry: AggregateRegistry, name: str, *args: Any, **kwargs: Any
) -> AggregateDescriptor:
    """Call the aggregate binding registered as *name*.

    Raises:
        BindingNotFoundError: If nothing is bound under *name*.
        BindingTypeError: If the binding does not return a descriptor.
    """
    fn = registry.lookup(name)
    if fn is None:
        raise BindingNotFoundError(name, registry.kind)
    result = fn(*args, **kwargs)
    if not isinstance(result, AggregateDescriptor):
        raise BindingTypeError(bare_name(name), result)
    return result


def call_cached(cache: Mapping[str, Binding], name: str, *args: Any, **kwargs: Any) -> Any:
    """Call *name* through a :class:`~tabexpr.bindings.cache.BindingCache`.

    Raises:
        BindingNotFoundError: If the cache has no entry for *name*.
    """
    fn = cache.get(name)
    if fn is None:
        fn = cache.get(bare_name(name))
    if fn is None:
        raise BindingNotFoundError(name, "cache")
    return fn(*args, **kwargs)
