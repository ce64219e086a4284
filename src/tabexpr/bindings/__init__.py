"""Function-binding registry and dispatch.

Public API::

    from tabexpr.bindings import BindingRegistry, assemble_cache, call_binding
"""

from tabexpr.bindings.aggregate import AggregateDescriptor
from tabexpr.bindings.cache import BindingCache, assemble_cache
from tabexpr.bindings.discovery import NATIVE_PREFIX, discover_native_bindings
from tabexpr.bindings.dispatch import call_binding, call_binding_agg, call_cached
from tabexpr.bindings.errors import BindingError, BindingNotFoundError, BindingTypeError
from tabexpr.bindings.names import bare_name, split_name
from tabexpr.bindings.registry import AggregateRegistry, Binding, BindingRegistry

__all__ = [
    "NATIVE_PREFIX",
    "AggregateDescriptor",
    "AggregateRegistry",
    "Binding",
    "BindingCache",
    "BindingError",
    "BindingNotFoundError",
    "BindingRegistry",
    "BindingTypeError",
    "assemble_cache",
    "bare_name",
    "call_binding",
    "call_binding_agg",
    "call_cached",
    "discover_native_bindings",
    "split_name",
]
