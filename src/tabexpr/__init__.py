"""tabexpr -- function-binding registry and dispatch for Arrow compute expressions."""

__version__ = "0.1.0"

from tabexpr.bindings import (  # noqa: E402
    AggregateDescriptor,
    AggregateRegistry,
    BindingCache,
    BindingNotFoundError,
    BindingRegistry,
    split_name,
)
from tabexpr.session import BindingSession, init_session  # noqa: E402

__all__ = [
    "AggregateDescriptor",
    "AggregateRegistry",
    "BindingCache",
    "BindingNotFoundError",
    "BindingRegistry",
    "BindingSession",
    "__version__",
    "init_session",
    "split_name",
]
