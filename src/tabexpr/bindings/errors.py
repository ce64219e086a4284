"""Error types for binding registration and dispatch."""

from __future__ import annotations


class BindingError(Exception):
    """Base class for all binding-related errors."""


class BindingNotFoundError(KeyError, BindingError):
    """Call to a name that has no binding in the searched namespace.

    Attributes:
        name: The name that was called (as given, before namespace stripping).
        namespace: Which table was searched: ``scalar``, ``aggregate`` or ``cache``.
    """

    def __init__(self, name: str, namespace: str = "scalar") -> None:
        self.name = name
        self.namespace = namespace
        super().__init__(name)

    def __str__(self) -> str:
        return f"No {self.namespace} binding registered for {self.name!r}"


class BindingTypeError(TypeError, BindingError):
    """An aggregate binding returned something other than a descriptor.

    Attributes:
        name: The aggregate binding that misbehaved.
    """

    def __init__(self, name: str, got: object) -> None:
        self.name = name
        super().__init__(
            f"Aggregate binding {name!r} must return an AggregateDescriptor, "
            f"got {type(got).__name__}"
        )
