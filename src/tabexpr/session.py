"""Binding session: the registries, backend and cache one translation uses.

A :class:`BindingSession` is built once at startup (:func:`init_session`)
and passed to whatever translates queries.  It owns the scalar and
aggregate registries, the compute backend, and the binding cache assembled
after the built-in catalogue has been registered.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from tabexpr.bindings.aggregate import AggregateDescriptor
from tabexpr.bindings.cache import BindingCache, assemble_cache
from tabexpr.bindings.discovery import NATIVE_PREFIX
from tabexpr.bindings.dispatch import call_binding, call_binding_agg, call_cached
from tabexpr.bindings.errors import BindingError
from tabexpr.bindings.names import bare_name
from tabexpr.bindings.registry import AggregateRegistry, Binding, BindingRegistry
from tabexpr.config import load_config
from tabexpr.engine.backend import ArrowBackend, ComputeBackend
from tabexpr.functions import BINDING_GROUPS
from tabexpr.logging.events import (
    BACKEND_DISABLED,
    BINDING_GROUP_ERROR,
    BINDING_SHADOWED,
    EventType,
    emit_error,
    emit_info,
    emit_warning,
    set_project_dir,
)

log = logging.getLogger(__name__)


class BindingSession:
    """Scalar and aggregate registries plus the cache built from them.

    Args:
        backend: Compute backend; defaults to :class:`ArrowBackend`.
    """

    def __init__(self, backend: ComputeBackend | None = None) -> None:
        self.backend: ComputeBackend = backend if backend is not None else ArrowBackend()
        self.scalar = BindingRegistry()
        self.aggregate = AggregateRegistry()
        self.cache: BindingCache | None = None

    # -- registration ------------------------------------------------------

    def register(self, name: str, fn: Binding | None) -> Binding | None:
        """Bind (or with ``None``, unbind) a scalar binding; returns the previous one."""
        return self.scalar.register(name, fn)

    def register_agg(self, name: str, fn: Binding | None) -> Binding | None:
        """Bind (or with ``None``, unbind) an aggregate binding; returns the previous one."""
        return self.aggregate.register(name, fn)

    # -- dispatch ----------------------------------------------------------

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        return call_binding(self.scalar, name, *args, **kwargs)

    def call_agg(self, name: str, *args: Any, **kwargs: Any) -> AggregateDescriptor:
        return call_binding_agg(self.aggregate, name, *args, **kwargs)

    def call_cached(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Dispatch through the assembled cache (the translation hot path).

        Raises:
            BindingError: If :meth:`assemble_cache` has not run yet.
            BindingNotFoundError: If the cache has no entry for *name*.
        """
        if self.cache is None:
            raise BindingError("Binding cache has not been assembled; call assemble_cache() first")
        return call_cached(self.cache, name, *args, **kwargs)

    def build_expr(self, native_name: str, *args: Any, options: Any = None) -> Any:
        """Forward to the backend's expression builder."""
        return self.backend.build_expr(native_name, *args, options=options)

    # -- cache -------------------------------------------------------------

    def assemble_cache(self) -> BindingCache:
        """Snapshot the scalar registry plus native bindings into the cache.

        Later registrations are not visible through :meth:`call_cached`
        until this runs again.
        """
        self.cache = assemble_cache(self.scalar, self.backend)
        return self.cache


class _GroupRecorder:
    """Session stand-in handed to a catalogue group.

    Every registration that replaces or removes an existing binding is
    logged, including a name registered twice by the same group.
    """

    def __init__(self, session: BindingSession, group: str) -> None:
        self._session = session
        self._group = group

    def __getattr__(self, attr: str) -> Any:
        return getattr(self._session, attr)

    def register(self, name: str, fn: Binding | None) -> Binding | None:
        previous = self._session.register(name, fn)
        self._report("scalar", name, fn, previous)
        return previous

    def register_agg(self, name: str, fn: Binding | None) -> Binding | None:
        previous = self._session.register_agg(name, fn)
        self._report("aggregate", name, fn, previous)
        return previous

    def _report(self, kind: str, name: str, fn: Binding | None, previous: Binding | None) -> None:
        if previous is None:
            return
        context = {"group": self._group, "namespace": kind, "name": bare_name(name)}
        if fn is None:
            emit_info(
                EventType.binding_removed,
                f"Binding group {self._group!r} removed {kind} binding {bare_name(name)!r}",
                context,
            )
        else:
            emit_warning(
                EventType.binding_overridden,
                f"Binding group {self._group!r} replaced {kind} binding {bare_name(name)!r}",
                context,
                error_code=BINDING_SHADOWED,
            )


def _register_group(session: BindingSession, group: str) -> None:
    """Run one catalogue group, logging any binding it shadows."""
    try:
        register_fn = BINDING_GROUPS[group]
    except KeyError:
        raise ValueError(
            f"Unknown binding group: {group!r}. Available: {sorted(BINDING_GROUPS)}"
        ) from None

    try:
        register_fn(_GroupRecorder(session, group))
    except Exception as exc:
        emit_error(
            EventType.binding_group_failed,
            f"Registering binding group {group!r} failed: {exc}",
            {"group": group},
            error_code=BINDING_GROUP_ERROR,
        )
        raise

    log.debug("registered binding group %s", group)


def init_session(
    project_dir: Path | None = None,
    *,
    config: dict[str, Any] | None = None,
    backend: ComputeBackend | None = None,
) -> BindingSession:
    """Build a session: register the catalogue, then assemble the cache once.

    Args:
        project_dir: Project root; its ``tabexpr.yaml`` is read and events
            are logged under ``logs/``.  ``None`` uses the default config
            and detaches any event sink left by an earlier session.
        config: Explicit configuration, bypassing ``tabexpr.yaml``.
        backend: Compute backend; defaults to an :class:`ArrowBackend`
            honouring ``discover_native_functions``.

    Returns:
        The initialized session, with ``session.cache`` populated.

    Raises:
        ValueError: If the configuration names an unknown binding group.
    """
    cfg = config if config is not None else load_config(project_dir)
    set_project_dir(project_dir, fsync=bool(cfg.get("logging_fsync", False)))

    if backend is None:
        backend = ArrowBackend(enabled=bool(cfg.get("discover_native_functions", True)))
    session = BindingSession(backend)

    groups = list(cfg.get("binding_groups") or [])
    for group in groups:
        _register_group(session, group)
    emit_info(
        EventType.bindings_registered,
        f"Registered {len(session.scalar)} scalar and {len(session.aggregate)} aggregate bindings",
        {
            "groups": groups,
            "scalar_count": len(session.scalar),
            "aggregate_count": len(session.aggregate),
        },
    )

    if not backend.available():
        emit_warning(
            EventType.backend_unavailable,
            "Compute backend unavailable; native functions will not be bound",
            error_code=BACKEND_DISABLED,
        )

    cache = session.assemble_cache()
    native_count = sum(1 for name in cache if name.startswith(NATIVE_PREFIX) and name not in session.scalar)
    emit_info(
        EventType.cache_assembled,
        f"Binding cache assembled with {len(cache)} entries",
        {"size": len(cache), "native_count": native_count},
    )
    log.debug("binding cache assembled: %d entries (%d native)", len(cache), native_count)

    emit_info(EventType.session_initialized, "Binding session initialized")
    return session
