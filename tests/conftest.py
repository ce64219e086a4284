"""Shared fixtures for tabexpr tests."""

from __future__ import annotations

from typing import Any

import pytest


class FakeBackend:
    """Backend double that records what the binding layer asks of it."""

    def __init__(self, functions: tuple[str, ...] = ("abs", "ceil"), available: bool = True) -> None:
        self.functions = list(functions)
        self._available = available
        self.list_calls = 0
        self.build_calls: list[tuple[str, tuple[Any, ...], Any]] = []

    def available(self) -> bool:
        return self._available

    def list_functions(self) -> list[str]:
        self.list_calls += 1
        return list(self.functions)

    def build_expr(self, native_name: str, *args: Any, options: Any = None) -> Any:
        self.build_calls.append((native_name, args, options))
        return ("expr", native_name, args)


@pytest.fixture
def make_backend():
    """Factory for :class:`FakeBackend` instances."""
    return FakeBackend


@pytest.fixture(autouse=True)
def _detach_event_sink():
    """Keep the module-level event sink from leaking between tests."""
    from tabexpr.logging.events import set_project_dir

    yield
    set_project_dir(None)
