"""Typed result of an aggregate binding."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AggregateDescriptor(BaseModel):
    """An aggregation to perform: kernel name, input expression, options.

    ``data`` is a compute expression (``pyarrow.compute.Expression`` for the
    Arrow backend), so arbitrary types are allowed.  ``options`` are passed
    to the kernel's options class at evaluation time and are stored as a
    read-only copy.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    function: str
    data: Any
    options: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("options", mode="after")
    @classmethod
    def _freeze_options(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))
