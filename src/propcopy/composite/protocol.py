"""Composite capability protocol.

The copy engines never inspect objects directly. They talk to one of two
adapters through this small interface:
- StaticComposite: typed objects with a fixed, access-controlled field set
- DynamicComposite: map-like objects whose keys are discovered at copy time

Write access is per field on StaticComposite (``field_spec``) and per object on
DynamicComposite (``writable``).
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any, Protocol

from propcopy.core.classify import FieldEntry


class CompositeKind(Enum):
    """Variant tag the public entry point dispatches on."""

    STATIC = "static"
    DYNAMIC = "dynamic"


class Composite(Protocol):
    """Capability interface over a composite value."""

    @property
    def kind(self) -> CompositeKind:
        """Which variant this adapter is."""
        ...

    @property
    def target(self) -> Any:
        """The wrapped object."""
        ...

    def entries(self) -> Iterator[FieldEntry]:
        """Lazily enumerate readable named values. Restartable on each call."""
        ...

    def get(self, name: str) -> Any:
        """Read the current value of a field/key (None if absent)."""
        ...

    def set(self, name: str, value: Any) -> None:
        """Write a field/key."""
        ...
