"""Adapter for dynamic, map-like objects."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from propcopy.core.classify import FieldDescriptor, FieldEntry, classify_value
from propcopy.composite.protocol import CompositeKind


class DynamicComposite:
    """Mapping viewed as a composite whose fields are its current keys.

    Declared types are inferred from the runtime value at read time. A key
    holding None classifies as AMBIGUOUS.

    Args:
        mapping: Mapping to adapt. Writes require a MutableMapping.
    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: Mapping[str, Any]) -> None:
        self._mapping = mapping

    @property
    def kind(self) -> CompositeKind:
        return CompositeKind.DYNAMIC

    @property
    def target(self) -> Mapping[str, Any]:
        return self._mapping

    @property
    def writable(self) -> bool:
        """Whether keys can be written. False for read-only mappings."""
        return isinstance(self._mapping, MutableMapping)

    def entries(self) -> Iterator[FieldEntry]:
        """Yield one entry per key in iteration order."""
        for name, value in self._mapping.items():
            yield FieldEntry(
                descriptor=FieldDescriptor(
                    name=name,
                    declared_type=type(value),
                    kind=classify_value(value),
                ),
                value=value,
            )

    def get(self, name: str) -> Any:
        return self._mapping.get(name)

    def set(self, name: str, value: Any) -> None:
        if not isinstance(self._mapping, MutableMapping):
            raise TypeError(f"{type(self._mapping).__name__} does not support item assignment")
        self._mapping[name] = value
