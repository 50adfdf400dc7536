"""Classifier models: value kinds and enumerated field entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from propcopy.core.types import TypeTag


class ValueKind(Enum):
    """Shape of a value as seen by the copier."""

    SCALAR = auto()  # Copied by assignment
    SEQUENCE = auto()  # Aligned element by element
    COMPOSITE = auto()  # Copied by recursion
    AMBIGUOUS = auto()  # Cannot be classified; always skipped

    @property
    def is_reference(self) -> bool:
        """True for kinds that are handled by recursion rather than assignment."""
        return self is ValueKind.COMPOSITE


@dataclass(slots=True, frozen=True)
class FieldDescriptor:
    """Static description of a named field.

    Attributes:
        name: Field or key name.
        declared_type: Declared type, or the runtime type for dynamic sources.
        kind: Classification of declared_type.
        element_type: Element type when kind is SEQUENCE and it is known.
    """

    name: str
    declared_type: TypeTag
    kind: ValueKind
    element_type: TypeTag | None = None

    @property
    def is_sequence(self) -> bool:
        return self.kind is ValueKind.SEQUENCE


@dataclass(slots=True, frozen=True)
class FieldEntry:
    """A FieldDescriptor paired with the value read from the source."""

    descriptor: FieldDescriptor
    value: Any

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def kind(self) -> ValueKind:
        return self.descriptor.kind
