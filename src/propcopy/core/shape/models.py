"""Shape models: per-class field specifications."""

from __future__ import annotations

from dataclasses import dataclass, field

from propcopy.core.classify import FieldDescriptor, ValueKind, classify_type, element_type_of
from propcopy.core.types import TypeTag


@dataclass(slots=True, frozen=True)
class FieldSpec:
    """Access-controlled field on a typed class.

    Attributes:
        name: Attribute name.
        declared_type: Annotated type (``Any`` if unannotated).
        readable: Instance value can be read.
        writable: Instance value can be reassigned.
        private: Name is underscore-prefixed.
        static: Declared as a ``ClassVar``.
    """

    name: str
    declared_type: TypeTag
    readable: bool = True
    writable: bool = True
    private: bool = False
    static: bool = False

    @property
    def kind(self) -> ValueKind:
        return classify_type(self.declared_type)

    @property
    def element_type(self) -> TypeTag | None:
        return element_type_of(self.declared_type)

    @property
    def is_public_instance_field(self) -> bool:
        """Readable, non-private instance field (what source enumeration yields)."""
        return self.readable and not self.private and not self.static

    def describe(self) -> FieldDescriptor:
        """Build the FieldDescriptor for this field."""
        return FieldDescriptor(
            name=self.name,
            declared_type=self.declared_type,
            kind=self.kind,
            element_type=self.element_type,
        )


@dataclass(slots=True)
class TypeShape:
    """Ordered field specifications of a typed class.

    Attributes:
        type_name: Fully qualified class name.
        fields: Field specs in declaration order.
    """

    type_name: str
    fields: tuple[FieldSpec, ...]
    _by_name: dict[str, FieldSpec] = field(init=False, repr=False, default_factory=dict)

    def __post_init__(self) -> None:
        for spec in self.fields:
            self._by_name.setdefault(spec.name, spec)

    def get_field(self, name: str) -> FieldSpec | None:
        """Look up a field by name. Returns None if the class has no such field."""
        return self._by_name.get(name)

    def readable_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self.fields if f.is_public_instance_field)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self.fields)
