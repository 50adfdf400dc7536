"""Adapter for statically-typed objects (dataclasses, Pydantic models, annotated classes)."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from propcopy.core.classify import (
    FieldDescriptor,
    FieldEntry,
    classify_type,
    element_type_of,
    narrow_type,
)
from propcopy.core.shape import FieldSpec, ShapeRegistry, TypeShape, get_registry
from propcopy.composite.protocol import CompositeKind

_MISSING = object()


class StaticComposite:
    """Typed object viewed through its class shape.

    Args:
        obj: Instance to adapt.
        registry: Shape registry (defaults to the global one).
        include_properties: Treat ``property`` members as fields.
    """

    __slots__ = ("_obj", "_shape")

    def __init__(
        self,
        obj: Any,
        registry: ShapeRegistry | None = None,
        include_properties: bool = True,
    ) -> None:
        self._obj = obj
        self._shape = (registry or get_registry()).describe(type(obj), include_properties)

    @property
    def kind(self) -> CompositeKind:
        return CompositeKind.STATIC

    @property
    def target(self) -> Any:
        return self._obj

    @property
    def shape(self) -> TypeShape:
        return self._shape

    def entries(self) -> Iterator[FieldEntry]:
        """Yield public readable fields in declaration order.

        Loose declarations (unions, ``Any``) holding a value are narrowed to the
        value's runtime type so that assignability is tested against what is
        actually being copied. Annotated attributes that were never assigned are
        not readable and are left out.
        """
        for spec in self._shape.readable_fields():
            value = getattr(self._obj, spec.name, _MISSING)
            if value is _MISSING:
                continue
            declared = narrow_type(spec.declared_type, value)
            yield FieldEntry(
                descriptor=FieldDescriptor(
                    name=spec.name,
                    declared_type=declared,
                    kind=classify_type(declared),
                    element_type=element_type_of(spec.declared_type),
                ),
                value=value,
            )

    def get(self, name: str) -> Any:
        return getattr(self._obj, name, None)

    def set(self, name: str, value: Any) -> None:
        setattr(self._obj, name, value)

    def field_spec(self, name: str) -> FieldSpec | None:
        return self._shape.get_field(name)
