"""Wrap arbitrary values in the matching composite adapter."""

from __future__ import annotations

from typing import Any

from propcopy.core.classify import is_dynamic_composite
from propcopy.core.shape import ShapeRegistry
from propcopy.composite.dynamic import DynamicComposite
from propcopy.composite.protocol import Composite
from propcopy.composite.static import StaticComposite


def as_composite(
    value: Any,
    registry: ShapeRegistry | None = None,
    include_properties: bool = True,
) -> Composite:
    """Adapt a value: mappings become DynamicComposite, everything else StaticComposite.

    Args:
        value: Object to adapt (must not be None).
        registry: Shape registry for typed objects.
        include_properties: Treat ``property`` members as fields.

    Returns:
        Composite adapter over the value.
    """
    if isinstance(value, (StaticComposite, DynamicComposite)):
        return value
    if is_dynamic_composite(value):
        return DynamicComposite(value)
    return StaticComposite(value, registry=registry, include_properties=include_properties)
