"""Typed class shapes: field specs, registry, and the ``@copyable`` decorator."""

from propcopy.core.shape.core import ShapeRegistry, copyable, describe_type, get_registry
from propcopy.core.shape.models import FieldSpec, TypeShape

__all__ = [
    # Models
    "FieldSpec",
    "TypeShape",
    # Core
    "ShapeRegistry",
    "copyable",
    "describe_type",
    "get_registry",
]
