"""Core primitives: classification, typed shapes, errors."""

from propcopy.core.classify import (
    FieldDescriptor,
    FieldEntry,
    ValueKind,
    classify_type,
    classify_value,
    element_type_of,
    is_assignable,
    is_reference_type,
)
from propcopy.core.errors import (
    ConstructionError,
    DepthLimitExceededError,
    InvalidArgumentError,
    PropCopyError,
)
from propcopy.core.shape import (
    FieldSpec,
    ShapeRegistry,
    TypeShape,
    copyable,
    describe_type,
    get_registry,
)
from propcopy.core.types import TypeTag

__all__ = [
    # Types
    "TypeTag",
    # Classify
    "ValueKind",
    "FieldDescriptor",
    "FieldEntry",
    "classify_type",
    "classify_value",
    "element_type_of",
    "is_assignable",
    "is_reference_type",
    # Shape
    "FieldSpec",
    "TypeShape",
    "ShapeRegistry",
    "copyable",
    "describe_type",
    "get_registry",
    # Errors
    "PropCopyError",
    "InvalidArgumentError",
    "DepthLimitExceededError",
    "ConstructionError",
]
