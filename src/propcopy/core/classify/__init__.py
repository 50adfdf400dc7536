"""Value classification: kinds, field descriptors, assignability."""

from propcopy.core.classify.models import FieldDescriptor, FieldEntry, ValueKind
from propcopy.core.classify.operations import (
    classify_type,
    classify_value,
    element_type_of,
    is_assignable,
    is_dynamic_composite,
    is_mutable_sequence,
    is_reference_type,
    is_typed_composite_type,
    narrow_type,
)

__all__ = [
    # Models
    "ValueKind",
    "FieldDescriptor",
    "FieldEntry",
    # Operations
    "classify_type",
    "classify_value",
    "element_type_of",
    "is_assignable",
    "is_dynamic_composite",
    "is_mutable_sequence",
    "is_reference_type",
    "is_typed_composite_type",
    "narrow_type",
]
