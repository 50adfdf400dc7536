"""propcopy: structural property copier for typed and dynamic object graphs.

Usage:
    from propcopy import copy_properties

    @dataclass
    class Point:
        x: int = 0
        y: int = 0

    target = Point()
    copy_properties({"x": 3, "y": 4, "z": 5}, target)  # z is skipped
    # target == Point(x=3, y=4)
"""

__version__ = "0.1.0"

# Core primitives
from propcopy.core import (
    ConstructionError,
    DepthLimitExceededError,
    FieldDescriptor,
    FieldSpec,
    InvalidArgumentError,
    PropCopyError,
    ShapeRegistry,
    TypeShape,
    TypeTag,
    ValueKind,
    classify_type,
    classify_value,
    copyable,
    get_registry,
    is_assignable,
)

# Composite adapters
from propcopy.composite import (
    Composite,
    CompositeKind,
    DynamicComposite,
    StaticComposite,
    as_composite,
)

# Configuration
from propcopy.config import CopierSettings

# Copier
from propcopy.copier import (
    CopyReport,
    CopySkipWarning,
    SkipReason,
    SkipRecord,
    copy_properties,
)

__all__ = [
    # Version
    "__version__",
    # Entry point
    "copy_properties",
    # Core
    "TypeTag",
    "ValueKind",
    "FieldDescriptor",
    "FieldSpec",
    "TypeShape",
    "ShapeRegistry",
    "copyable",
    "get_registry",
    "classify_type",
    "classify_value",
    "is_assignable",
    # Composite
    "Composite",
    "CompositeKind",
    "StaticComposite",
    "DynamicComposite",
    "as_composite",
    # Config
    "CopierSettings",
    # Reports
    "CopyReport",
    "CopySkipWarning",
    "SkipReason",
    "SkipRecord",
    # Errors
    "PropCopyError",
    "InvalidArgumentError",
    "DepthLimitExceededError",
    "ConstructionError",
]
