"""Composite adapters over typed and dynamic objects."""

from propcopy.composite.core import as_composite
from propcopy.composite.dynamic import DynamicComposite
from propcopy.composite.protocol import Composite, CompositeKind
from propcopy.composite.static import StaticComposite

__all__ = [
    "Composite",
    "CompositeKind",
    "StaticComposite",
    "DynamicComposite",
    "as_composite",
]
