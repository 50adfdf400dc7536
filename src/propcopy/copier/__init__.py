"""Object-graph copier: entry point, engines, sequence alignment, reports."""

from propcopy.copier.context import CopyContext
from propcopy.copier.core import copy_into, copy_properties
from propcopy.copier.dynamic import copy_dynamic
from propcopy.copier.report import CopyReport, CopySkipWarning, SkipReason, SkipRecord
from propcopy.copier.sequence import align_and_copy, align_and_copy_dynamic
from propcopy.copier.typed import copy_typed

__all__ = [
    # Entry point
    "copy_properties",
    "copy_into",
    # Engines
    "copy_typed",
    "copy_dynamic",
    "align_and_copy",
    "align_and_copy_dynamic",
    # Context and reports
    "CopyContext",
    "CopyReport",
    "CopySkipWarning",
    "SkipReason",
    "SkipRecord",
]
