"""Copy engine for dynamic (map-like) destinations.

Unlike the typed engine, non-sequence values are written by reference without
recursion: a nested composite in the source becomes the very same object under
the destination key. Only sequences are aligned element by element.
"""

from __future__ import annotations

from typing import Any

from propcopy.core.classify import ValueKind, is_mutable_sequence
from propcopy.composite import DynamicComposite, as_composite
from propcopy.copier.context import CopyContext
from propcopy.copier.report import SkipReason
from propcopy.copier.sequence import align_and_copy_dynamic


def copy_dynamic(source: Any, destination: DynamicComposite, context: CopyContext) -> None:
    """Copy every source entry into a dynamic destination.

    Sequence values are aligned into the destination's existing sequence under
    the same key; a missing or non-sequence entry there is skipped. Values that
    cannot be classified (None read from a dynamic source) are skipped. All
    other values overwrite or insert ``destination[name]``.
    """
    # Late import to avoid circular dependency
    from propcopy.copier.core import copy_into

    include_properties = context.settings.include_properties
    for entry in as_composite(source, context.registry, include_properties).entries():
        name = entry.name
        field_context = context.descend(name)

        if entry.kind is ValueKind.SEQUENCE:
            current = destination.get(name)
            if entry.value is None:
                field_context.skip(SkipReason.NULL_SEQUENCE)
            elif not is_mutable_sequence(current):
                field_context.skip(SkipReason.NOT_A_SEQUENCE)
            else:
                align_and_copy_dynamic(entry.value, current, field_context, copy_into)
            continue

        if entry.kind is ValueKind.AMBIGUOUS:
            field_context.skip(SkipReason.AMBIGUOUS_SOURCE)
            continue

        destination.set(name, entry.value)
        field_context.record_copy()
