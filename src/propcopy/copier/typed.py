"""Copy engine for statically-typed destinations."""

from __future__ import annotations

from typing import Any

from propcopy.core.classify import ValueKind, is_assignable, is_mutable_sequence
from propcopy.composite import StaticComposite, as_composite
from propcopy.copier.context import CopyContext
from propcopy.copier.report import SkipReason
from propcopy.copier.sequence import align_and_copy


def copy_typed(source: Any, destination: StaticComposite, context: CopyContext) -> None:
    """Copy matching fields of ``source`` into a typed destination.

    Per field, in this order:
    1. No destination field with that name: skip.
    2. Source is a sequence: align into the destination's existing sequence
       (in place, so the field itself need not be writable).
    3. Destination field not writable: skip.
    4. Both sides composite: recurse into the destination's current value.
       A None on either side is a no-op; nothing is allocated.
    5. Private or ClassVar destination: skip.
    6. Source type not assignable to the destination type: skip.
    7. Assign.
    """
    # Late import to avoid circular dependency
    from propcopy.copier.core import copy_into

    include_properties = context.settings.include_properties
    for entry in as_composite(source, context.registry, include_properties).entries():
        name = entry.name
        field_context = context.descend(name)
        spec = destination.field_spec(name)
        if spec is None:
            field_context.skip(SkipReason.UNKNOWN_FIELD)
            continue

        if entry.kind is ValueKind.SEQUENCE:
            current = destination.get(name)
            if entry.value is None:
                field_context.skip(SkipReason.NULL_SEQUENCE)
            elif not is_mutable_sequence(current):
                field_context.skip(SkipReason.NOT_A_SEQUENCE)
            else:
                align_and_copy(entry.value, current, spec.element_type, field_context, copy_into)
            continue

        if entry.kind is ValueKind.AMBIGUOUS:
            field_context.skip(SkipReason.AMBIGUOUS_SOURCE)
            continue

        if not spec.writable:
            field_context.skip(SkipReason.NOT_WRITABLE)
            continue

        if entry.kind.is_reference and spec.kind.is_reference:
            current = destination.get(name)
            if entry.value is None or current is None:
                field_context.skip(SkipReason.NULL_COMPOSITE)
            else:
                copy_into(entry.value, current, field_context)
            continue

        if spec.private:
            field_context.skip(SkipReason.PRIVATE_SETTER)
            continue

        if spec.static:
            field_context.skip(SkipReason.STATIC_MEMBER)
            continue

        if not is_assignable(spec.declared_type, entry.descriptor.declared_type):
            field_context.skip(SkipReason.NOT_ASSIGNABLE)
            continue

        destination.set(name, entry.value)
        field_context.record_copy()
