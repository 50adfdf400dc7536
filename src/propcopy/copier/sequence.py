"""Sequence alignment: copy a source sequence into an existing destination sequence.

Alignment is append/overwrite only:
- ``None`` source elements are skipped and the destination slot is left alone
- destination elements past the end of the source are never touched
- the destination list is extended in place, never replaced or truncated

Because of the append semantics, repeating a copy into a shorter destination
is not idempotent with respect to the first call's starting state.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any

from propcopy.core.classify import (
    ValueKind,
    classify_type,
    classify_value,
    element_type_of,
    is_assignable,
    is_mutable_sequence,
)
from propcopy.core.types import TypeTag
from propcopy.copier.context import CopyContext
from propcopy.copier.report import SkipReason

type CopyFn = Callable[[Any, Any, CopyContext], None]
"""Recursion hook: copy(source, destination, context)."""


@dataclass(slots=True, frozen=True)
class ElementPlan:
    """How to copy one element.

    Attributes:
        kind: SCALAR (assign), COMPOSITE (recurse) or SEQUENCE (nested alignment).
        factory: Builds a blank destination element when growing.
        element_type: Declared element type, if known. Scalars are checked against it.
    """

    kind: ValueKind
    factory: Callable[[], Any] | None = None
    element_type: TypeTag | None = None


def _first_present(dest_seq: Sequence[Any]) -> Any:
    return next((item for item in dest_seq if item is not None), None)


def _blank_factory(tag: TypeTag, context: CopyContext) -> Callable[[], Any]:
    def factory() -> Any:
        return context.registry.create_blank(tag)

    return factory


def plan_for_type(element_type: TypeTag, context: CopyContext) -> ElementPlan | None:
    """Plan from a declared element type. Returns None if the type is ambiguous."""
    kind = classify_type(element_type)
    if kind is ValueKind.SCALAR:
        return ElementPlan(kind=kind, element_type=element_type)
    if kind is ValueKind.AMBIGUOUS:
        return None
    return ElementPlan(
        kind=kind, factory=_blank_factory(element_type, context), element_type=element_type
    )


def plan_for_runtime(
    dest_seq: Sequence[Any], item: Any, context: CopyContext
) -> ElementPlan | None:
    """Infer a plan from the destination's existing elements, else from the source item.

    An empty destination can grow scalars, dynamic maps (as fresh ``dict``) and
    nested sequences (as fresh ``list``). A typed source element cannot be grown
    into an empty destination because the element type is unknown.
    """
    sample = _first_present(dest_seq)
    if sample is not None:
        kind = classify_value(sample)
        if kind is ValueKind.SCALAR:
            return ElementPlan(kind=kind)
        return ElementPlan(kind=kind, factory=_blank_factory(type(sample), context))

    kind = classify_value(item)
    if kind is ValueKind.SCALAR:
        return ElementPlan(kind=kind)
    if kind is ValueKind.SEQUENCE:
        return ElementPlan(kind=kind, factory=list)
    if kind is ValueKind.COMPOSITE and isinstance(item, Mapping):
        return ElementPlan(kind=kind, factory=dict)
    return None


def _grow_to(dest_seq: MutableSequence[Any], index: int) -> None:
    """Pad with None up to ``index`` so skipped source slots keep their positions."""
    while len(dest_seq) < index:
        dest_seq.append(None)


def _copy_element(
    index: int,
    item: Any,
    plan: ElementPlan,
    dest_seq: MutableSequence[Any],
    context: CopyContext,
    recurse: CopyFn,
) -> None:
    if plan.kind is ValueKind.SCALAR:
        if plan.element_type is not None and not is_assignable(plan.element_type, type(item)):
            context.skip(SkipReason.NOT_ASSIGNABLE)
            return
        if index < len(dest_seq):
            dest_seq[index] = item
        else:
            _grow_to(dest_seq, index)
            dest_seq.append(item)
        context.record_copy()
        return

    if classify_value(item) is not plan.kind:
        context.skip(SkipReason.NOT_ASSIGNABLE)
        return

    if index >= len(dest_seq):
        if plan.factory is None:
            context.skip(SkipReason.AMBIGUOUS_ELEMENT)
            return
        _grow_to(dest_seq, index)
        dest_seq.append(plan.factory())

    target = dest_seq[index]
    if target is None:
        context.skip(SkipReason.NULL_COMPOSITE)
        return

    if plan.kind is ValueKind.SEQUENCE:
        if not is_mutable_sequence(target):
            context.skip(SkipReason.NOT_A_SEQUENCE)
            return
        nested_type = element_type_of(plan.element_type) if plan.element_type is not None else None
        align_and_copy(item, target, nested_type, context, recurse)
    else:
        # Mixed lists: each slot dispatches on its own object, not on the plan's sample
        recurse(item, target, context)


def _align(
    source_seq: Sequence[Any],
    dest_seq: MutableSequence[Any],
    plan_for: Callable[[Any], ElementPlan | None],
    context: CopyContext,
    recurse: CopyFn,
) -> None:
    for index, item in enumerate(source_seq):
        element_context = context.at_index(index)
        if item is None:
            element_context.skip(SkipReason.NULL_ELEMENT)
            continue
        plan = plan_for(item)
        if plan is None:
            element_context.skip(SkipReason.AMBIGUOUS_ELEMENT)
            continue
        _copy_element(index, item, plan, dest_seq, element_context, recurse)


def align_and_copy(
    source_seq: Sequence[Any],
    dest_seq: MutableSequence[Any],
    element_type: TypeTag | None,
    context: CopyContext,
    recurse: CopyFn,
) -> None:
    """Copy ``source_seq`` into ``dest_seq`` whose declared element type may be known.

    Args:
        source_seq: Sequence read from the source.
        dest_seq: Existing destination sequence, mutated in place.
        element_type: Declared destination element type. If None or ambiguous,
            the element shape is inferred like a dynamic destination.
        context: Copy context positioned at the sequence field.
        recurse: Copies a composite source element into the destination element,
            dispatching on whether that element is typed or a map.
    """
    declared = plan_for_type(element_type, context) if element_type is not None else None
    if declared is not None:
        _align(source_seq, dest_seq, lambda _item: declared, context, recurse)
    else:
        align_and_copy_dynamic(source_seq, dest_seq, context, recurse)


def align_and_copy_dynamic(
    source_seq: Sequence[Any],
    dest_seq: MutableSequence[Any],
    context: CopyContext,
    recurse: CopyFn,
) -> None:
    """Copy ``source_seq`` into a destination sequence with no declared element type.

    Dynamic-map elements are grown as fresh ``dict`` instances. Existing
    elements are reused in place whatever their shape.
    """
    _align(
        source_seq,
        dest_seq,
        lambda item: plan_for_runtime(dest_seq, item, context),
        context,
        recurse,
    )
