"""Pure functions classifying declared types and runtime values.

The same rules are applied to declared field types (typed destinations) and to
the runtime type of a value (dynamic destinations), so both copy engines agree
on the shape of a field even though the destination representations differ.
"""

from __future__ import annotations

import types
from collections.abc import Mapping, MutableSequence, Sequence
from dataclasses import is_dataclass
from typing import Annotated, Any, Literal, TypeVar, Union, get_args, get_origin

from propcopy.core.classify.models import ValueKind
from propcopy.core.types import TypeTag

_TEXT_TYPES = (str, bytes, bytearray)
_UNION_ORIGINS = (Union, types.UnionType)
_NONE_TYPE = type(None)

COPYABLE_MARKER = "__propcopy_copyable__"


def is_pydantic_model(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def is_typed_composite_type(cls: Any) -> bool:
    """Check if a class describes a typed composite with named fields.

    Dataclasses, Pydantic models and classes marked with ``@copyable`` qualify.
    """
    if not isinstance(cls, type):
        return False
    if is_dataclass(cls) or is_pydantic_model(cls):
        return True
    return bool(getattr(cls, COPYABLE_MARKER, False))


def is_dynamic_composite(value: Any) -> bool:
    """True for map-like values whose fields are discovered at copy time."""
    return isinstance(value, Mapping)


def is_union(tag: TypeTag) -> bool:
    return get_origin(tag) in _UNION_ORIGINS


def strip_annotations(tag: TypeTag) -> TypeTag:
    """Remove ``Annotated`` wrappers from a type tag."""
    while get_origin(tag) is Annotated:
        tag = get_args(tag)[0]
    return tag


def _strip_optional(tag: TypeTag) -> TypeTag:
    """Reduce ``X | None`` to ``X``. Other unions are returned unchanged."""
    tag = strip_annotations(tag)
    if is_union(tag):
        members = [m for m in get_args(tag) if m is not _NONE_TYPE]
        if len(members) == 1:
            return strip_annotations(members[0])
    return tag


def classify_type(tag: TypeTag) -> ValueKind:
    """Classify a declared type as scalar, sequence or composite.

    Args:
        tag: Declared type or typing form.

    Returns:
        ValueKind for the tag. Text types are always SCALAR even though they
        are sequences. ``Any``, ``object``, ``None``, type variables and unions
        mixing different kinds are AMBIGUOUS.
    """
    tag = _strip_optional(tag)
    if tag is Any or tag is object or tag is _NONE_TYPE or tag is None:
        return ValueKind.AMBIGUOUS
    if isinstance(tag, TypeVar):
        return ValueKind.AMBIGUOUS

    origin = get_origin(tag)
    if origin in _UNION_ORIGINS:
        kinds = {classify_type(m) for m in get_args(tag) if m is not _NONE_TYPE}
        if len(kinds) == 1:
            return kinds.pop()
        return ValueKind.AMBIGUOUS
    if origin is Literal:
        return ValueKind.SCALAR

    cls = origin if origin is not None else tag
    if not isinstance(cls, type):
        return ValueKind.AMBIGUOUS
    if issubclass(cls, _TEXT_TYPES):
        return ValueKind.SCALAR
    if issubclass(cls, Sequence):
        return ValueKind.SEQUENCE
    if issubclass(cls, Mapping) or is_typed_composite_type(cls):
        return ValueKind.COMPOSITE
    return ValueKind.SCALAR


def classify_value(value: Any) -> ValueKind:
    """Classify a runtime value. ``None`` is AMBIGUOUS."""
    if value is None:
        return ValueKind.AMBIGUOUS
    if isinstance(value, _TEXT_TYPES):
        return ValueKind.SCALAR
    if isinstance(value, Sequence):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping) or is_typed_composite_type(type(value)):
        return ValueKind.COMPOSITE
    return ValueKind.SCALAR


def is_reference_type(tag: TypeTag) -> bool:
    """True if values of this type are copied by recursion."""
    return classify_type(tag) is ValueKind.COMPOSITE


def is_mutable_sequence(value: Any) -> bool:
    return isinstance(value, MutableSequence) and not isinstance(value, _TEXT_TYPES)


def element_type_of(tag: TypeTag) -> TypeTag | None:
    """Unwrap a sequence type to its element type.

    ``list[Line]`` gives ``Line``; ``tuple[int, ...]`` gives ``int``. Unparameterised
    sequences and non-sequence tags give None.
    """
    tag = _strip_optional(tag)
    if classify_type(tag) is not ValueKind.SEQUENCE:
        return None
    args = [a for a in get_args(tag) if a is not Ellipsis]
    if not args:
        return None
    first = args[0]
    if any(a != first for a in args[1:]):
        return None
    return first


def narrow_type(declared: TypeTag, value: Any) -> TypeTag:
    """Narrow a loose declared type to the runtime type of a present value.

    Unions and AMBIGUOUS declarations holding a non-None value are replaced by
    ``type(value)``. Everything else is returned unchanged.
    """
    if value is None:
        return declared
    stripped = strip_annotations(declared)
    if is_union(stripped) or classify_type(stripped) is ValueKind.AMBIGUOUS:
        return type(value)
    return declared


def is_assignable(target: TypeTag, source: TypeTag) -> bool:
    """Check whether values declared as ``source`` can be stored in ``target``.

    Same-or-subclass only; no coercion. A union source must be fully accepted by
    the target; a union target accepts a source accepted by any member.

    Args:
        target: Declared type of the destination field.
        source: Declared type of the source value.

    Returns:
        True if assignment is allowed.
    """
    target = strip_annotations(target)
    source = strip_annotations(source)
    if target is Any or target is object:
        return True
    if source is Any:
        return False
    if is_union(source):
        return all(is_assignable(target, member) for member in get_args(source))
    if is_union(target):
        return any(is_assignable(member, source) for member in get_args(target))
    if source is None:
        source = _NONE_TYPE
    if target is None:
        target = _NONE_TYPE

    if get_origin(source) is Literal:
        return all(is_assignable(target, type(v)) for v in get_args(source))
    if get_origin(target) is Literal:
        return target == source

    target_cls = get_origin(target) or target
    source_cls = get_origin(source) or source
    if not isinstance(target_cls, type) or not isinstance(source_cls, type):
        return False
    return issubclass(source_cls, target_cls)
