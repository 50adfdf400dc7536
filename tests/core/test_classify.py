"""Tests for value classification and assignability.

Why these tests exist:
- Both copy engines decide recurse vs. assign from these classifications
- Strings must never be treated as sequences
- Assignability is the only type gate on the typed path (no coercion)
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Optional

import pytest

from propcopy import ValueKind, classify_type, classify_value, is_assignable
from propcopy.core.classify import (
    element_type_of,
    is_mutable_sequence,
    is_reference_type,
    is_typed_composite_type,
    narrow_type,
)


class Color(Enum):
    RED = "red"
    BLUE = "blue"


@dataclass
class Item:
    value: int = 0


@dataclass
class SpecialItem(Item):
    note: str = ""


class Plain:
    pass


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        (int, ValueKind.SCALAR),
        (float, ValueKind.SCALAR),
        (str, ValueKind.SCALAR),
        (bytes, ValueKind.SCALAR),
        (Color, ValueKind.SCALAR),
        (datetime, ValueKind.SCALAR),
        (set[int], ValueKind.SCALAR),
        (Literal["a", "b"], ValueKind.SCALAR),
        (Plain, ValueKind.SCALAR),
        (list[int], ValueKind.SEQUENCE),
        (list, ValueKind.SEQUENCE),
        (tuple[int, ...], ValueKind.SEQUENCE),
        (Sequence[str], ValueKind.SEQUENCE),
        (dict[str, int], ValueKind.COMPOSITE),
        (Item, ValueKind.COMPOSITE),
        (Item | None, ValueKind.COMPOSITE),
        (Optional[Item], ValueKind.COMPOSITE),
        (Annotated[Item, "meta"], ValueKind.COMPOSITE),
        (int | str, ValueKind.SCALAR),
        (int | Item, ValueKind.AMBIGUOUS),
        (Any, ValueKind.AMBIGUOUS),
        (object, ValueKind.AMBIGUOUS),
        (type(None), ValueKind.AMBIGUOUS),
    ],
)
def test_classify_type(tag, expected):
    assert classify_type(tag) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ValueKind.AMBIGUOUS),
        (3, ValueKind.SCALAR),
        ("abc", ValueKind.SCALAR),
        (b"abc", ValueKind.SCALAR),
        (Color.RED, ValueKind.SCALAR),
        ([1, 2], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        ([], ValueKind.SEQUENCE),
        ({}, ValueKind.COMPOSITE),
        (Item(), ValueKind.COMPOSITE),
        (Plain(), ValueKind.SCALAR),
    ],
)
def test_classify_value(value, expected):
    assert classify_value(value) is expected


def test_strings_are_never_sequences():
    """CRITICAL: str is iterable and indexable but must be copied by assignment.

    Why: Aligning a string character by character would corrupt text fields.
    """
    assert classify_type(str) is ValueKind.SCALAR
    assert classify_value("hello") is ValueKind.SCALAR
    assert not is_mutable_sequence("hello")


def test_typed_and_dynamic_classification_agree():
    """Declared-type and runtime-value classification give the same kind."""
    for value in [1, "x", [1], {"a": 1}, Item()]:
        assert classify_type(type(value)) is classify_value(value)


def test_reference_types():
    assert is_reference_type(Item)
    assert is_reference_type(dict[str, Any])
    assert not is_reference_type(str)
    assert not is_reference_type(list[Item])


def test_typed_composite_detection():
    assert is_typed_composite_type(Item)
    assert not is_typed_composite_type(Plain)
    assert not is_typed_composite_type(Item())


@pytest.mark.parametrize(
    ("target", "source", "expected"),
    [
        (int, int, True),
        (int, bool, True),
        (bool, int, False),
        (int, str, False),
        (Item, SpecialItem, True),
        (SpecialItem, Item, False),
        (int | None, int, True),
        (int | None, type(None), True),
        (int, int | None, False),
        (int | str, int | str, True),
        (Any, str, True),
        (object, Item, True),
        (str, Any, False),
        (list[int], list, True),
        (list, list[str], True),
        (str, Literal["a", "b"], True),
        (int, Literal["a"], False),
        (Annotated[int, "meta"], int, True),
    ],
)
def test_is_assignable(target, source, expected):
    assert is_assignable(target, source) is expected


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        (list[Item], Item),
        (list[int] | None, int),
        (tuple[int, ...], int),
        (tuple[int, int], int),
        (tuple[int, str], None),
        (list, None),
        (int, None),
        (str, None),
    ],
)
def test_element_type_of(tag, expected):
    assert element_type_of(tag) == expected


def test_narrow_type_uses_runtime_type_for_loose_declarations():
    assert narrow_type(int | None, 5) is int
    assert narrow_type(Any, "x") is str
    assert narrow_type(Item | None, SpecialItem()) is SpecialItem


def test_narrow_type_keeps_precise_declarations():
    assert narrow_type(list[int], [1]) == list[int]
    assert narrow_type(int | None, None) == int | None
    assert narrow_type(Any, None) is Any
