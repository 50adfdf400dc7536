"""Tests for copying into dynamic (dict) destinations.

Why these tests exist:
- Dynamic destinations accept any value for any key, no type gate
- Non-sequence composites are written by reference, not structurally copied
- Sequences are aligned in place; dict elements are grown as fresh dicts
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from propcopy import SkipReason, copy_properties


@dataclass
class Child:
    x: int = 0


@dataclass
class Holder:
    a: Child = field(default_factory=Child)
    label: str = "h"


@dataclass
class Item:
    value: int = 0


@dataclass
class Bag:
    items: list[Item] = field(default_factory=list)


def test_scalar_insert_and_overwrite(settings):
    dest: dict[str, Any] = {"a": 1}
    copy_properties({"a": 2, "b": "new"}, dest, settings=settings)
    assert dest == {"a": 2, "b": "new"}


def test_nested_composite_is_written_by_reference(settings):
    """CRITICAL: A nested composite lands under the key as the same object.

    Why: The dynamic path never recurses into non-sequence values; callers
    rely on this asymmetry with the typed path.
    """
    source = Holder(a=Child(x=1))
    dest: dict[str, Any] = {}
    copy_properties(source, dest, settings=settings)

    assert dest == {"a": Child(x=1), "label": "h"}
    assert dest["a"] is source.a


def test_nested_dict_overwrites_existing_dict(settings):
    existing = {"x": 0, "y": 9}
    dest: dict[str, Any] = {"child": existing}
    source = {"child": {"x": 1}}
    copy_properties(source, dest, settings=settings)

    assert dest["child"] is source["child"]
    assert existing == {"x": 0, "y": 9}


def test_none_from_dynamic_source_is_skipped(settings, report):
    dest = {"a": 1}
    copy_properties({"a": None}, dest, settings=settings, report=report)

    assert dest == {"a": 1}
    assert report.reasons() == {"a": SkipReason.AMBIGUOUS_SOURCE}


def test_scalar_sequence_aligned_in_place(settings):
    values = [0, 0]
    dest = {"values": values}
    copy_properties({"values": [1, None, 3]}, dest, settings=settings)

    assert dest["values"] is values
    assert values == [1, 0, 3]


def test_sequence_of_dicts_grows_fresh_dicts(settings):
    first = {"a": 0, "b": 5}
    dest = {"rows": [first]}
    source = {"rows": [{"a": 1}, {"a": 2}]}
    copy_properties(source, dest, settings=settings)

    assert dest["rows"] == [{"a": 1, "b": 5}, {"a": 2}]
    assert dest["rows"][0] is first
    assert dest["rows"][1] is not source["rows"][1]


def test_empty_destination_sequence_grows_dicts(settings):
    dest: dict[str, Any] = {"rows": []}
    copy_properties({"rows": [{"a": 1}]}, dest, settings=settings)
    assert dest["rows"] == [{"a": 1}]


def test_typed_elements_into_existing_typed_elements(settings):
    dest = {"items": [Item(0)]}
    copy_properties(Bag(items=[Item(5), Item(6)]), dest, settings=settings)
    assert dest["items"] == [Item(5), Item(6)]


def test_typed_elements_into_empty_sequence_are_ambiguous(settings, report):
    """Without an element to learn from, a typed element cannot be constructed."""
    dest: dict[str, Any] = {"items": []}
    copy_properties(Bag(items=[Item(5)]), dest, settings=settings, report=report)

    assert dest["items"] == []
    assert report.reasons() == {"items[0]": SkipReason.AMBIGUOUS_ELEMENT}


def test_missing_destination_sequence_is_skipped(settings, report):
    dest: dict[str, Any] = {}
    copy_properties({"tags": ["a"]}, dest, settings=settings, report=report)

    assert "tags" not in dest
    assert report.reasons() == {"tags": SkipReason.NOT_A_SEQUENCE}


def test_sequence_into_non_sequence_entry_is_skipped(settings):
    dest = {"tags": "a,b"}
    copy_properties({"tags": ["c"]}, dest, settings=settings)
    assert dest == {"tags": "a,b"}


def test_nested_sequences(settings):
    dest = {"grid": [[0, 0, 0]]}
    copy_properties({"grid": [[1], [2, 3]]}, dest, settings=settings)
    assert dest["grid"] == [[1, 0, 0], [2, 3]]


def test_dict_subclass_destination(settings):
    from collections import OrderedDict

    dest: OrderedDict[str, Any] = OrderedDict(b=1)
    copy_properties({"a": 1}, dest, settings=settings)
    assert list(dest) == ["b", "a"]


def test_mixed_sequence_dispatches_per_element(settings):
    """Each existing element is copied according to its own shape.

    Why: The element plan is learned from the first element, but later slots
    may hold a typed object where the first held a dict.
    """
    dest = {"items": [{"value": 0}, Item()]}
    copy_properties(
        {"items": [{"value": 1}, {"value": 2}, {"value": 3}]}, dest, settings=settings
    )

    assert dest["items"] == [{"value": 1}, Item(2), {"value": 3}]


def test_read_only_element_is_skipped(settings, report):
    frozen = MappingProxyType({"a": 0})
    dest = {"rows": [frozen, {"a": 0}]}
    copy_properties({"rows": [{"a": 1}, {"a": 2}]}, dest, settings=settings, report=report)

    assert dest["rows"][0] is frozen
    assert frozen == {"a": 0}
    assert dest["rows"][1] == {"a": 2}
    assert report.reasons() == {"rows[0]": SkipReason.NOT_WRITABLE}
