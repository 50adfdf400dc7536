"""Skip and copy records collected during a copy.

Skips are never raised. Pass a CopyReport to ``copy_properties`` to see what
was dropped and why, or enable ``warn_on_skip`` to get a CopySkipWarning each.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SkipReason(Enum):
    """Why a field or sequence element was not copied."""

    UNKNOWN_FIELD = "unknown_field"  # Destination has no field with this name
    NOT_WRITABLE = "not_writable"  # No setter, frozen, read-only mapping
    PRIVATE_SETTER = "private_setter"  # Underscore-prefixed destination field
    STATIC_MEMBER = "static_member"  # ClassVar on the destination
    NOT_ASSIGNABLE = "not_assignable"  # Source type not accepted by destination type
    NULL_COMPOSITE = "null_composite"  # Nested composite is None on either side
    NULL_SEQUENCE = "null_sequence"  # Source sequence is None
    NOT_A_SEQUENCE = "not_a_sequence"  # Destination holds no mutable sequence
    NULL_ELEMENT = "null_element"  # Source sequence element is None
    AMBIGUOUS_SOURCE = "ambiguous_source"  # Source value cannot be classified
    AMBIGUOUS_ELEMENT = "ambiguous_element"  # Element type cannot be resolved


class CopySkipWarning(UserWarning):
    """Emitted for each skip when ``warn_on_skip`` is enabled."""

    pass


@dataclass(slots=True, frozen=True)
class SkipRecord:
    """A single skipped field or element.

    Attributes:
        path: Dotted path from the copy root, e.g. ``order.lines[2].qty``.
        reason: Why it was skipped.
    """

    path: str
    reason: SkipReason

    def __str__(self) -> str:
        return f"{self.path}: {self.reason.value}"


@dataclass(slots=True)
class CopyReport:
    """Outcome of one or more copy calls.

    Attributes:
        copied: Paths written by assignment (scalars, raw references, sequence slots).
        skipped: Skip records in visiting order.
    """

    copied: list[str] = field(default_factory=list)
    skipped: list[SkipRecord] = field(default_factory=list)

    def skipped_paths(self, reason: SkipReason | None = None) -> list[str]:
        """Paths of skipped entries, optionally filtered by reason."""
        return [s.path for s in self.skipped if reason is None or s.reason is reason]

    def reasons(self) -> dict[str, SkipReason]:
        """Map path → reason (last record wins)."""
        return {s.path: s.reason for s in self.skipped}

    def clear(self) -> None:
        self.copied.clear()
        self.skipped.clear()

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "copied": list(self.copied),
            "skipped": [{"path": s.path, "reason": s.reason.value} for s in self.skipped],
        }
