"""Per-call copy state threaded through the recursion."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, replace

from propcopy.config import CopierSettings
from propcopy.core.errors import DepthLimitExceededError
from propcopy.core.shape import ShapeRegistry
from propcopy.copier.report import CopyReport, CopySkipWarning, SkipReason, SkipRecord


@dataclass(slots=True, frozen=True)
class CopyContext:
    """Immutable view of where the walk is and how it is configured.

    Attributes:
        settings: Active configuration.
        registry: Shape registry for typed objects and blank-instance factories.
        report: Optional report collecting copies and skips.
        path: Dotted path of the current composite from the copy root.
        depth: Number of named hops from the copy root.
    """

    settings: CopierSettings
    registry: ShapeRegistry
    report: CopyReport | None = None
    path: str = ""
    depth: int = 0

    def child_path(self, name: object) -> str:
        return f"{self.path}.{name}" if self.path else str(name)

    def descend(self, name: object) -> CopyContext:
        """Context for a named field of the current composite."""
        return replace(self, path=self.child_path(name), depth=self.depth + 1)

    def at_index(self, index: int) -> CopyContext:
        """Context for an element of the current sequence."""
        return replace(self, path=f"{self.path}[{index}]")

    def check_depth(self) -> None:
        """Raise if the walk is deeper than ``max_depth``."""
        max_depth = self.settings.max_depth
        if max_depth is not None and self.depth > max_depth:
            raise DepthLimitExceededError(self.path, max_depth)

    def record_copy(self, path: str | None = None) -> None:
        if self.report is not None:
            self.report.copied.append(self.path if path is None else path)

    def skip(self, reason: SkipReason, path: str | None = None) -> None:
        """Record a skip. Never raises."""
        record = SkipRecord(path=self.path if path is None else path, reason=reason)
        if self.report is not None:
            self.report.skipped.append(record)
        if self.settings.warn_on_skip:
            warnings.warn(f"propcopy skipped {record}", CopySkipWarning, stacklevel=2)
