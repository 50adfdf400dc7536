"""Exceptions raised by the copier.

Only misuse and host misconfiguration raise. Structural mismatches between
source and destination are skipped, never raised.
"""

from __future__ import annotations


class PropCopyError(Exception):
    """Base class for all propcopy errors."""

    pass


class InvalidArgumentError(PropCopyError, ValueError):
    """Raised when the source or destination passed to a copy is None."""

    pass


class DepthLimitExceededError(PropCopyError, RecursionError):
    """Raised when nesting exceeds the configured ``max_depth``."""

    def __init__(self, path: str, max_depth: int):
        super().__init__(f"Copy nested deeper than max_depth={max_depth} at '{path}'")
        self.path = path
        self.max_depth = max_depth


class ConstructionError(PropCopyError, TypeError):
    """Raised when a blank sequence element cannot be constructed."""

    pass
