"""Public copy entry point.

Usage:
    from propcopy import copy_properties

    @dataclass
    class Line:
        sku: str = ""
        qty: int = 0

    @dataclass
    class Order:
        id: int = 0
        lines: list[Line] = field(default_factory=list)

    target = Order()
    copy_properties({"id": 7, "lines": [{"sku": "A", "qty": 2}]}, target)
    # target == Order(id=7, lines=[Line(sku="A", qty=2)])
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, cast

from propcopy.config import CopierSettings, get_settings
from propcopy.core.errors import InvalidArgumentError
from propcopy.core.shape import ShapeRegistry, get_registry
from propcopy.composite import CompositeKind, DynamicComposite, StaticComposite, as_composite
from propcopy.copier.context import CopyContext
from propcopy.copier.dynamic import copy_dynamic
from propcopy.copier.report import CopyReport, SkipReason
from propcopy.copier.typed import copy_typed


def copy_into(source: Any, destination: Any, context: CopyContext) -> None:
    """Dispatch one level of the copy on the destination's composite kind.

    A nested read-only mapping is skipped as not writable.
    """
    context.check_depth()
    target = as_composite(destination, context.registry, context.settings.include_properties)
    if target.kind is CompositeKind.DYNAMIC:
        dynamic = cast(DynamicComposite, target)
        if not dynamic.writable:
            context.skip(SkipReason.NOT_WRITABLE)
            return
        copy_dynamic(source, dynamic, context)
    else:
        copy_typed(source, cast(StaticComposite, target), context)


def copy_properties(
    source: Any,
    destination: Any,
    *,
    settings: CopierSettings | None = None,
    registry: ShapeRegistry | None = None,
    report: CopyReport | None = None,
) -> None:
    """Copy property values from ``source`` into ``destination`` in place.

    The source graph is never mutated. Mismatches are skipped, not raised.

    Args:
        source: Typed object or mapping to read from.
        destination: Typed object or mutable mapping to write into.
        settings: Copier settings (defaults to environment-loaded settings).
        registry: Shape registry (defaults to the global registry).
        report: Optional report collecting copied paths and skips.

    Raises:
        InvalidArgumentError: If source or destination is None, or the destination
            itself is a read-only mapping.
        DepthLimitExceededError: If ``settings.max_depth`` is exceeded.
        ConstructionError: If a blank sequence element cannot be constructed.
    """
    if source is None or destination is None:
        raise InvalidArgumentError("source or/and destination objects are None")
    if isinstance(destination, Mapping) and not isinstance(destination, MutableMapping):
        raise InvalidArgumentError(
            f"destination {type(destination).__name__} is a read-only mapping"
        )
    context = CopyContext(
        settings=settings if settings is not None else get_settings(),
        registry=registry if registry is not None else get_registry(),
        report=report,
    )
    copy_into(source, destination, context)
