"""Shape registry, ``@copyable`` decorator and blank-instance factories.

Usage:
    @copyable
    class Account:
        owner: str

        def __init__(self) -> None:
            self.owner = ""

        @property
        def label(self) -> str:
            return self.owner.upper()

    shape = get_registry().describe(Account)
    shape.get_field("label").writable  # False
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Callable
from typing import Any, ClassVar, TypeVar, get_args, get_origin, get_type_hints, overload

from propcopy.core.classify.operations import COPYABLE_MARKER, is_pydantic_model, strip_annotations
from propcopy.core.errors import ConstructionError
from propcopy.core.shape.models import FieldSpec, TypeShape
from propcopy.core.types import TypeTag

T = TypeVar("T")


def _type_hints(obj: Any) -> dict[str, Any]:
    """Resolve annotations, falling back to the raw ones if forward refs fail."""
    try:
        return get_type_hints(obj, include_extras=True)
    except (NameError, TypeError):
        return dict(inspect.get_annotations(obj))


def _is_classvar(tag: TypeTag) -> bool:
    tag = strip_annotations(tag)
    return tag is ClassVar or get_origin(tag) is ClassVar


def _unwrap_classvar(tag: TypeTag) -> TypeTag:
    args = get_args(strip_annotations(tag))
    return args[0] if args else Any


def _property_type(prop: property) -> TypeTag:
    if prop.fget is None:
        return Any
    return _type_hints(prop.fget).get("return", Any)


def _dataclass_fields(cls: type, hints: dict[str, Any]) -> list[FieldSpec]:
    params = getattr(cls, "__dataclass_params__", None)
    frozen = bool(params and params.frozen)
    return [
        FieldSpec(
            name=f.name,
            declared_type=hints.get(f.name, f.type),
            writable=not frozen,
            private=f.name.startswith("_"),
        )
        for f in dataclasses.fields(cls)
    ]


def _pydantic_fields(cls: type) -> list[FieldSpec]:
    model_frozen = bool(cls.model_config.get("frozen", False))  # type: ignore[attr-defined]
    specs = [
        FieldSpec(
            name=name,
            declared_type=info.annotation if info.annotation is not None else Any,
            writable=not (model_frozen or bool(info.frozen)),
            private=name.startswith("_"),
        )
        for name, info in cls.model_fields.items()  # type: ignore[attr-defined]
    ]
    for name, computed in cls.model_computed_fields.items():  # type: ignore[attr-defined]
        wrapped = computed.wrapped_property
        specs.append(
            FieldSpec(
                name=name,
                declared_type=computed.return_type,
                writable=getattr(wrapped, "fset", None) is not None and not model_frozen,
                private=name.startswith("_"),
            )
        )
    return specs


def _annotated_fields(hints: dict[str, Any]) -> list[FieldSpec]:
    return [
        FieldSpec(name=name, declared_type=tag, private=name.startswith("_"))
        for name, tag in hints.items()
        if not _is_classvar(tag)
    ]


def _own_annotation_names(cls: type) -> set[str]:
    """Annotation names declared by user classes in the MRO (pydantic internals excluded)."""
    return {
        name
        for klass in cls.__mro__
        if klass is not object and not klass.__module__.startswith("pydantic")
        for name in inspect.get_annotations(klass)
    }


def _classvar_fields(cls: type, hints: dict[str, Any]) -> list[FieldSpec]:
    own = _own_annotation_names(cls)
    return [
        FieldSpec(
            name=name,
            declared_type=_unwrap_classvar(tag),
            readable=False,
            private=name.startswith("_"),
            static=True,
        )
        for name, tag in hints.items()
        if name in own and _is_classvar(tag)
    ]


def _property_fields(cls: type, seen: set[str]) -> list[FieldSpec]:
    """Collect properties base-first, resolving overrides against the final class."""
    specs: list[FieldSpec] = []
    for klass in reversed(cls.__mro__):
        if klass is object or klass.__module__.startswith("pydantic"):
            continue
        for name, attr in vars(klass).items():
            if name in seen or not isinstance(attr, property):
                continue
            prop = inspect.getattr_static(cls, name)
            if not isinstance(prop, property):
                continue
            seen.add(name)
            specs.append(
                FieldSpec(
                    name=name,
                    declared_type=_property_type(prop),
                    readable=prop.fget is not None,
                    writable=prop.fset is not None,
                    private=name.startswith("_"),
                )
            )
    return specs


def describe_type(cls: type, include_properties: bool = True) -> TypeShape:
    """Derive the field shape of a typed class without caching.

    Args:
        cls: Dataclass, Pydantic model, or annotated class.
        include_properties: Also describe ``property`` members.

    Returns:
        TypeShape listing instance fields in declaration order, then properties,
        then ``ClassVar`` members (which are never enumerated as sources).
    """
    hints = _type_hints(cls)
    if dataclasses.is_dataclass(cls):
        specs = _dataclass_fields(cls, hints)
    elif is_pydantic_model(cls):
        specs = _pydantic_fields(cls)
    else:
        specs = _annotated_fields(hints)

    seen = {s.name for s in specs}
    if include_properties:
        specs.extend(_property_fields(cls, seen))
    specs.extend(s for s in _classvar_fields(cls, hints) if s.name not in seen)

    return TypeShape(type_name=f"{cls.__module__}.{cls.__qualname__}", fields=tuple(specs))


class ShapeRegistry:
    """Process-local cache of class shapes and blank-instance factories."""

    def __init__(self) -> None:
        """Initialize empty shape registry."""
        self._shapes: dict[tuple[type, bool], TypeShape] = {}
        self._factories: dict[Any, Callable[[], Any]] = {}

    def describe(self, cls: type, include_properties: bool = True) -> TypeShape:
        """Get the (cached) shape of a typed class."""
        key = (cls, include_properties)
        shape = self._shapes.get(key)
        if shape is None:
            shape = describe_type(cls, include_properties=include_properties)
            self._shapes[key] = shape
        return shape

    def register_factory(self, tag: TypeTag, factory: Callable[[], Any]) -> None:
        """Register the factory used to build blank elements of ``tag``.

        Args:
            tag: Element type the factory produces.
            factory: Zero-argument callable returning a new blank instance.
        """
        self._factories[tag] = factory

    def get_factory(self, tag: TypeTag) -> Callable[[], Any]:
        """Resolve the blank-instance factory for an element type.

        Lookup order: exact tag, then the tag's origin class, then the class itself.

        Raises:
            ConstructionError: If the tag does not name a constructible class.
        """
        tag = strip_annotations(tag)
        factory = self._factories.get(tag)
        if factory is not None:
            return factory
        cls = get_origin(tag) or tag
        factory = self._factories.get(cls)
        if factory is not None:
            return factory
        if not isinstance(cls, type):
            raise ConstructionError(f"Cannot construct a blank instance of {tag!r}")
        return cls

    def create_blank(self, tag: TypeTag) -> Any:
        """Construct a new blank instance of ``tag``.

        Raises:
            ConstructionError: If no factory applies or the factory fails.
        """
        factory = self.get_factory(tag)
        try:
            return factory()
        except Exception as e:
            raise ConstructionError(f"Failed to construct a blank instance of {tag!r}: {e}") from e

    def clear(self) -> None:
        """Drop cached shapes. Registered factories are kept."""
        self._shapes.clear()


# Module-level registry instance
_registry = ShapeRegistry()


def get_registry() -> ShapeRegistry:
    """Access the global shape registry.

    Returns:
        The process-local ShapeRegistry instance.
    """
    return _registry


@overload
def copyable(cls: type[T]) -> type[T]: ...


@overload
def copyable(
    cls: None = None, *, factory: Callable[[], Any] | None = None
) -> Callable[[type[T]], type[T]]: ...


def copyable(
    cls: type[T] | None = None, *, factory: Callable[[], Any] | None = None
) -> type[T] | Callable[[type[T]], type[T]]:
    """Mark a plain annotated class as a typed composite.

    Dataclasses and Pydantic models are composites without marking. Use this
    for ordinary classes whose fields are declared by annotations or properties.

    Supports three forms:
        @copyable                         # bare decorator
        @copyable()                       # parenthesized, no args
        @copyable(factory=make_blank)     # register a blank-instance factory

    Args:
        cls: The class to mark, or None if called with arguments.
        factory: Optional zero-argument factory for blank instances.

    Returns:
        Decorated class or decorator function.
    """

    def decorator(c: type[T]) -> type[T]:
        setattr(c, COPYABLE_MARKER, True)
        if factory is not None:
            _registry.register_factory(c, factory)
        return c

    if cls is None:
        return decorator
    return decorator(cls)
