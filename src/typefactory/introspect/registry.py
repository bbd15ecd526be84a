"""Explicit constructor schemas for types reflection can't read.

Classes implemented in C, classes whose ``__init__`` takes ``*args`` or
factories that are not the class itself can be registered by hand.  Lookups
for unregistered types fall through to a second introspector, by default the
:class:`~typefactory.introspect.reflective.ReflectiveIntrospector`.

Example::

    registry = TypeRegistry()
    registry.register(Point, {"x": int, "y": int}, factory=Point.from_xy)
    synthesize(Point, introspector=registry)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from ..model.descriptor import describe
from ..utils.logging import get_logger
from .base import ConstructorDescriptor, ParameterDescriptor, TypeIntrospector
from .reflective import ReflectiveIntrospector

logger = get_logger(__name__)


class TypeRegistry:
    """Introspector backed by registered schemas with a reflective fallback."""

    def __init__(self, fallback: TypeIntrospector | None = None) -> None:
        self.fallback: TypeIntrospector = fallback if fallback is not None else ReflectiveIntrospector()
        self._constructors: dict[type, ConstructorDescriptor] = {}
        self._type_parameters: dict[type, tuple[str, ...]] = {}
        self._conversions: dict[type, Callable[[Any], Any]] = {}

    def register(
        self,
        cls: type,
        parameters: Mapping[str, Any],
        *,
        factory: Callable[..., Any] | None = None,
        defaults: Iterable[str] = (),
        positional_only: Iterable[str] = (),
        type_parameters: Iterable[str] = (),
    ) -> ConstructorDescriptor:
        """Register the constructor schema of ``cls``.

        ``parameters`` maps parameter names to annotations in call order.
        Names listed in ``defaults`` are treated as having a default value and
        names in ``positional_only`` are passed positionally.
        """

        defaulted = set(defaults)
        positional = set(positional_only)
        unknown = (defaulted | positional) - set(parameters)
        if unknown:
            raise ValueError(f"Unknown parameter names for {cls.__qualname__}: {sorted(unknown)}")
        constructor = ConstructorDescriptor(
            owner=cls,
            factory=factory if factory is not None else cls,
            parameters=tuple(
                ParameterDescriptor(
                    name=name,
                    type=describe(annotation),
                    has_default=name in defaulted,
                    positional_only=name in positional,
                )
                for name, annotation in parameters.items()
            ),
        )
        self._constructors[cls] = constructor
        if type_parameters:
            self._type_parameters[cls] = tuple(type_parameters)
        logger.debug("registered constructor for %s", cls.__qualname__)
        return constructor

    def register_conversion(self, cls: type, factory: Callable[[Any], Any]) -> None:
        """Register ``factory`` as the one-argument conversion constructor of ``cls``."""

        self._conversions[cls] = factory

    def __contains__(self, cls: object) -> bool:
        return cls in self._constructors

    def describe_constructor(self, cls: type) -> ConstructorDescriptor:
        constructor = self._constructors.get(cls)
        if constructor is not None:
            return constructor
        return self.fallback.describe_constructor(cls)

    def type_parameters(self, cls: type) -> tuple[str, ...]:
        if cls in self._type_parameters:
            return self._type_parameters[cls]
        return self.fallback.type_parameters(cls)

    def enum_constants(self, cls: type) -> list[Any]:
        return self.fallback.enum_constants(cls)

    def find_conversion_constructor(
        self, cls: type, canonical: type
    ) -> Callable[[Any], Any] | None:
        factory = self._conversions.get(cls)
        if factory is not None:
            return factory
        return self.fallback.find_conversion_constructor(cls, canonical)


__all__ = ["TypeRegistry"]
