"""Introspection and construction contracts consumed by the synthesizers.

The synthesis engine never inspects classes itself.  It asks a
:class:`TypeIntrospector` for constructor schemas, enumeration members and
conversion constructors, and hands bound arguments to a
:class:`ConstructorInvoker`.  The default implementations live in
:mod:`typefactory.introspect.reflective`; :mod:`typefactory.introspect.registry`
offers explicit, hand-written schemas.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from ..model.descriptor import TypeDescriptor


@dataclass(slots=True, frozen=True)
class ParameterDescriptor:
    """One constructor parameter."""

    name: str
    type: TypeDescriptor
    has_default: bool = False
    positional_only: bool = False


@dataclass(slots=True, frozen=True)
class ConstructorDescriptor:
    """Ordered parameter schema of a composite type's canonical constructor."""

    owner: type
    factory: Callable[..., Any]
    parameters: tuple[ParameterDescriptor, ...] = ()

    def parameter(self, name: str) -> ParameterDescriptor:
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        raise KeyError(name)


@runtime_checkable
class TypeIntrospector(Protocol):
    """Discovers how composite, enumeration and container types are built."""

    def describe_constructor(self, cls: type) -> ConstructorDescriptor:
        """Return the canonical constructor schema of ``cls``.

        Raises :class:`~typefactory.utils.errors.NoConstructorError` when
        ``cls`` exposes no usable constructor.
        """

        ...

    def type_parameters(self, cls: type) -> tuple[str, ...]:
        """Return the names of the generic type parameters declared by ``cls``."""

        ...

    def enum_constants(self, cls: type) -> list[Any]:
        """Return the members of the enumeration ``cls`` in declaration order."""

        ...

    def find_conversion_constructor(
        self, cls: type, canonical: type
    ) -> Callable[[Any], Any] | None:
        """Return a one-argument factory building ``cls`` from a ``canonical`` container."""

        ...


@runtime_checkable
class ConstructorInvoker(Protocol):
    """Instantiates a composite type from bound parameter values."""

    def construct(self, constructor: ConstructorDescriptor, arguments: Mapping[str, Any]) -> Any:
        ...


__all__ = [
    "ParameterDescriptor",
    "ConstructorDescriptor",
    "TypeIntrospector",
    "ConstructorInvoker",
]
