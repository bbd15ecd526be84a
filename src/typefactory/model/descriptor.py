"""Type descriptors and their construction from Python annotations.

A :class:`TypeDescriptor` is a tagged variant: ``kind`` decides which synthesis
rule applies, ``origin`` is the runtime class to build and ``arguments`` are
the nested descriptors for generic parameters (element type of a list, key and
value types of a map, type arguments of a generic composite).

:func:`describe` performs the classification once, in a fixed order, so the
dispatcher only has to match on ``kind``.  The order matters: primitive arrays
must be recognised before the generic collection rule, enumerations and maps
before collections, and ``tuple[T, ...]`` before ``tuple`` falls into the
collection rule.

A ``TYPE_PARAMETER`` descriptor is never synthesizable on its own; it must be
replaced through :meth:`TypeDescriptor.substitute` with a binding taken from
the enclosing type's arguments.
"""

from __future__ import annotations

import array
import collections
import collections.abc as cabc
import inspect
import types
import typing
from dataclasses import dataclass, replace
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Literal, TypeVar, get_args, get_origin
from uuid import UUID

from ..utils.errors import UnresolvedGenericParameterError, UnsupportedTypeError
from .kinds import PrimitiveKind, TypeKind
from .markers import Byte, Char, Float32, Long, Period, Short

_NONE_TYPE = type(None)

_PRIMITIVES: dict[Any, tuple[PrimitiveKind, type]] = {
    bool: (PrimitiveKind.BOOLEAN, bool),
    int: (PrimitiveKind.INT, int),
    float: (PrimitiveKind.DOUBLE, float),
    str: (PrimitiveKind.STRING, str),
    Decimal: (PrimitiveKind.DECIMAL, Decimal),
    UUID: (PrimitiveKind.UUID, UUID),
    datetime: (PrimitiveKind.DATETIME, datetime),
    date: (PrimitiveKind.DATE, date),
    time: (PrimitiveKind.TIME, time),
    timedelta: (PrimitiveKind.DURATION, timedelta),
    Byte: (PrimitiveKind.BYTE, int),
    Char: (PrimitiveKind.CHAR, str),
    Short: (PrimitiveKind.SHORT, int),
    Long: (PrimitiveKind.LONG, int),
    Float32: (PrimitiveKind.FLOAT, float),
    Period: (PrimitiveKind.PERIOD, timedelta),
}

_PRIMITIVE_ARRAY_ORIGINS: tuple[type, ...] = (array.array, tuple, list, bytes, bytearray)

_SEQUENCE_ABCS: tuple[type, ...] = (
    cabc.Iterable,
    cabc.Collection,
    cabc.Sequence,
    cabc.MutableSequence,
    cabc.Set,
    cabc.MutableSet,
)


@dataclass(slots=True, frozen=True)
class TypeDescriptor:
    """Shape of a type to synthesize.

    ``primitive`` is set for ``PRIMITIVE`` and ``PRIMITIVE_ARRAY`` descriptors,
    ``choices`` for ``Literal`` enumerations and ``name`` for type parameters.
    """

    kind: TypeKind
    origin: Any = None
    arguments: tuple[TypeDescriptor, ...] = ()
    nullable: bool = False
    primitive: PrimitiveKind | None = None
    choices: tuple[Any, ...] = ()
    name: str | None = None

    def substitute(
        self,
        env: typing.Mapping[str, TypeDescriptor],
        owner: Any = None,
        *,
        strict: bool = True,
    ) -> TypeDescriptor:
        """Return a copy with every type parameter replaced by its binding in ``env``.

        With ``strict=False`` parameters missing from ``env`` are left in place
        instead of raising :class:`UnresolvedGenericParameterError`.
        """

        if self.kind is TypeKind.TYPE_PARAMETER:
            assert self.name is not None
            bound = env.get(self.name)
            if bound is None:
                if not strict:
                    return self
                raise UnresolvedGenericParameterError(self.name, owner)
            return replace(bound, nullable=bound.nullable or self.nullable)
        if not self.arguments:
            return self
        return replace(
            self, arguments=tuple(a.substitute(env, owner, strict=strict) for a in self.arguments)
        )

    def non_null(self) -> TypeDescriptor:
        return replace(self, nullable=False) if self.nullable else self

    @property
    def display_name(self) -> str:
        if self.kind is TypeKind.TYPE_PARAMETER:
            return self.name or "?"
        if self.kind is TypeKind.PRIMITIVE and self.primitive is not None:
            return self.primitive.value
        if self.kind is TypeKind.ENUM and self.choices:
            return f"Literal[{', '.join(repr(c) for c in self.choices)}]"
        if self.kind is TypeKind.UNION:
            return "Union"
        return _qualname(self.origin)

    def __str__(self) -> str:
        text = self.display_name
        if self.kind is TypeKind.PRIMITIVE_ARRAY and self.primitive is not None:
            text = f"{text}[{self.primitive.value}]"
        elif self.arguments:
            text = f"{text}[{', '.join(str(a) for a in self.arguments)}]"
        return f"{text} | None" if self.nullable else text


_RUNTIME_TYPES: dict[PrimitiveKind, type] = {kind: runtime for kind, runtime in _PRIMITIVES.values()}


def primitive_descriptor(kind: PrimitiveKind) -> TypeDescriptor:
    """Return the leaf descriptor for ``kind``."""

    return TypeDescriptor(TypeKind.PRIMITIVE, origin=_RUNTIME_TYPES[kind], primitive=kind)


def _qualname(obj: Any) -> str:
    return getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None) or repr(obj)


def _lookup_primitive(annotation: Any) -> tuple[PrimitiveKind, type] | None:
    try:
        return _PRIMITIVES.get(annotation)
    except TypeError:  # unhashable annotation objects
        return None


def _is_namedtuple(cls: type) -> bool:
    return issubclass(cls, tuple) and hasattr(cls, "_fields")


def hashable(descriptor: TypeDescriptor) -> bool:
    """Return whether values synthesized for ``descriptor`` can be map keys.

    Abstract collections and mappings materialise as ``list``, ``set`` or
    ``dict``, so they never are.
    """

    kind = descriptor.kind
    if kind in (TypeKind.TUPLE, TypeKind.ARRAY, TypeKind.UNION):
        return all(hashable(a) for a in descriptor.arguments)
    origin = descriptor.origin
    if not isinstance(origin, type):
        return True
    if kind in (TypeKind.COLLECTION, TypeKind.MAP) and inspect.isabstract(origin):
        return False
    return origin.__hash__ is not None


def _inherited_arguments(cls: type, base: type) -> tuple[Any, ...]:
    """Return concrete generic arguments ``cls`` passes to ``base`` in its bases."""

    for klass in cls.__mro__:
        for orig in klass.__dict__.get("__orig_bases__", ()):
            orig_origin = get_origin(orig)
            if isinstance(orig_origin, type) and issubclass(orig_origin, base):
                args = get_args(orig)
                if args and not any(isinstance(a, TypeVar) for a in args):
                    return args
    return ()


def describe(annotation: Any) -> TypeDescriptor:
    """Classify ``annotation`` into a :class:`TypeDescriptor`.

    Raises
    ------
    UnsupportedTypeError
        If the annotation matches none of the classification rules.
    """

    if isinstance(annotation, TypeDescriptor):
        return annotation
    if isinstance(annotation, TypeVar):
        return TypeDescriptor(TypeKind.TYPE_PARAMETER, name=annotation.__name__)
    if isinstance(annotation, (str, typing.ForwardRef)):
        raise UnsupportedTypeError(annotation, "unresolved forward reference")
    if annotation is Any or annotation is object:
        raise UnsupportedTypeError(annotation, "no concrete type to synthesize")

    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is typing.Annotated:
        return _describe_annotated(annotation, args[0])
    if origin is typing.Union or origin is types.UnionType:
        return _describe_union(args)
    if origin is Literal:
        return TypeDescriptor(TypeKind.ENUM, origin=Literal, choices=tuple(args))

    leaf = _lookup_primitive(annotation)
    if leaf is not None:
        kind, runtime = leaf
        return TypeDescriptor(TypeKind.PRIMITIVE, origin=runtime, primitive=kind)
    if annotation in (bytes, bytearray):
        return TypeDescriptor(TypeKind.PRIMITIVE_ARRAY, origin=annotation, primitive=PrimitiveKind.BYTE)

    cls = origin if origin is not None else annotation
    if not isinstance(cls, type):
        raise UnsupportedTypeError(annotation)

    if issubclass(cls, Enum):
        return TypeDescriptor(TypeKind.ENUM, origin=cls)
    if issubclass(cls, cabc.Mapping):
        return _describe_map(annotation, cls, args)
    if issubclass(cls, tuple) and not _is_namedtuple(cls):
        return _describe_tuple(annotation, cls, args)
    if cls in _SEQUENCE_ABCS or (
        issubclass(cls, cabc.Collection) and not issubclass(cls, (str, bytes, bytearray))
    ):
        element_args = args or _inherited_arguments(cls, cabc.Iterable)
        if not element_args:
            raise UnsupportedTypeError(annotation, "missing element type argument")
        return TypeDescriptor(TypeKind.COLLECTION, origin=cls, arguments=(describe(element_args[0]),))
    return TypeDescriptor(
        TypeKind.COMPOSITE,
        origin=cls,
        arguments=tuple(describe(a) for a in args),
    )


def _describe_annotated(annotation: Any, base: Any) -> TypeDescriptor:
    kinds = [m for m in annotation.__metadata__ if isinstance(m, PrimitiveKind)]
    base_origin = get_origin(base) or base
    if kinds and base_origin in _PRIMITIVE_ARRAY_ORIGINS:
        return TypeDescriptor(TypeKind.PRIMITIVE_ARRAY, origin=base_origin, primitive=kinds[0])
    return describe(base)


def _describe_union(args: tuple[Any, ...]) -> TypeDescriptor:
    members = [a for a in args if a is not _NONE_TYPE]
    nullable = len(members) < len(args)
    if len(members) == 1:
        inner = describe(members[0])
        return replace(inner, nullable=True) if nullable else inner
    return TypeDescriptor(
        TypeKind.UNION,
        origin=typing.Union,
        arguments=tuple(describe(m) for m in members),
        nullable=nullable,
    )


def _describe_map(annotation: Any, cls: type, args: tuple[Any, ...]) -> TypeDescriptor:
    if not args:
        args = _inherited_arguments(cls, cabc.Mapping)
    if len(args) == 1 and issubclass(cls, collections.Counter):
        args = (args[0], int)
    if len(args) != 2:
        raise UnsupportedTypeError(annotation, "missing key/value type arguments")
    key = describe(args[0])
    if not hashable(key):
        raise UnsupportedTypeError(annotation, f"key type {key} is not hashable")
    return TypeDescriptor(TypeKind.MAP, origin=cls, arguments=(key, describe(args[1])))


def _describe_tuple(annotation: Any, cls: type, args: tuple[Any, ...]) -> TypeDescriptor:
    if not args:
        args = _inherited_arguments(cls, tuple)
    if len(args) == 2 and args[1] is Ellipsis:
        return TypeDescriptor(TypeKind.ARRAY, origin=cls, arguments=(describe(args[0]),))
    if not args:
        raise UnsupportedTypeError(annotation, "missing element type arguments")
    return TypeDescriptor(TypeKind.TUPLE, origin=cls, arguments=tuple(describe(a) for a in args))


__all__ = ["TypeDescriptor", "describe", "hashable", "primitive_descriptor"]
