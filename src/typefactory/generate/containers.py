"""Container synthesis: collections, arrays, tuples and maps.

Elements are always produced through the context's strategy, one level
deeper than the container, then collected into the canonical container
(``list`` or ``dict``).  Targets other than the canonical ones are built by
passing the canonical container to a conversion constructor found by the
introspector.
"""

from __future__ import annotations

import array
import collections.abc as cabc
from collections.abc import Callable
from typing import Any

from ..model.descriptor import TypeDescriptor, hashable, primitive_descriptor
from ..model.kinds import ARRAY_TYPECODES
from ..utils.errors import (
    ConstructionError,
    NoConversionConstructorError,
    UnsupportedTypeError,
)
from .context import SynthesisContext

SizeFn = Callable[[TypeDescriptor, SynthesisContext], int]

CANONICAL_SEQUENCES: frozenset[Any] = frozenset(
    {list, cabc.Iterable, cabc.Collection, cabc.Sequence, cabc.MutableSequence}
)
CANONICAL_MAPS: frozenset[Any] = frozenset({dict, cabc.Mapping, cabc.MutableMapping})
# Abstract set types are satisfied by a plain ``set``.
_ABSTRACT_SETS: frozenset[Any] = frozenset({cabc.Set, cabc.MutableSet})


def _size(descriptor: TypeDescriptor, context: SynthesisContext, size: SizeFn) -> int:
    # Containers are empty past max_depth or the recursion limit.
    if context.exhausted or context.recursing(descriptor):
        return 0
    return size(descriptor, context)


def adapt(value: list[Any] | dict[Any, Any], target: Any, context: SynthesisContext) -> Any:
    """Convert a canonical container into ``target``."""

    canonical = type(value)
    factory = context.introspector.find_conversion_constructor(target, canonical)
    if factory is None:
        raise NoConversionConstructorError(target, canonical)
    try:
        return factory(value)
    except (TypeError, ValueError) as exc:
        raise ConstructionError(f"Can't convert {canonical.__name__} into {target!s}: {exc}") from exc


def build_collection(descriptor: TypeDescriptor, context: SynthesisContext, size: SizeFn) -> Any:
    (element,) = descriptor.arguments
    count = _size(descriptor, context, size)
    values = [context.generate(element, f"[{i}]") for i in range(count)]
    if descriptor.origin in CANONICAL_SEQUENCES:
        return values
    if descriptor.origin in _ABSTRACT_SETS:
        return set(values)
    return adapt(values, descriptor.origin, context)


def build_array(descriptor: TypeDescriptor, context: SynthesisContext, size: SizeFn) -> Any:
    """Build a homogeneous ``tuple[T, ...]``."""

    (element,) = descriptor.arguments
    count = _size(descriptor, context, size)
    values = tuple(context.generate(element, f"[{i}]") for i in range(count))
    if descriptor.origin is tuple:
        return values
    return adapt(list(values), descriptor.origin, context)


def build_tuple(descriptor: TypeDescriptor, context: SynthesisContext) -> Any:
    """Build a fixed-arity tuple with one value per declared position."""

    values = tuple(context.generate(arg, f"[{i}]") for i, arg in enumerate(descriptor.arguments))
    if descriptor.origin is tuple:
        return values
    return adapt(list(values), descriptor.origin, context)


def build_primitive_array(descriptor: TypeDescriptor, context: SynthesisContext, size: SizeFn) -> Any:
    kind = descriptor.primitive
    assert kind is not None
    count = _size(descriptor, context, size)
    leaf = primitive_descriptor(kind)
    values = [context.generate(leaf, f"[{i}]") for i in range(count)]
    origin = descriptor.origin
    if origin is array.array:
        typecode = ARRAY_TYPECODES.get(kind)
        if typecode is None:
            raise UnsupportedTypeError(descriptor, f"array.array has no typecode for {kind.value}")
        return array.array(typecode, values)
    return origin(values)


def build_map(descriptor: TypeDescriptor, context: SynthesisContext, size: SizeFn) -> Any:
    """Build a map from independently drawn keys and values.

    Keys that collide collapse into one entry, so the result may be smaller
    than the drawn size.
    """

    key_type, value_type = descriptor.arguments
    if not hashable(key_type):
        raise UnsupportedTypeError(descriptor, f"key type {key_type} is not hashable")
    count = _size(descriptor, context, size)
    keys = [context.generate(key_type, f"<key {i}>") for i in range(count)]
    values = [context.generate(value_type, f"<value {i}>") for i in range(count)]
    entries = dict(zip(keys, values))
    if descriptor.origin in CANONICAL_MAPS:
        return entries
    return adapt(entries, descriptor.origin, context)


__all__ = [
    "CANONICAL_SEQUENCES",
    "CANONICAL_MAPS",
    "adapt",
    "build_collection",
    "build_array",
    "build_tuple",
    "build_primitive_array",
    "build_map",
]
