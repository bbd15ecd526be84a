"""Shared structural dispatch used by every strategy.

Strategies decide leaves, enumerations, unions and container sizes
themselves and hand everything else to :func:`generate_structure`.
"""

from __future__ import annotations

from typing import Any

from ..model.descriptor import TypeDescriptor
from ..model.kinds import TypeKind
from ..utils.errors import UnresolvedGenericParameterError, UnsupportedTypeError
from .composites import build_composite
from .containers import (
    SizeFn,
    build_array,
    build_collection,
    build_map,
    build_primitive_array,
    build_tuple,
)
from .context import SynthesisContext
from .overrides import MISSING, Override, find_override, normalize_overrides


def enum_members(descriptor: TypeDescriptor, context: SynthesisContext) -> list[Any]:
    """Return the members of an enumeration descriptor in declaration order."""

    if descriptor.choices:
        return list(descriptor.choices)
    return context.introspector.enum_constants(descriptor.origin)


def generate_structure(descriptor: TypeDescriptor, context: SynthesisContext, *, size: SizeFn) -> Any:
    """Synthesize a non-leaf ``descriptor``.

    ``size`` picks the element count of collections, arrays and maps.
    """

    kind = descriptor.kind
    if kind is TypeKind.PRIMITIVE_ARRAY:
        return build_primitive_array(descriptor, context, size)
    if kind is TypeKind.COLLECTION:
        return build_collection(descriptor, context, size)
    if kind is TypeKind.ARRAY:
        return build_array(descriptor, context, size)
    if kind is TypeKind.TUPLE:
        return build_tuple(descriptor, context)
    if kind is TypeKind.MAP:
        return build_map(descriptor, context, size)
    if kind is TypeKind.COMPOSITE:
        return build_composite(descriptor, context)
    if kind is TypeKind.TYPE_PARAMETER:
        raise UnresolvedGenericParameterError(descriptor.name or "?")
    raise UnsupportedTypeError(descriptor)


__all__ = [
    "MISSING",
    "Override",
    "SynthesisContext",
    "enum_members",
    "find_override",
    "generate_structure",
    "normalize_overrides",
]
