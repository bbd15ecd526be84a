"""Caller supplied values that replace synthesis for matching types."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ..model.descriptor import TypeDescriptor, describe
from ..model.kinds import TypeKind
from ..utils.errors import UnsupportedTypeError

MISSING: Any = object()


@dataclass(slots=True, frozen=True)
class Override:
    """Return ``value`` whenever a type matching ``target`` is requested.

    ``target`` is any annotation accepted by :func:`~typefactory.model.describe`.
    Generic arguments given in ``target`` must match exactly; a bare class
    matches every parameterisation of it.
    """

    target: Any
    value: Any


OverrideTable = tuple[tuple[TypeDescriptor, Any], ...]


def _key_for_value(value: Any) -> TypeDescriptor:
    try:
        return describe(type(value))
    except UnsupportedTypeError:
        # e.g. a bare ``list`` instance without an element type
        return TypeDescriptor(TypeKind.COMPOSITE, origin=type(value))


def normalize_overrides(overrides: Iterable[Any]) -> OverrideTable:
    """Turn :class:`Override` entries and bare values into a lookup table.

    A bare value overrides its own runtime type.
    """

    table: list[tuple[TypeDescriptor, Any]] = []
    for entry in overrides:
        if isinstance(entry, Override):
            table.append((describe(entry.target).non_null(), entry.value))
        else:
            table.append((_key_for_value(entry), entry))
    return tuple(table)


def _matches(key: TypeDescriptor, descriptor: TypeDescriptor) -> bool:
    if key.origin != descriptor.origin:
        return False
    if key.primitive is not descriptor.primitive or key.choices != descriptor.choices:
        return False
    if key.arguments:
        return tuple(a.non_null() for a in key.arguments) == tuple(
            a.non_null() for a in descriptor.arguments
        )
    return True


def find_override(descriptor: TypeDescriptor, table: OverrideTable) -> Any:
    """Return the first override value matching ``descriptor`` or :data:`MISSING`."""

    for key, value in table:
        if _matches(key, descriptor):
            return value
    return MISSING


__all__ = ["MISSING", "Override", "OverrideTable", "normalize_overrides", "find_override"]
