"""Deterministic strategy returning configured constants."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import timedelta
from decimal import Decimal
from typing import Any
from uuid import UUID

from ..generate.context import SynthesisContext
from ..generate.dispatch import enum_members, generate_structure
from ..generate.enums import first_enum
from ..generate.leaves import new_date, new_datetime, new_time
from ..generate.overrides import MISSING, find_override, normalize_overrides
from ..model.clock import Clock, FixedClock
from ..model.descriptor import TypeDescriptor
from ..model.kinds import INTEGRAL_DOMAINS, PrimitiveKind, TypeKind


class FixedStrategy:
    """Produce the same value for every request of a given type.

    The numeric constants default to ``int_value`` converted to each kind.
    A ``str`` requested for a named constructor parameter yields the parameter
    name itself, so ``User(name: str, email: str)`` becomes
    ``User(name="name", email="email")``.  Every container holds exactly
    ``list_size`` elements (none for a recursive element past the recursion
    limit). Enumerations resolve to their first member and unions to their
    first member that does not recurse. Date/time leaves read ``clock``.
    """

    def __init__(
        self,
        *,
        list_size: int = 0,
        boolean: bool = False,
        char: str = "a",
        int_value: int = 0,
        byte: int | None = None,
        short: int | None = None,
        long: int | None = None,
        float32: float | None = None,
        double: float | None = None,
        decimal: Decimal | None = None,
        string: str = "string",
        uuid: UUID = UUID(int=0),
        clock: Clock | None = None,
        overrides: Iterable[Any] = (),
    ) -> None:
        if list_size < 0:
            raise ValueError("list_size must not be negative")
        if len(char) != 1:
            raise ValueError("char must be a single character")
        lo, hi = INTEGRAL_DOMAINS[PrimitiveKind.BYTE]
        self.list_size = list_size
        self.clock = clock if clock is not None else FixedClock()
        self.overrides = normalize_overrides(overrides)
        self.string = string
        self.values: dict[PrimitiveKind, Any] = {
            PrimitiveKind.BOOLEAN: boolean,
            PrimitiveKind.CHAR: char,
            PrimitiveKind.INT: int_value,
            PrimitiveKind.BYTE: byte if byte is not None else min(max(int_value, lo), hi),
            PrimitiveKind.SHORT: short if short is not None else int_value,
            PrimitiveKind.LONG: long if long is not None else int_value,
            PrimitiveKind.FLOAT: float32 if float32 is not None else float(int_value),
            PrimitiveKind.DOUBLE: double if double is not None else float(int_value),
            PrimitiveKind.DECIMAL: decimal if decimal is not None else Decimal(int_value),
            PrimitiveKind.STRING: string,
            PrimitiveKind.UUID: uuid,
        }
        self.values[PrimitiveKind.DURATION] = timedelta(milliseconds=self.values[PrimitiveKind.LONG])
        self.values[PrimitiveKind.PERIOD] = timedelta(days=int_value)

    def _leaf(self, kind: PrimitiveKind, context: SynthesisContext) -> Any:
        if kind is PrimitiveKind.STRING and context.parameter is not None:
            return context.parameter
        if kind is PrimitiveKind.DATETIME:
            return new_datetime(self.clock)
        if kind is PrimitiveKind.DATE:
            return new_date(self.clock)
        if kind is PrimitiveKind.TIME:
            return new_time(self.clock)
        return self.values[kind]

    def _size(self, descriptor: TypeDescriptor, context: SynthesisContext) -> int:
        return self.list_size

    def generate(self, descriptor: TypeDescriptor, context: SynthesisContext) -> Any:
        value = find_override(descriptor, self.overrides)
        if value is not MISSING:
            return value

        kind = descriptor.kind
        if kind is TypeKind.PRIMITIVE:
            assert descriptor.primitive is not None
            return self._leaf(descriptor.primitive, context)
        if kind is TypeKind.ENUM:
            return first_enum(enum_members(descriptor, context))
        if kind is TypeKind.UNION:
            return context.strategy.generate(context.viable(descriptor.arguments)[0], context)
        return generate_structure(descriptor, context, size=self._size)

    def __repr__(self) -> str:
        return f"FixedStrategy(list_size={self.list_size}, string={self.string!r}, clock={self.clock!r})"


__all__ = ["FixedStrategy"]
