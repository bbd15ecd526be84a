"""Leaf value generators.

Every generator is a pure function of its bounds and a :class:`random.Random`
instance.  When ``rng`` is omitted a module level generator is used, which is
convenient in tests but not reproducible; pass a seeded ``random.Random`` for
deterministic output.

Numeric bounds follow these rules:

- ``None`` stands for the edge of the kind's representable domain.
- ``min > max`` raises :class:`~typefactory.utils.errors.InvalidRangeError`.
- A range wider than the kind's domain is clamped to the domain, so the same
  configured range can drive ``Short``, ``int`` and ``Long`` leaves alike.

Python integers never overflow, so even the full 64-bit span is drawn with a
single ``randint``.  Floating draws interpolate between the bounds instead of
computing ``max - min``, which would overflow to infinity for the full double
domain.
"""

from __future__ import annotations

import math
import random
import string
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any
from uuid import UUID

from ..model.clock import Clock
from ..model.kinds import FLOATING_DOMAINS, INTEGRAL_DOMAINS, PrimitiveKind
from ..utils.errors import InvalidRangeError

ALPHANUMERIC = string.ascii_letters + string.digits
DEFAULT_STRING_LENGTH = (1, 255)

_DEFAULT_RNG = random.Random()

Number = int | float


def _pick(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else _DEFAULT_RNG


def coerce_range(
    kind: PrimitiveKind, min_value: Number | None = None, max_value: Number | None = None
) -> tuple[Any, Any]:
    """Return ``(min, max)`` for ``kind`` with ``None`` filled and clamped to its domain."""

    domain = INTEGRAL_DOMAINS.get(kind) or FLOATING_DOMAINS.get(kind)
    if domain is None:
        raise ValueError(f"{kind.value} has no numeric domain")
    lo_dom, hi_dom = domain
    lo = lo_dom if min_value is None else min_value
    hi = hi_dom if max_value is None else max_value
    if lo > hi:
        raise InvalidRangeError(min_value, max_value)
    lo = min(max(lo, lo_dom), hi_dom)
    hi = min(max(hi, lo_dom), hi_dom)
    if kind in INTEGRAL_DOMAINS:
        # Fractional bounds shrink inwards so the result stays inside them.
        return math.ceil(lo), math.floor(hi)
    return float(lo), float(hi)


def _integral(
    kind: PrimitiveKind, min_value: Number | None, max_value: Number | None, rng: random.Random | None
) -> int:
    lo, hi = coerce_range(kind, min_value, max_value)
    if lo > hi:
        raise InvalidRangeError(min_value, max_value)
    return _pick(rng).randint(lo, hi)


def _floating(
    kind: PrimitiveKind, min_value: Number | None, max_value: Number | None, rng: random.Random | None
) -> float:
    lo, hi = coerce_range(kind, min_value, max_value)
    r = _pick(rng).random()
    value = lo * (1.0 - r) + hi * r
    return min(max(value, lo), hi)


def new_boolean(rng: random.Random | None = None) -> bool:
    """Return a random boolean."""

    return bool(_pick(rng).getrandbits(1))


def new_int(
    min_value: Number | None = None, max_value: Number | None = None, rng: random.Random | None = None
) -> int:
    """Return an integer within ``[min_value, max_value]`` and the 32-bit domain."""

    return _integral(PrimitiveKind.INT, min_value, max_value, rng)


def new_short(
    min_value: Number | None = None, max_value: Number | None = None, rng: random.Random | None = None
) -> int:
    """Return an integer within ``[min_value, max_value]`` and the 16-bit domain."""

    return _integral(PrimitiveKind.SHORT, min_value, max_value, rng)


def new_long(
    min_value: Number | None = None, max_value: Number | None = None, rng: random.Random | None = None
) -> int:
    """Return an integer within ``[min_value, max_value]`` and the 64-bit domain."""

    return _integral(PrimitiveKind.LONG, min_value, max_value, rng)


def new_byte(
    min_value: Number | None = None, max_value: Number | None = None, rng: random.Random | None = None
) -> int:
    """Return an unsigned byte value."""

    return _integral(PrimitiveKind.BYTE, min_value, max_value, rng)


def new_float(
    min_value: Number | None = None, max_value: Number | None = None, rng: random.Random | None = None
) -> float:
    """Return a float within ``[min_value, max_value]`` and the float32 magnitude."""

    return _floating(PrimitiveKind.FLOAT, min_value, max_value, rng)


def new_double(
    min_value: Number | None = None, max_value: Number | None = None, rng: random.Random | None = None
) -> float:
    """Return a float within ``[min_value, max_value]``."""

    return _floating(PrimitiveKind.DOUBLE, min_value, max_value, rng)


def new_decimal(
    min_value: Number | None = None, max_value: Number | None = None, rng: random.Random | None = None
) -> Decimal:
    """Return a :class:`~decimal.Decimal` built from the shortest repr of a double draw."""

    return Decimal(repr(_floating(PrimitiveKind.DECIMAL, min_value, max_value, rng)))


def new_char(rng: random.Random | None = None) -> str:
    """Return a single alphanumeric character."""

    return _pick(rng).choice(ALPHANUMERIC)


def new_string(
    min_size: int = DEFAULT_STRING_LENGTH[0],
    max_size: int = DEFAULT_STRING_LENGTH[1],
    rng: random.Random | None = None,
) -> str:
    """Return an alphanumeric string whose length is drawn from ``[min_size, max_size]``.

    Each character is drawn independently and uniformly.  The default range
    ``1..255`` never yields an empty string.
    """

    if min_size < 0:
        raise InvalidRangeError(min_size, max_size)
    if min_size > max_size:
        raise InvalidRangeError(min_size, max_size)
    r = _pick(rng)
    return "".join(r.choices(ALPHANUMERIC, k=r.randint(min_size, max_size)))


def new_uuid(rng: random.Random | None = None) -> UUID:
    """Return a version 4 UUID drawn from ``rng``."""

    return UUID(int=_pick(rng).getrandbits(128), version=4)


def new_datetime(clock: Clock) -> datetime:
    return clock.now()


def new_date(clock: Clock) -> date:
    return clock.now().date()


def new_time(clock: Clock) -> time:
    return clock.now().time()


def new_duration(
    min_ms: Number | None = None, max_ms: Number | None = None, rng: random.Random | None = None
) -> timedelta:
    """Return a duration of a whole number of milliseconds."""

    return timedelta(milliseconds=_integral(PrimitiveKind.DURATION, min_ms, max_ms, rng))


def new_period(
    min_days: Number | None = None, max_days: Number | None = None, rng: random.Random | None = None
) -> timedelta:
    """Return a period of a whole number of days."""

    return timedelta(days=_integral(PrimitiveKind.PERIOD, min_days, max_days, rng))


def draw_leaf(
    kind: PrimitiveKind,
    *,
    rng: random.Random,
    clock: Clock,
    number_range: tuple[Number | None, Number | None] = (None, None),
    string_length: tuple[int, int] = DEFAULT_STRING_LENGTH,
) -> Any:
    """Draw a random value of ``kind`` within the configured ranges."""

    lo, hi = number_range
    if kind is PrimitiveKind.BOOLEAN:
        return new_boolean(rng)
    if kind is PrimitiveKind.CHAR:
        return new_char(rng)
    if kind is PrimitiveKind.STRING:
        return new_string(string_length[0], string_length[1], rng)
    if kind is PrimitiveKind.UUID:
        return new_uuid(rng)
    if kind is PrimitiveKind.DATETIME:
        return new_datetime(clock)
    if kind is PrimitiveKind.DATE:
        return new_date(clock)
    if kind is PrimitiveKind.TIME:
        return new_time(clock)
    if kind is PrimitiveKind.DURATION:
        return new_duration(lo, hi, rng)
    if kind is PrimitiveKind.PERIOD:
        return new_period(lo, hi, rng)
    if kind is PrimitiveKind.DECIMAL:
        return new_decimal(lo, hi, rng)
    if kind in INTEGRAL_DOMAINS:
        return _integral(kind, lo, hi, rng)
    return _floating(kind, lo, hi, rng)


__all__ = [
    "ALPHANUMERIC",
    "DEFAULT_STRING_LENGTH",
    "coerce_range",
    "new_boolean",
    "new_int",
    "new_short",
    "new_long",
    "new_byte",
    "new_float",
    "new_double",
    "new_decimal",
    "new_char",
    "new_string",
    "new_uuid",
    "new_datetime",
    "new_date",
    "new_time",
    "new_duration",
    "new_period",
    "draw_leaf",
]
