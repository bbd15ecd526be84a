from __future__ import annotations

import random
import string
from datetime import timedelta
from decimal import Decimal

import pytest

from typefactory.generate.leaves import (
    coerce_range,
    draw_leaf,
    new_boolean,
    new_byte,
    new_decimal,
    new_double,
    new_duration,
    new_float,
    new_int,
    new_long,
    new_period,
    new_short,
    new_string,
    new_uuid,
)
from typefactory.model.clock import EPOCH, FixedClock
from typefactory.model.kinds import FLOAT32_MAX, PrimitiveKind
from typefactory.utils.errors import InvalidRangeError

ALNUM = set(string.ascii_letters + string.digits)


def test_new_int_stays_in_range() -> None:
    rng = random.Random(1)
    values = [new_int(1, 10, rng) for _ in range(500)]
    assert all(1 <= v <= 10 for v in values)
    assert set(values) == set(range(1, 11))


def test_new_int_rejects_inverted_range() -> None:
    with pytest.raises(InvalidRangeError) as exc_info:
        new_int(10, 1)
    assert exc_info.value.min_value == 10
    assert exc_info.value.max_value == 1
    assert isinstance(exc_info.value, ValueError)


def test_default_range_draws_are_diverse() -> None:
    rng = random.Random(7)
    values = [new_int(rng=rng) for _ in range(100)]
    assert len(set(values)) > 50


def test_new_boolean_yields_both_values() -> None:
    rng = random.Random(3)
    assert {new_boolean(rng) for _ in range(100)} == {True, False}


def test_integral_domains() -> None:
    rng = random.Random(11)
    for _ in range(200):
        assert -(2**15) <= new_short(rng=rng) <= 2**15 - 1
        assert -(2**63) <= new_long(rng=rng) <= 2**63 - 1
        assert 0 <= new_byte(rng=rng) <= 255


def test_wide_range_is_clamped_to_domain() -> None:
    assert coerce_range(PrimitiveKind.INT, 2**40, 2**41) == (2**31 - 1, 2**31 - 1)
    assert coerce_range(PrimitiveKind.BYTE, -10, 300) == (0, 255)
    assert new_byte(-10, -1) == 0


def test_fractional_bounds_shrink_inwards() -> None:
    assert coerce_range(PrimitiveKind.INT, 0.5, 2.5) == (1, 2)


def test_floating_draws_are_finite_and_bounded() -> None:
    rng = random.Random(5)
    for _ in range(200):
        d = new_double(rng=rng)
        f = new_float(rng=rng)
        assert d == d and abs(d) != float("inf")
        assert -FLOAT32_MAX <= f <= FLOAT32_MAX
        assert 0.0 <= new_double(0, 1, rng) <= 1.0


def test_new_decimal_returns_decimal_in_range() -> None:
    value = new_decimal(-5, 5, random.Random(2))
    assert isinstance(value, Decimal)
    assert Decimal(-5) <= value <= Decimal(5)


def test_new_string_length_and_alphabet() -> None:
    rng = random.Random(9)
    value = new_string(5, 5, rng)
    assert len(value) == 5
    assert set(value) <= ALNUM
    lengths = {len(new_string(rng=rng)) for _ in range(100)}
    assert min(lengths) >= 1
    assert max(lengths) <= 255


def test_new_string_rejects_bad_bounds() -> None:
    with pytest.raises(InvalidRangeError):
        new_string(3, 1)
    with pytest.raises(InvalidRangeError):
        new_string(-1, 4)


def test_new_string_allows_empty_when_requested() -> None:
    assert new_string(0, 0) == ""


def test_new_uuid_is_version_4_and_seeded() -> None:
    first = new_uuid(random.Random(42))
    second = new_uuid(random.Random(42))
    assert first == second
    assert first.version == 4


def test_duration_and_period() -> None:
    rng = random.Random(4)
    duration = new_duration(0, 1000, rng)
    period = new_period(1, 3, rng)
    assert timedelta(0) <= duration <= timedelta(seconds=1)
    assert duration.microseconds % 1000 == 0
    assert timedelta(days=1) <= period <= timedelta(days=3)
    assert period.seconds == 0


def test_full_range_duration_fits_timedelta() -> None:
    rng = random.Random(8)
    for _ in range(50):
        assert isinstance(new_duration(rng=rng), timedelta)
        assert isinstance(new_period(rng=rng), timedelta)


def test_draw_leaf_uses_clock_for_datetimes() -> None:
    clock = FixedClock()
    rng = random.Random(0)
    assert draw_leaf(PrimitiveKind.DATETIME, rng=rng, clock=clock) == EPOCH
    assert draw_leaf(PrimitiveKind.DATE, rng=rng, clock=clock) == EPOCH.date()
    assert draw_leaf(PrimitiveKind.TIME, rng=rng, clock=clock) == EPOCH.time()


def test_draw_leaf_applies_number_range() -> None:
    rng = random.Random(6)
    clock = FixedClock()
    for kind in (PrimitiveKind.SHORT, PrimitiveKind.INT, PrimitiveKind.LONG, PrimitiveKind.DOUBLE):
        value = draw_leaf(kind, rng=rng, clock=clock, number_range=(-3, 3))
        assert -3 <= value <= 3


def test_draw_leaf_char_is_single_alphanumeric() -> None:
    value = draw_leaf(PrimitiveKind.CHAR, rng=random.Random(1), clock=FixedClock())
    assert len(value) == 1
    assert value in ALNUM
