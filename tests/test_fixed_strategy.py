from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import UUID

import pytest

from fixture_models import Address, Color, Scalars, User
from typefactory import FixedClock, FixedStrategy, Override, synthesize
from typefactory.model.clock import EPOCH
from typefactory.model.markers import Byte, Char, Float32, Long, Short


def test_fixed_output_is_deterministic() -> None:
    strategy = FixedStrategy()
    assert synthesize(User, strategy=strategy) == synthesize(User, strategy=strategy)


def test_fixed_user_values() -> None:
    user = synthesize(User, strategy=FixedStrategy())
    assert user.id == UUID(int=0)
    assert user.name == "name"
    assert user.email == "email"
    assert user.age == 0
    assert user.active is False
    assert user.color is Color.RED
    assert user.address == Address(street="street", city="city", zip_code=0)
    assert user.tags == []
    assert user.scores == {}
    assert user.created == EPOCH
    assert user.nickname == "nickname"


def test_root_string_uses_fixed_string() -> None:
    assert synthesize(str, strategy=FixedStrategy(string="fixed")) == "fixed"
    assert synthesize(list[str], strategy=FixedStrategy(list_size=1)) == ["string"]


def test_numeric_defaults_derive_from_int_value() -> None:
    strategy = FixedStrategy(int_value=300)
    assert synthesize(int, strategy=strategy) == 300
    assert synthesize(Short, strategy=strategy) == 300
    assert synthesize(Long, strategy=strategy) == 300
    assert synthesize(Byte, strategy=strategy) == 255
    assert synthesize(Float32, strategy=strategy) == 300.0
    assert synthesize(float, strategy=strategy) == 300.0
    assert synthesize(Decimal, strategy=strategy) == Decimal(300)
    assert synthesize(timedelta, strategy=strategy) == timedelta(milliseconds=300)
    assert synthesize(Char, strategy=strategy) == "a"


def test_explicit_constants_win() -> None:
    strategy = FixedStrategy(boolean=True, char="z", long=9, double=1.5)
    assert synthesize(bool, strategy=strategy) is True
    assert synthesize(Char, strategy=strategy) == "z"
    assert synthesize(Long, strategy=strategy) == 9
    assert synthesize(float, strategy=strategy) == 1.5


def test_clock_drives_temporal_leaves() -> None:
    instant = datetime(2024, 5, 17, 8, 30, tzinfo=timezone.utc)
    scalars = synthesize(Scalars, strategy=FixedStrategy(clock=FixedClock(instant)))
    assert scalars.day == instant.date()
    assert scalars.mode == "r"


def test_bare_value_override() -> None:
    home = Address(street="Main", city="Springfield", zip_code=1)
    user = synthesize(User, strategy=FixedStrategy(overrides=[home]))
    assert user.address is home


def test_typed_override() -> None:
    strategy = FixedStrategy(overrides=[Override(list[str], ["a", "b"]), Override(Color, Color.BLUE)])
    user = synthesize(User, strategy=strategy)
    assert user.tags == ["a", "b"]
    assert user.color is Color.BLUE


def test_override_for_other_arguments_does_not_match() -> None:
    strategy = FixedStrategy(overrides=[Override(list[int], [1])])
    assert synthesize(list[str], strategy=strategy) == []


@pytest.mark.parametrize("kwargs", [{"list_size": -1}, {"char": "ab"}])
def test_invalid_constants(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        FixedStrategy(**kwargs)  # type: ignore[arg-type]
