from __future__ import annotations

import random
from datetime import datetime, timezone

from fixture_models import Color, Scalars, User
from typefactory import FixedClock, GenerationConfig, Override, RandomStrategy, synthesize
from typefactory.config.schema import NumberRange, SizeRange


def _config(**kwargs: object) -> GenerationConfig:
    # A fixed clock keeps datetime fields reproducible across runs.
    return GenerationConfig(clock=FixedClock(), **kwargs)  # type: ignore[arg-type]


def test_seeded_config_reproduces_values() -> None:
    config = _config(seed=1234)
    assert synthesize(User, config) == synthesize(User, config)


def test_different_seeds_differ() -> None:
    assert synthesize(User, _config(seed=1)) != synthesize(User, _config(seed=2))


def test_strategy_generator_is_used_without_seed() -> None:
    first = synthesize(User, _config(), RandomStrategy(rng=random.Random(99)))
    second = synthesize(User, _config(), RandomStrategy(rng=random.Random(99)))
    assert first == second


def test_number_range_applies_to_every_numeric_kind() -> None:
    config = _config(number_range=NumberRange(min=10, max=20), seed=4)
    for _ in range(10):
        scalars = synthesize(Scalars, config)
        assert 10 <= scalars.small <= 20
        assert 10 <= scalars.short <= 20
        assert 10 <= scalars.medium <= 20
        assert 10 <= scalars.large <= 20
        assert 10.0 <= scalars.ratio <= 20.0


def test_string_length_range() -> None:
    config = _config(string_length=SizeRange(min=3, max=4))
    for _ in range(20):
        assert 3 <= len(synthesize(str, config)) <= 4


def test_union_members_are_both_drawn() -> None:
    strategy = RandomStrategy(rng=random.Random(17))
    kinds = {type(synthesize(int | str, strategy=strategy)) for _ in range(50)}
    assert kinds == {int, str}


def test_enum_members_vary() -> None:
    strategy = RandomStrategy(rng=random.Random(5))
    assert {synthesize(Color, strategy=strategy) for _ in range(100)} == set(Color)


def test_strategy_clock_wins_over_config_clock() -> None:
    instant = datetime(2020, 2, 2, tzinfo=timezone.utc)
    strategy = RandomStrategy(clock=FixedClock(instant))
    assert synthesize(datetime, _config(), strategy) == instant


def test_random_clock_window_by_default() -> None:
    value = synthesize(datetime, GenerationConfig(seed=3))
    assert datetime(1970, 1, 1, tzinfo=timezone.utc) <= value <= datetime.now(timezone.utc)


def test_overrides_short_circuit_generation() -> None:
    strategy = RandomStrategy(overrides=[Override(str, "same")])
    user = synthesize(User, strategy=strategy)
    assert user.name == user.email == "same"
    assert all(tag == "same" for tag in user.tags)
