from __future__ import annotations

import random

import pytest

from fixture_models import Color, Nothing
from typefactory.generate.enums import first_enum, new_enum
from typefactory.utils.errors import EmptyEnumError


def test_new_enum_covers_all_members() -> None:
    rng = random.Random(12)
    picks = {new_enum(Color, rng) for _ in range(200)}
    assert picks == set(Color)


def test_new_enum_accepts_plain_sequences() -> None:
    assert new_enum(["only"]) == "only"


def test_first_enum_is_declaration_order() -> None:
    assert first_enum(Color) is Color.RED


@pytest.mark.parametrize("values", [Nothing, []])
def test_empty_enumeration_fails(values: object) -> None:
    with pytest.raises(EmptyEnumError):
        new_enum(values)  # type: ignore[arg-type]
    with pytest.raises(EmptyEnumError):
        first_enum(values)  # type: ignore[arg-type]
