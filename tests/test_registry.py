from __future__ import annotations

from typing import Any

import pytest

from fixture_models import Address, Sealed
from typefactory import FixedStrategy, GenerationConfig, TypeRegistry, synthesize
from typefactory.introspect.base import TypeIntrospector
from typefactory.utils.errors import ConstructionError


class Opaque:
    """Accepts anything, so reflection learns nothing about it."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.args = args
        self.kwargs = kwargs

    @classmethod
    def create(cls, width: int, label: str) -> Opaque:
        return cls(width, label=label)


def test_registered_schema_is_used() -> None:
    registry = TypeRegistry()
    registry.register(Opaque, {"width": int, "label": str}, factory=Opaque.create)
    assert Opaque in registry
    value = synthesize(Opaque, strategy=FixedStrategy(int_value=6), introspector=registry)
    assert value.args == (6,)
    assert value.kwargs == {"label": "label"}


def test_unregistered_types_fall_back_to_reflection() -> None:
    registry = TypeRegistry()
    assert isinstance(registry, TypeIntrospector)
    value = synthesize(Address, strategy=FixedStrategy(), introspector=registry)
    assert value == Address(street="street", city="city", zip_code=0)


def test_registered_defaults_honour_skip_defaults() -> None:
    registry = TypeRegistry()
    registry.register(
        Opaque,
        {"width": int, "label": str},
        factory=lambda width, label="preset": Opaque.create(width, label),
        defaults=["label"],
    )
    config = GenerationConfig(skip_defaults=True)
    value = synthesize(Opaque, config, FixedStrategy(int_value=1), introspector=registry)
    assert value.kwargs == {"label": "preset"}


def test_registered_factory_errors_are_wrapped() -> None:
    registry = TypeRegistry()
    registry.register(Opaque, {"width": int}, factory=Opaque.create)
    with pytest.raises(ConstructionError):
        synthesize(Opaque, strategy=FixedStrategy(), introspector=registry)


def test_registered_conversion() -> None:
    registry = TypeRegistry()
    registry.register_conversion(Sealed, lambda values: Sealed(*(values + [0, 0])[:2]))
    value = synthesize(Sealed, strategy=FixedStrategy(list_size=1, int_value=4), introspector=registry)
    assert list(value) == [4, 0]


def test_unknown_parameter_names_are_rejected() -> None:
    registry = TypeRegistry()
    with pytest.raises(ValueError):
        registry.register(Opaque, {"width": int}, defaults=["height"])
