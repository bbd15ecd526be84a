"""Tests for the layout and public surface of the typefactory subpackages."""

from __future__ import annotations

import importlib
import pkgutil
from importlib import resources

import pytest

import typefactory

MODULES = sorted(
    info.name for info in pkgutil.walk_packages(typefactory.__path__, typefactory.__name__ + ".")
)


def test_expected_subpackages_and_modules() -> None:
    top_level = {name.split(".")[1] for name in MODULES}
    assert {
        "cli",
        "config",
        "factory",
        "generate",
        "introspect",
        "model",
        "strategies",
        "utils",
    } <= top_level


@pytest.mark.parametrize("name", MODULES)
def test_module_is_documented(name: str) -> None:
    module = importlib.import_module(name)
    assert module.__doc__ and module.__doc__.strip()


@pytest.mark.parametrize("name", MODULES)
def test_exported_names_exist(name: str) -> None:
    module = importlib.import_module(name)
    missing = [attr for attr in getattr(module, "__all__", ()) if not hasattr(module, attr)]
    assert not missing, f"{name} exports undefined names {missing}"


def test_subpackages_reexport_their_building_blocks() -> None:
    from typefactory import generate, introspect, model, strategies

    assert {"TypeDescriptor", "describe", "hashable", "TypeKind"} <= set(model.__all__)
    assert {"SynthesisContext", "generate_structure", "build_composite"} <= set(generate.__all__)
    assert {"TypeIntrospector", "ReflectiveIntrospector", "TypeRegistry"} <= set(introspect.__all__)
    assert {"GenerationStrategy", "RandomStrategy", "FixedStrategy"} <= set(strategies.__all__)


def test_concrete_strategies_satisfy_protocol() -> None:
    from typefactory.strategies import FixedStrategy, GenerationStrategy, RandomStrategy

    assert isinstance(RandomStrategy(), GenerationStrategy)
    assert isinstance(FixedStrategy(), GenerationStrategy)


def test_defaults_ship_with_config_package() -> None:
    assert resources.files("typefactory.config").joinpath("defaults.yml").is_file()
