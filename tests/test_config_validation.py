from pathlib import Path

import pytest
from pydantic import ValidationError

from typefactory.config import GenerationConfig, NumberRange, SizeRange, load_config


def test_inverted_ranges_load_unchanged(tmp_path: Path) -> None:
    cfg_file = tmp_path / "inverted.yml"
    cfg_file.write_text("list_size:\n  min: 5\n  max: 1\nnumber_range:\n  min: 3\n  max: -3\n")
    cfg = load_config(cfg_file, env={})
    assert cfg.list_size.bounds == (5, 1)
    assert cfg.number_range == NumberRange(min=3, max=-3)


def test_negative_size(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("map_size:\n  min: -1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_recursion_limit_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        GenerationConfig(max_recursion=0)


def test_empty_strings_are_not_allowed() -> None:
    with pytest.raises(ValidationError):
        GenerationConfig(string_length=SizeRange(min=0, max=4))


def test_unknown_timezone() -> None:
    with pytest.raises(ValidationError):
        GenerationConfig(timezone="Mars/Olympus_Mons")


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_config_is_frozen() -> None:
    cfg = GenerationConfig()
    with pytest.raises(ValidationError):
        cfg.max_depth = 3  # type: ignore[misc]
