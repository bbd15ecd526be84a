"""Typed configuration schema and loader for the typefactory package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, ConfigDict, Field, conint, field_validator

from ..model.clock import Clock, resolve_timezone
from ..model.kinds import INTEGRAL_DOMAINS, PrimitiveKind

SEED_ENV = "TYPEFACTORY_SEED"

_LONG_MIN, _LONG_MAX = INTEGRAL_DOMAINS[PrimitiveKind.LONG]

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SizeRange(BaseModel):
    """Inclusive range of container sizes or string lengths."""

    min: conint(ge=0)
    max: conint(ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def bounds(self) -> tuple[int, int]:
        return self.min, self.max


class NumberRange(BaseModel):
    """Inclusive bounds applied to every numeric leaf before domain clamping."""

    min: int | float = _LONG_MIN
    max: int | float = _LONG_MAX

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def bounds(self) -> tuple[int | float, int | float]:
        return self.min, self.max


class GenerationConfig(BaseModel):
    """Top-level configuration model.

    Range order is not validated here: a range with ``min > max`` raises
    :class:`~typefactory.utils.errors.InvalidRangeError` when a value is drawn
    from it.  ``max_recursion`` is how many instances of one class may nest
    on a single path before recursive containers come out empty and nullable
    references ``None``.

    ``clock`` can't be expressed in YAML; set it programmatically, e.g.
    ``config.model_copy(update={"clock": FixedClock()})``.
    """

    schema_version: conint(ge=1) = 1
    list_size: SizeRange = SizeRange(min=0, max=10)
    map_size: SizeRange = SizeRange(min=0, max=10)
    number_range: NumberRange = NumberRange()
    string_length: SizeRange = SizeRange(min=1, max=255)
    skip_defaults: bool = False
    max_depth: conint(ge=1) = 32
    max_recursion: conint(ge=1) = 3
    seed: int | None = None
    timezone: str = "UTC"
    clock: Clock | None = Field(default=None, exclude=True)

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    @field_validator("string_length")
    @classmethod
    def _non_empty_strings(cls, value: SizeRange) -> SizeRange:
        if value.min < 1:
            raise ValueError("string_length.min must be at least 1")
        return value

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            resolve_timezone(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {value!r}") from exc
        return value


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> GenerationConfig:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    the ``TYPEFACTORY_SEED`` environment variable.
    """

    with (
        importlib_resources.files("typefactory.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    if environ.get(SEED_ENV):
        merged = deep_merge_dicts(merged, {"seed": environ[SEED_ENV]})

    return GenerationConfig.model_validate(merged)


__all__ = [
    "SEED_ENV",
    "SizeRange",
    "NumberRange",
    "GenerationConfig",
    "deep_merge_dicts",
    "load_config",
]
