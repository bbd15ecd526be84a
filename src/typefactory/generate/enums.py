"""Enumeration member selection."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import TypeVar

from ..utils.errors import EmptyEnumError

T = TypeVar("T")

_DEFAULT_RNG = random.Random()


def _members(values: Iterable[T]) -> list[T]:
    members = list(values)
    if not members:
        raise EmptyEnumError("Enumeration has no members to choose from")
    return members


def new_enum(values: Iterable[T], rng: random.Random | None = None) -> T:
    """Return a member of ``values`` chosen uniformly at random.

    ``values`` may be an :class:`enum.Enum` subclass, since iterating one
    yields its members in declaration order.
    """

    return (rng if rng is not None else _DEFAULT_RNG).choice(_members(values))


def first_enum(values: Iterable[T]) -> T:
    """Return the first declared member of ``values``."""

    return _members(values)[0]


__all__ = ["new_enum", "first_enum"]
