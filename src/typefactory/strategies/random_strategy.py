"""Random value strategy."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any

from ..generate.context import SynthesisContext
from ..generate.dispatch import enum_members, generate_structure
from ..generate.enums import new_enum
from ..generate.leaves import draw_leaf
from ..generate.overrides import MISSING, find_override, normalize_overrides
from ..model.clock import Clock, RandomClock, resolve_timezone
from ..model.descriptor import TypeDescriptor
from ..model.kinds import TypeKind
from ..utils.errors import InvalidRangeError


class RandomStrategy:
    """Draw every leaf, enumeration member, union member and size at random.

    Parameters
    ----------
    rng:
        Generator used when the configuration carries no ``seed``.
    clock:
        Clock for date/time leaves.  Defaults to ``config.clock`` and then to a
        :class:`~typefactory.model.clock.RandomClock` driven by the call's
        generator.
    overrides:
        :class:`~typefactory.strategies.base.Override` entries or bare values
        returned instead of synthesizing matching types.
    """

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        clock: Clock | None = None,
        overrides: Iterable[Any] = (),
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.overrides = normalize_overrides(overrides)

    def _clock(self, context: SynthesisContext) -> Clock:
        if self.clock is not None:
            return self.clock
        if context.config.clock is not None:
            return context.config.clock
        return RandomClock(context.rng, tz=resolve_timezone(context.config.timezone))

    def _size(self, descriptor: TypeDescriptor, context: SynthesisContext) -> int:
        bounds = context.config.map_size if descriptor.kind is TypeKind.MAP else context.config.list_size
        if bounds.min > bounds.max:
            raise InvalidRangeError(bounds.min, bounds.max)
        return context.rng.randint(bounds.min, bounds.max)

    def generate(self, descriptor: TypeDescriptor, context: SynthesisContext) -> Any:
        value = find_override(descriptor, self.overrides)
        if value is not MISSING:
            return value

        kind = descriptor.kind
        if kind is TypeKind.PRIMITIVE:
            assert descriptor.primitive is not None
            return draw_leaf(
                descriptor.primitive,
                rng=context.rng,
                clock=self._clock(context),
                number_range=context.config.number_range.bounds,
                string_length=context.config.string_length.bounds,
            )
        if kind is TypeKind.ENUM:
            return new_enum(enum_members(descriptor, context), context.rng)
        if kind is TypeKind.UNION:
            member = context.rng.choice(context.viable(descriptor.arguments))
            return context.strategy.generate(member, context)
        return generate_structure(descriptor, context, size=self._size)

    def __repr__(self) -> str:
        return f"RandomStrategy(clock={self.clock!r}, overrides={len(self.overrides)})"


__all__ = ["RandomStrategy"]
