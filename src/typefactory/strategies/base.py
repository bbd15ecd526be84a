"""Generation strategy protocol.

A strategy is the single entry point of the recursive walk: every value,
from the root down to each leaf, is produced by
``context.strategy.generate(descriptor, context)``.  Strategies decide leaf
values, enumeration members, union members and container sizes, and delegate
the remaining structure to
:func:`typefactory.generate.dispatch.generate_structure`.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..generate.context import SynthesisContext
from ..generate.overrides import Override
from ..model.descriptor import TypeDescriptor


@runtime_checkable
class GenerationStrategy(Protocol):
    def generate(self, descriptor: TypeDescriptor, context: SynthesisContext) -> Any:
        """Return a value conforming to ``descriptor``."""

        ...


__all__ = ["GenerationStrategy", "Override"]
