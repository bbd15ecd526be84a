"""Per-call synthesis state threaded through the recursive walk."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from ..config.schema import GenerationConfig
from ..introspect.base import ConstructorInvoker, TypeIntrospector
from ..model.descriptor import TypeDescriptor
from ..model.kinds import TypeKind

if TYPE_CHECKING:
    from ..strategies.base import GenerationStrategy


def _composites(descriptor: TypeDescriptor) -> Iterator[TypeDescriptor]:
    if descriptor.kind is TypeKind.COMPOSITE:
        yield descriptor.non_null()
    for argument in descriptor.arguments:
        yield from _composites(argument)


@dataclass(slots=True, frozen=True)
class SynthesisContext:
    """Immutable view of one position in the synthesis walk.

    ``path`` names the steps from the root (parameter names, ``[i]`` for
    elements, ``<key i>``/``<value i>`` for map entries), ``lineage`` holds
    the descriptors of the composites currently under construction and
    ``parameter`` is the constructor parameter being filled, if any.
    """

    config: GenerationConfig
    strategy: GenerationStrategy
    introspector: TypeIntrospector
    invoker: ConstructorInvoker
    rng: random.Random
    depth: int = 0
    path: tuple[str, ...] = ()
    lineage: tuple[TypeDescriptor, ...] = ()
    parameter: str | None = None

    @property
    def exhausted(self) -> bool:
        """``True`` once the walk is ``max_depth`` levels deep."""

        return self.depth >= self.config.max_depth

    def constructing(self, cls: Any) -> bool:
        """``True`` if an instance of ``cls`` is under construction further up."""

        return any(entry.origin is cls for entry in self.lineage)

    def recursing(self, descriptor: TypeDescriptor) -> bool:
        """``True`` if ``descriptor`` reaches a composite already nested ``max_recursion`` times.

        Composites compare with their type arguments, so ``Box[Box[int]]``
        does not count as a recursion of ``Box[int]``.
        """

        limit = self.config.max_recursion
        return any(self.lineage.count(c) >= limit for c in _composites(descriptor))

    def viable(self, members: Sequence[TypeDescriptor]) -> list[TypeDescriptor]:
        """Return the union ``members`` that do not lead back into the lineage.

        Once the walk is exhausted a member naming any class under
        construction is dropped.  When every member recurses, all of them are
        returned.
        """

        if self.exhausted:
            safe = [m for m in members if not any(self.constructing(c.origin) for c in _composites(m))]
        else:
            safe = [m for m in members if not self.recursing(m)]
        return safe or list(members)

    def child(self, segment: str, parameter: str | None = None) -> SynthesisContext:
        return replace(self, depth=self.depth + 1, path=self.path + (segment,), parameter=parameter)

    def within(self, descriptor: TypeDescriptor) -> SynthesisContext:
        """Return this context with ``descriptor`` recorded as under construction."""

        return replace(self, lineage=self.lineage + (descriptor.non_null(),))

    def generate(self, descriptor: TypeDescriptor, segment: str, *, parameter: str | None = None) -> Any:
        """Synthesize ``descriptor`` one level below this position.

        Past ``max_depth``, or once the value would nest a class more than
        ``max_recursion`` times, nullable values resolve to ``None``.
        """

        if descriptor.nullable and (self.exhausted or self.recursing(descriptor)):
            return None
        return self.strategy.generate(descriptor, self.child(segment, parameter))


__all__ = ["SynthesisContext"]
