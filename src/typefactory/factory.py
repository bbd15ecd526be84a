"""Public entry points: :func:`synthesize` and :func:`synthesize_many`.

Example::

    from typefactory import FixedStrategy, synthesize

    user = synthesize(User)                              # random values
    user = synthesize(User, strategy=FixedStrategy())    # deterministic values
    users = synthesize_many(User, 5, transform=lambda u, i: replace(u, id=i))
"""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import Any

from .config.schema import GenerationConfig
from .generate.context import SynthesisContext
from .introspect.base import ConstructorInvoker, TypeIntrospector
from .introspect.reflective import KeywordInvoker, ReflectiveIntrospector
from .model.descriptor import TypeDescriptor, describe
from .strategies.base import GenerationStrategy
from .strategies.random_strategy import RandomStrategy
from .utils.logging import get_logger

logger = get_logger(__name__)


def _root_context(
    config: GenerationConfig | None,
    strategy: GenerationStrategy | None,
    introspector: TypeIntrospector | None,
    invoker: ConstructorInvoker | None,
) -> SynthesisContext:
    config = config if config is not None else GenerationConfig()
    strategy = strategy if strategy is not None else RandomStrategy()
    if config.seed is not None:
        rng = random.Random(config.seed)
    else:
        rng = getattr(strategy, "rng", None) or random.Random()
    return SynthesisContext(
        config=config,
        strategy=strategy,
        introspector=introspector if introspector is not None else ReflectiveIntrospector(),
        invoker=invoker if invoker is not None else KeywordInvoker(),
        rng=rng,
    )


def _describe_target(target: Any) -> TypeDescriptor:
    return target if isinstance(target, TypeDescriptor) else describe(target)


def synthesize(
    target: Any,
    config: GenerationConfig | None = None,
    strategy: GenerationStrategy | None = None,
    *,
    transform: Callable[[Any], Any] | None = None,
    introspector: TypeIntrospector | None = None,
    invoker: ConstructorInvoker | None = None,
) -> Any:
    """Return a fully populated value of ``target``.

    ``target`` is any annotation :func:`~typefactory.model.describe` accepts,
    or a :class:`~typefactory.model.TypeDescriptor`.  The optional
    ``transform`` receives the synthesized value and its result is returned.

    Raises
    ------
    SynthesisError
        The first error raised anywhere in the walk, unchanged.
    """

    descriptor = _describe_target(target)
    context = _root_context(config, strategy, introspector, invoker)
    logger.debug("synthesizing %s with %r", descriptor, context.strategy)
    value = context.strategy.generate(descriptor, context)
    return transform(value) if transform is not None else value


def synthesize_many(
    target: Any,
    count: int,
    config: GenerationConfig | None = None,
    strategy: GenerationStrategy | None = None,
    *,
    transform: Callable[[Any, int], Any] | None = None,
    introspector: TypeIntrospector | None = None,
    invoker: ConstructorInvoker | None = None,
) -> list[Any]:
    """Return ``count`` independently synthesized values of ``target``.

    ``transform`` receives each value together with its zero-based index.
    """

    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    descriptor = _describe_target(target)
    context = _root_context(config, strategy, introspector, invoker)
    logger.debug("synthesizing %d x %s with %r", count, descriptor, context.strategy)
    values: list[Any] = []
    for index in range(count):
        value = context.strategy.generate(descriptor, context)
        values.append(transform(value, index) if transform is not None else value)
    return values


__all__ = ["synthesize", "synthesize_many"]
