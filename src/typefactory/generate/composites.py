"""Composite synthesis through a type's canonical constructor."""

from __future__ import annotations

from typing import Any

from ..model.descriptor import TypeDescriptor
from ..utils.errors import MaxDepthExceededError
from ..utils.logging import get_logger
from .context import SynthesisContext

logger = get_logger(__name__)


def build_composite(descriptor: TypeDescriptor, context: SynthesisContext) -> Any:
    """Instantiate ``descriptor.origin`` with a synthesized value per parameter.

    Type parameters declared by the class are bound positionally to
    ``descriptor.arguments``.  A parameter typed with a type variable that has
    no binding raises :class:`~typefactory.utils.errors.UnresolvedGenericParameterError`.
    With ``skip_defaults`` enabled, parameters that have a default are left
    to the constructor.

    Recursive containers and nullable references stop at ``max_recursion``
    (see :class:`~typefactory.generate.context.SynthesisContext`).  A class
    still being constructed further up the walk once ``max_depth`` is passed
    raises :class:`~typefactory.utils.errors.MaxDepthExceededError`.
    """

    cls = descriptor.origin
    if context.depth > context.config.max_depth and context.constructing(cls):
        raise MaxDepthExceededError(context.path, context.config.max_depth)

    introspector = context.introspector
    constructor = introspector.describe_constructor(cls)
    env = dict(zip(introspector.type_parameters(cls), descriptor.arguments))
    inner = context.within(descriptor)

    arguments: dict[str, Any] = {}
    for parameter in constructor.parameters:
        if parameter.has_default and context.config.skip_defaults:
            continue
        resolved = parameter.type.substitute(env, descriptor)
        arguments[parameter.name] = inner.generate(resolved, parameter.name, parameter=parameter.name)

    logger.debug(
        "constructing %s with %d argument(s) at depth %d",
        cls.__qualname__,
        len(arguments),
        context.depth,
    )
    return context.invoker.construct(constructor, arguments)


__all__ = ["build_composite"]
