"""Reflection based introspector and keyword constructor invoker.

:class:`ReflectiveIntrospector` reads constructor schemas with
:func:`inspect.signature` and resolves annotations with
:func:`typing.get_type_hints`.  That covers dataclasses, attrs classes, pydantic
models, ``NamedTuple`` types and plain classes with an annotated ``__init__``.

Generic bindings a class passes to its bases (``class Tags(Box[str])``) are
applied to the schema right away, so parameters typed with the base's type
variables arrive already substituted.
"""

from __future__ import annotations

import collections
import collections.abc as cabc
import inspect
import types
import typing
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, TypeVar, get_args, get_origin

from ..model.descriptor import TypeDescriptor, describe
from ..utils.errors import ConstructionError, NoConstructorError, UnsupportedTypeError
from ..utils.logging import get_logger
from .base import ConstructorDescriptor, ParameterDescriptor

logger = get_logger(__name__)

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)

# Builtin containers whose first positional argument is an iterable or mapping.
_BUILTIN_CONVERSIONS: frozenset[type] = frozenset(
    {
        list,
        dict,
        set,
        frozenset,
        tuple,
        collections.deque,
        collections.OrderedDict,
        collections.Counter,
        types.MappingProxyType,
    }
)


def _type_hints(target: Any, cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(target, localns={cls.__name__: cls}, include_extras=True)
    except NameError as exc:
        raise UnsupportedTypeError(
            cls.__qualname__, f"unresolved forward reference {exc.name or exc}"
        ) from exc
    except TypeError as exc:
        raise UnsupportedTypeError(cls.__qualname__, f"unresolvable annotations: {exc}") from exc


def constructor_hints(cls: type) -> dict[str, Any]:
    """Return resolved annotations for the constructor parameters of ``cls``.

    Class level annotations (dataclass and model fields) are overridden by the
    annotations of a Python-level ``__init__``.

    Raises
    ------
    UnsupportedTypeError
        If an annotation names something that can't be resolved.
    """

    hints = _type_hints(cls, cls)
    init = getattr(cls, "__init__", None)
    if inspect.isfunction(init):
        hints.update(_type_hints(init, cls))
    hints.pop("return", None)
    return hints


def _inherited_bindings(cls: type) -> dict[str, TypeDescriptor]:
    env: dict[str, TypeDescriptor] = {}
    for klass in cls.__mro__:
        for orig in klass.__dict__.get("__orig_bases__", ()):
            base = get_origin(orig)
            params = getattr(base, "__parameters__", ())
            for param, arg in zip(params, get_args(orig)):
                if isinstance(param, TypeVar) and arg is not param:
                    env.setdefault(param.__name__, describe(arg))
    return env


def _accepts(annotation: Any, canonical: type) -> bool:
    """Return ``True`` when a parameter annotated ``annotation`` accepts ``canonical``."""

    if annotation is Any or annotation is object:
        return True
    origin = get_origin(annotation)
    if origin is typing.Annotated:
        return _accepts(get_args(annotation)[0], canonical)
    if origin is typing.Union or origin is types.UnionType:
        return any(_accepts(member, canonical) for member in get_args(annotation))
    target = origin if origin is not None else annotation
    return isinstance(target, type) and issubclass(canonical, target)


class ReflectiveIntrospector:
    """Default :class:`~typefactory.introspect.base.TypeIntrospector`."""

    def describe_constructor(self, cls: type) -> ConstructorDescriptor:
        if inspect.isabstract(cls) or getattr(cls, "_is_protocol", False):
            raise NoConstructorError(cls, "abstract classes can't be instantiated")
        try:
            signature = inspect.signature(cls)
        except (TypeError, ValueError) as exc:
            raise NoConstructorError(cls, str(exc)) from exc

        hints = constructor_hints(cls)
        inherited = _inherited_bindings(cls)
        parameters: list[ParameterDescriptor] = []
        for param in signature.parameters.values():
            if param.kind in _VARIADIC:
                continue
            has_default = param.default is not inspect.Parameter.empty
            annotation = hints.get(param.name, param.annotation)
            if annotation is inspect.Parameter.empty or isinstance(annotation, str):
                if has_default:
                    logger.debug("skipping unannotated parameter %s.%s", cls.__qualname__, param.name)
                    continue
                raise UnsupportedTypeError(
                    f"{cls.__qualname__}.{param.name}", "parameter has no resolvable type annotation"
                )
            descriptor = describe(annotation)
            if inherited:
                descriptor = descriptor.substitute(inherited, cls, strict=False)
            parameters.append(
                ParameterDescriptor(
                    name=param.name,
                    type=descriptor,
                    has_default=has_default,
                    positional_only=param.kind is inspect.Parameter.POSITIONAL_ONLY,
                )
            )
        return ConstructorDescriptor(owner=cls, factory=cls, parameters=tuple(parameters))

    def type_parameters(self, cls: type) -> tuple[str, ...]:
        return tuple(
            param.__name__ for param in getattr(cls, "__parameters__", ()) if isinstance(param, TypeVar)
        )

    def enum_constants(self, cls: type) -> list[Any]:
        if not (isinstance(cls, type) and issubclass(cls, Enum)):
            raise UnsupportedTypeError(cls, "not an enumeration")
        return list(cls)

    def find_conversion_constructor(
        self, cls: type, canonical: type
    ) -> Callable[[Any], Any] | None:
        if cls in _BUILTIN_CONVERSIONS:
            return cls
        if inspect.isabstract(cls):
            return None
        try:
            signature = inspect.signature(cls)
        except (TypeError, ValueError):
            return None

        params = [p for p in signature.parameters.values() if p.kind not in _VARIADIC]
        if not params or params[0].kind is inspect.Parameter.KEYWORD_ONLY:
            return None
        first, rest = params[0], params[1:]
        if any(p.default is inspect.Parameter.empty for p in rest):
            return None

        annotation = constructor_hints(cls).get(first.name, first.annotation)
        if annotation is inspect.Parameter.empty or isinstance(annotation, str):
            abc = cabc.Mapping if issubclass(canonical, cabc.Mapping) else cabc.Collection
            accepted = issubclass(cls, abc)
        else:
            accepted = _accepts(annotation, canonical)
        return cls if accepted else None


class KeywordInvoker:
    """Default :class:`~typefactory.introspect.base.ConstructorInvoker`.

    Positional-only parameters are passed positionally in declaration order,
    everything else by keyword.  Parameters absent from ``arguments`` are left
    to their defaults.
    """

    def construct(self, constructor: ConstructorDescriptor, arguments: Mapping[str, Any]) -> Any:
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for parameter in constructor.parameters:
            if parameter.name not in arguments:
                continue
            if parameter.positional_only:
                args.append(arguments[parameter.name])
            else:
                kwargs[parameter.name] = arguments[parameter.name]
        try:
            return constructor.factory(*args, **kwargs)
        except (TypeError, ValueError) as exc:
            raise ConstructionError(
                f"Can't construct {constructor.owner.__qualname__}: {exc}"
            ) from exc


__all__ = [
    "ReflectiveIntrospector",
    "KeywordInvoker",
    "constructor_hints",
]
