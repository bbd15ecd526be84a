"""Typed exceptions raised while synthesizing values.

None of these conditions is retried internally.  Synthesis of a composite value
either succeeds completely or the first error raised during the depth-first
walk propagates to the caller unchanged.
"""

from __future__ import annotations

from typing import Any


class SynthesisError(Exception):
    """Base class for every error raised by the synthesis engine."""


class InvalidRangeError(SynthesisError, ValueError):
    """Raised when a bounded generator receives ``min > max``."""

    def __init__(self, min_value: Any, max_value: Any) -> None:
        super().__init__(
            f"The minimum value ({min_value}) cannot be higher than the maximum value ({max_value})."
        )
        self.min_value = min_value
        self.max_value = max_value


class UnsupportedTypeError(SynthesisError, TypeError):
    """Raised when no synthesis rule matches a type."""

    def __init__(self, target: Any, reason: str | None = None) -> None:
        message = f"Type {target!s} is not supported"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.target = target


class NoConstructorError(SynthesisError, TypeError):
    """Raised when a composite type exposes no usable constructor."""

    def __init__(self, target: Any, reason: str | None = None) -> None:
        name = getattr(target, "__qualname__", None) or str(target)
        message = f"Can't find a constructor for type {name}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.target = target


class NoConversionConstructorError(NoConstructorError):
    """Raised when a container type can't be built from the canonical container."""

    def __init__(self, target: Any, canonical: type) -> None:
        super().__init__(target, f"no single-argument constructor accepting {canonical.__name__}")
        self.canonical = canonical


class UnresolvedGenericParameterError(SynthesisError, TypeError):
    """Raised when a type parameter has no binding in the enclosing type."""

    def __init__(self, name: str, owner: Any = None) -> None:
        message = f"Can't resolve type parameter {name}"
        if owner is not None:
            message = f"{message} for {owner!s}"
        super().__init__(message)
        self.name = name
        self.owner = owner


class EmptyEnumError(SynthesisError, ValueError):
    """Raised when an enumeration declares no members."""


class ConstructionError(SynthesisError):
    """Raised when a constructor rejects the synthesized arguments."""


class MaxDepthExceededError(SynthesisError, RecursionError):
    """Raised when synthesis descends deeper than ``max_depth``."""

    def __init__(self, path: tuple[str, ...], max_depth: int) -> None:
        super().__init__(
            f"Maximum synthesis depth {max_depth} exceeded at {' -> '.join(path) or '<root>'}"
        )
        self.path = path
        self.max_depth = max_depth


__all__ = [
    "SynthesisError",
    "InvalidRangeError",
    "UnsupportedTypeError",
    "NoConstructorError",
    "NoConversionConstructorError",
    "UnresolvedGenericParameterError",
    "EmptyEnumError",
    "ConstructionError",
    "MaxDepthExceededError",
]
