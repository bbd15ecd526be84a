"""Type model: descriptors, leaf kinds, annotation markers and clocks."""

from .clock import EPOCH, Clock, FixedClock, RandomClock, SystemClock, resolve_timezone
from .descriptor import TypeDescriptor, describe, hashable, primitive_descriptor
from .kinds import PrimitiveKind, TypeKind

__all__ = [
    "EPOCH",
    "Clock",
    "FixedClock",
    "RandomClock",
    "SystemClock",
    "resolve_timezone",
    "TypeDescriptor",
    "describe",
    "hashable",
    "primitive_descriptor",
    "PrimitiveKind",
    "TypeKind",
]
