"""Annotation markers for leaf kinds and primitive arrays Python has no name for.

Python's ``int`` and ``float`` already cover the 32-bit integer and the double
kinds.  The narrower or wider kinds are spelled with :func:`typing.NewType`
markers so that a field annotated ``Short`` is generated within the 16-bit
domain while still being a plain ``int`` at runtime.

Primitive arrays are ``Annotated`` aliases whose metadata names the element
kind, e.g. ``IntArray`` materializes as ``array.array("i", ...)``.
"""

from __future__ import annotations

import array
from datetime import timedelta
from typing import Annotated, NewType

from .kinds import PrimitiveKind

Byte = NewType("Byte", int)
Char = NewType("Char", str)
Short = NewType("Short", int)
Long = NewType("Long", int)
Float32 = NewType("Float32", float)
Period = NewType("Period", timedelta)

ByteArray = bytes
BooleanArray = Annotated[tuple, PrimitiveKind.BOOLEAN]
CharArray = Annotated[array.array, PrimitiveKind.CHAR]
ShortArray = Annotated[array.array, PrimitiveKind.SHORT]
IntArray = Annotated[array.array, PrimitiveKind.INT]
LongArray = Annotated[array.array, PrimitiveKind.LONG]
FloatArray = Annotated[array.array, PrimitiveKind.FLOAT]
DoubleArray = Annotated[array.array, PrimitiveKind.DOUBLE]

__all__ = [
    "Byte",
    "Char",
    "Short",
    "Long",
    "Float32",
    "Period",
    "ByteArray",
    "BooleanArray",
    "CharArray",
    "ShortArray",
    "IntArray",
    "LongArray",
    "FloatArray",
    "DoubleArray",
]
