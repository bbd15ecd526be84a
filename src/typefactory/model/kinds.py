"""Discriminators for type descriptors and the domains of leaf kinds."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Final


class TypeKind(Enum):
    """Shape of a type as seen by the dispatcher."""

    PRIMITIVE = "primitive"
    PRIMITIVE_ARRAY = "primitive_array"
    COLLECTION = "collection"
    ARRAY = "array"
    TUPLE = "tuple"
    MAP = "map"
    ENUM = "enum"
    UNION = "union"
    COMPOSITE = "composite"
    TYPE_PARAMETER = "type_parameter"


class PrimitiveKind(Enum):
    """Leaf value kinds produced directly by the leaf generators."""

    BOOLEAN = "boolean"
    BYTE = "byte"
    CHAR = "char"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    STRING = "string"
    UUID = "uuid"
    DATETIME = "datetime"
    DATE = "date"
    TIME = "time"
    DURATION = "duration"
    PERIOD = "period"


FLOAT32_MAX: Final = 3.4028234663852886e38
DOUBLE_MAX: Final = sys.float_info.max
# ``timedelta`` holds at most 999999999 days.
DURATION_MAX_MS: Final = 999_999_999 * 86_400_000
PERIOD_MAX_DAYS: Final = 999_999_999

INTEGRAL_DOMAINS: Final[dict[PrimitiveKind, tuple[int, int]]] = {
    PrimitiveKind.BYTE: (0, 255),
    PrimitiveKind.SHORT: (-(2**15), 2**15 - 1),
    PrimitiveKind.INT: (-(2**31), 2**31 - 1),
    PrimitiveKind.LONG: (-(2**63), 2**63 - 1),
    PrimitiveKind.DURATION: (-DURATION_MAX_MS, DURATION_MAX_MS),
    PrimitiveKind.PERIOD: (-PERIOD_MAX_DAYS, PERIOD_MAX_DAYS),
}

FLOATING_DOMAINS: Final[dict[PrimitiveKind, tuple[float, float]]] = {
    PrimitiveKind.FLOAT: (-FLOAT32_MAX, FLOAT32_MAX),
    PrimitiveKind.DOUBLE: (-DOUBLE_MAX, DOUBLE_MAX),
    PrimitiveKind.DECIMAL: (-DOUBLE_MAX, DOUBLE_MAX),
}

# ``array.array`` typecodes; "u" is deprecated from 3.13 in favour of "w".
ARRAY_TYPECODES: Final[dict[PrimitiveKind, str]] = {
    PrimitiveKind.BYTE: "B",
    PrimitiveKind.CHAR: "w" if sys.version_info >= (3, 13) else "u",
    PrimitiveKind.SHORT: "h",
    PrimitiveKind.INT: "i",
    PrimitiveKind.LONG: "q",
    PrimitiveKind.FLOAT: "f",
    PrimitiveKind.DOUBLE: "d",
}

__all__ = [
    "TypeKind",
    "PrimitiveKind",
    "FLOAT32_MAX",
    "DOUBLE_MAX",
    "DURATION_MAX_MS",
    "PERIOD_MAX_DAYS",
    "INTEGRAL_DOMAINS",
    "FLOATING_DOMAINS",
    "ARRAY_TYPECODES",
]
