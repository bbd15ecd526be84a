"""Value generators and the structural synthesizers built on them."""

from .composites import build_composite
from .context import SynthesisContext
from .dispatch import enum_members, generate_structure
from .enums import first_enum, new_enum
from .leaves import (
    coerce_range,
    draw_leaf,
    new_boolean,
    new_byte,
    new_char,
    new_date,
    new_datetime,
    new_decimal,
    new_double,
    new_duration,
    new_float,
    new_int,
    new_long,
    new_period,
    new_short,
    new_string,
    new_time,
    new_uuid,
)
from .overrides import Override, find_override, normalize_overrides

__all__ = [
    "SynthesisContext",
    "build_composite",
    "enum_members",
    "generate_structure",
    "first_enum",
    "new_enum",
    "coerce_range",
    "draw_leaf",
    "new_boolean",
    "new_byte",
    "new_char",
    "new_date",
    "new_datetime",
    "new_decimal",
    "new_double",
    "new_duration",
    "new_float",
    "new_int",
    "new_long",
    "new_period",
    "new_short",
    "new_string",
    "new_time",
    "new_uuid",
    "Override",
    "find_override",
    "normalize_overrides",
]
