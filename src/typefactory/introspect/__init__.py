"""Constructor discovery and invocation."""

from .base import ConstructorDescriptor, ConstructorInvoker, ParameterDescriptor, TypeIntrospector
from .reflective import KeywordInvoker, ReflectiveIntrospector
from .registry import TypeRegistry

__all__ = [
    "ConstructorDescriptor",
    "ConstructorInvoker",
    "ParameterDescriptor",
    "TypeIntrospector",
    "KeywordInvoker",
    "ReflectiveIntrospector",
    "TypeRegistry",
]
