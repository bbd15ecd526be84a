"""Type-driven synthesis of fully populated test fixtures.

Given a class or type annotation, :func:`synthesize` walks its constructor
recursively and fills every parameter with a value drawn by a strategy:
:class:`RandomStrategy` for random values within configured ranges, or
:class:`FixedStrategy` for deterministic constants.
"""

from .config import GenerationConfig, load_config
from .factory import synthesize, synthesize_many
from .introspect import KeywordInvoker, ReflectiveIntrospector, TypeRegistry
from .model import FixedClock, RandomClock, SystemClock, TypeDescriptor, describe
from .strategies import FixedStrategy, GenerationStrategy, Override, RandomStrategy
from .utils.errors import SynthesisError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "GenerationConfig",
    "load_config",
    "synthesize",
    "synthesize_many",
    "KeywordInvoker",
    "ReflectiveIntrospector",
    "TypeRegistry",
    "FixedClock",
    "RandomClock",
    "SystemClock",
    "TypeDescriptor",
    "describe",
    "FixedStrategy",
    "GenerationStrategy",
    "Override",
    "RandomStrategy",
    "SynthesisError",
]
