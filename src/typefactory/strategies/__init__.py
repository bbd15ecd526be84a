"""Generation strategies: random draws or fixed constants."""

from .base import GenerationStrategy, Override
from .fixed_strategy import FixedStrategy
from .random_strategy import RandomStrategy

__all__ = ["GenerationStrategy", "Override", "FixedStrategy", "RandomStrategy"]
