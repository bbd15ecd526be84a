"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. The ``TYPEFACTORY_SEED`` environment variable
"""

from .schema import GenerationConfig, NumberRange, SizeRange, load_config

__all__ = ["GenerationConfig", "NumberRange", "SizeRange", "load_config"]
