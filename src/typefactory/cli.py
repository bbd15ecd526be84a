"""Typer-based command line interface for fixture synthesis.

The ``generate`` command imports a type by ``module:QualName``, synthesizes
one or more values of it and prints them as JSON on stdout.

Exit codes
----------
0 success
3 target import error (missing module or attribute)
4 configuration error
5 synthesis error (unsupported type, missing constructor, ...)
"""

from __future__ import annotations

import importlib
import json
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import GenerationConfig, load_config
from .factory import synthesize_many
from .strategies import FixedStrategy, RandomStrategy
from .strategies.base import GenerationStrategy
from .utils.errors import SynthesisError
from .utils.logging import configure, get_logger
from .utils.render import to_jsonable

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

logger = get_logger(__name__)

app = typer.Typer(
    name="typefactory",
    help="Synthesize test fixtures from type annotations. Use 'typefactory generate' to print values.",
)


class StrategyName(str, Enum):
    random = "random"
    fixed = "fixed"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _resolve_target(reference: str) -> Any:
    """Import ``module:Qual.Name`` and return the named attribute."""

    module_name, sep, qualname = reference.partition(":")
    if not sep or not module_name or not qualname:
        raise ImportError(f"Target must look like 'module:QualName', got {reference!r}")
    target: Any = importlib.import_module(module_name)
    for part in qualname.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ImportError(f"{module_name} has no attribute {qualname!r}") from exc
    return target


def _apply_overrides(
    cfg: GenerationConfig, *, seed: int | None, skip_defaults: bool | None
) -> GenerationConfig:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    update: dict[str, Any] = {}
    if seed is not None:
        update["seed"] = seed
    if skip_defaults is not None:
        update["skip_defaults"] = skip_defaults
    return cfg.model_copy(update=update) if update else cfg


def _build_strategy(name: StrategyName) -> GenerationStrategy:
    if name is StrategyName.fixed:
        return FixedStrategy()
    return RandomStrategy()


@app.callback()
def main() -> None:
    """Entry point for the typefactory command group."""
    pass


@app.command()
def generate(
    target: str = typer.Argument(..., help="Type to synthesize as module:QualName"),  # noqa: B008
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of values"),  # noqa: B008
    strategy: StrategyName = typer.Option(  # noqa: B008
        StrategyName.random, "--strategy", help="Value strategy [random|fixed]"
    ),
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed for reproducible random output"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    skip_defaults: bool | None = typer.Option(  # noqa: B008
        None,
        "--skip-defaults/--fill-defaults",
        help="Leave parameters with default values to the constructor",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Print ``count`` synthesized values of ``target`` as JSON."""

    configure(verbose)

    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError, ValueError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    cfg = _apply_overrides(cfg, seed=seed, skip_defaults=skip_defaults)

    try:
        resolved = _resolve_target(target)
    except ImportError as exc:
        _safe_exit(3, str(exc))

    try:
        values = synthesize_many(resolved, count, cfg, _build_strategy(strategy))
    except SynthesisError as exc:
        msg = str(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {msg}"
        _safe_exit(5, msg)

    logger.debug("synthesized %d value(s) of %s", count, target)
    payload = to_jsonable(values[0]) if count == 1 else to_jsonable(values)
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
