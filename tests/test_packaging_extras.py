"""Tests for packaging metadata and optional dependencies."""

from __future__ import annotations

import importlib
import tomllib
from pathlib import Path
from typing import Any, cast


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _extras(pyproject: dict[str, Any]) -> dict[str, list[str]]:
    return cast(dict[str, list[str]], pyproject.get("project", {}).get("optional-dependencies", {}))


def test_optional_dependency_groups() -> None:
    extras = _extras(_load_pyproject())
    assert {"test", "dev"}.issubset(extras)
    assert any(req.startswith("pytest") for req in extras["test"])
    assert set(extras["dev"]).issuperset(extras["test"])


def test_runtime_dependencies() -> None:
    deps = _load_pyproject()["project"]["dependencies"]
    names = {dep.split(">")[0].split("=")[0].strip().lower() for dep in deps}
    assert {"pydantic", "pyyaml", "typer"} <= names


def test_console_script_entrypoint() -> None:
    scripts = _load_pyproject().get("project", {}).get("scripts", {})
    assert scripts.get("typefactory") == "typefactory.cli:app"


def test_import_smoke() -> None:
    importlib.import_module("typefactory")
    importlib.import_module("typefactory.cli")
