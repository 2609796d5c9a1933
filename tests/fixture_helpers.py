"""Shared helpers for fixture-driven tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, ParamSpec, TypeVar, cast

import pytest
import yaml

_FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures" / "openapi_specs"
_FIXTURE_SUFFIXES: tuple[str, ...] = (".yaml", ".yml", ".json")
_P = ParamSpec("_P")
_R = TypeVar("_R")


def fixture_dir() -> Path:
    """Return the OpenAPI fixtures directory."""
    return _FIXTURE_DIR


def fixture_file(name: str) -> Path:
    """Return the path of one named fixture."""
    return _FIXTURE_DIR / name


def iter_fixture_paths() -> list[Path]:
    """Return all fixture paths sorted by name."""
    paths = sorted(path for path in _FIXTURE_DIR.iterdir() if path.suffix in _FIXTURE_SUFFIXES)
    return [path for path in paths if path.is_file()]


def load_fixture(name: str) -> dict[str, Any]:
    """Decode a fixture into a mapping."""
    with fixture_file(name).open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if not isinstance(data, dict):
        pytest.fail(f"Fixture {name} must parse to a mapping, got {type(data)!r}")
    return cast(dict[str, Any], data)


def parametrize_fixtures() -> Callable[[Callable[_P, _R]], Callable[_P, _R]]:
    """Parametrize a test over all fixture paths."""

    def _decorator(func: Callable[_P, _R]) -> Callable[_P, _R]:
        decorator: Callable[[Callable[_P, _R]], Callable[_P, _R]]
        decorator = pytest.mark.parametrize(
            "fixture_path",
            iter_fixture_paths(),
            ids=lambda path: path.name,
        )
        return decorator(func)

    return _decorator
