"""OpenAPI to TypeScript generator package."""

from __future__ import annotations

from .cli import main
from .context import GlobalContext, OperationRegistry
from .generator import GenerationResult, run_generation
from .transform import transform_all

__all__ = [
    "GenerationResult",
    "GlobalContext",
    "OperationRegistry",
    "main",
    "run_generation",
    "transform_all",
]
