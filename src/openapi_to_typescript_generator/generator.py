"""High-level generator orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .context import GlobalContext, OperationRegistry
from .json_types import JSONObject, SectionMap
from .loader import (
    OpenAPILoadError,
    ensure_supported_version,
    get_document_version,
    load_openapi_document,
)
from .transform import transform_all
from .writer import WriteError, render_typescript_module, write_typescript_module


@dataclass(frozen=True)
class GenerationResult:
    """Generation output metadata."""

    output_path: str
    version: int
    sections: SectionMap
    operation_ids: tuple[str, ...]
    warnings: tuple[str, ...]


def run_generation(
    *,
    input_path: Path,
    output_path: Path,
    immutable_types: bool = False,
    raw_schema: bool = False,
    version: Optional[int] = None,
    validate: bool = False,
) -> GenerationResult:
    """Generate a TypeScript module from an OpenAPI document.

    Args:
        input_path (Path): Path to the input document (YAML or JSON).
        output_path (Path): TypeScript file to create.
        immutable_types (bool): Emit ``readonly`` members and arrays.
        raw_schema (bool): Treat the input as a flat map of schemas.
        version (Optional[int]): Major version override; detected from the
            document when omitted.
        validate (bool): Validate OpenAPI 3 input before transforming.

    Returns:
        GenerationResult: Rendered sections, discovered operation ids and
        non-fatal warnings.
    """
    document = load_openapi_document(input_path, validate=validate)
    warnings: list[str] = []

    resolved_version = _resolve_version(document, version=version, raw_schema=raw_schema)
    ensure_supported_version(resolved_version)
    if validate and resolved_version == 2:
        warnings.append("Schema validation is only available for OpenAPI 3 documents; skipped")

    ctx = GlobalContext(
        version=resolved_version,
        immutable_types=immutable_types,
        raw_schema=raw_schema,
    )
    registry = OperationRegistry()
    sections = transform_all(document, ctx, registry=registry)

    operation_ids: tuple[str, ...] = ()
    if not raw_schema:
        operation_ids = tuple(entry.operation_id for entry in registry.items())
        warnings.extend(_duplicate_warnings(registry))

    write_typescript_module(output_path, render_typescript_module(sections))

    return GenerationResult(
        output_path=str(output_path),
        version=resolved_version,
        sections=sections,
        operation_ids=operation_ids,
        warnings=tuple(warnings),
    )


def _resolve_version(document: JSONObject, *, version: Optional[int], raw_schema: bool) -> int:
    if version is not None:
        return version
    if raw_schema:
        raise OpenAPILoadError("--version is required with --raw-schema")
    return get_document_version(document)


def _duplicate_warnings(registry: OperationRegistry) -> list[str]:
    if not registry.duplicates:
        return []
    joined = ", ".join(sorted(set(registry.duplicates)))
    return [f"Duplicate operationId values detected; the last definition wins: {joined}"]


__all__ = [
    "GenerationResult",
    "run_generation",
    "OpenAPILoadError",
    "WriteError",
]
