"""OpenAPI document loading and version detection."""

from __future__ import annotations

from pathlib import Path

import yaml
from openapi_python_client.schema import OpenAPI
from pydantic import ValidationError

from .context import SUPPORTED_VERSIONS
from .json_types import JSONObject, JSONValue


class OpenAPILoadError(RuntimeError):
    """Raised when a source OpenAPI document cannot be loaded."""


def load_openapi_document(path: Path, *, validate: bool = False) -> JSONObject:
    """Load an OpenAPI document from YAML or JSON.

    Args:
        path (Path): Path to the document.
        validate (bool): Validate OpenAPI 3 documents against the
            ``openapi-python-client`` schema model.

    Returns:
        JSONObject: The decoded document.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle)
    except OSError as exc:
        raise OpenAPILoadError(f"Failed to read OpenAPI file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise OpenAPILoadError(f"Failed to parse {path}: {exc}") from exc

    payload_value: JSONValue = payload
    if not isinstance(payload_value, dict):
        raise OpenAPILoadError(
            f"OpenAPI document must deserialize to a mapping, got {type(payload_value)!r}"
        )

    if validate and "openapi" in payload_value:
        try:
            OpenAPI.model_validate(payload_value)
        except ValidationError as exc:
            raise OpenAPILoadError(f"OpenAPI schema validation failed for {path}: {exc}") from exc

    return payload_value


def get_document_version(document: JSONObject) -> int:
    """Return the major version declared by ``swagger`` or ``openapi``."""
    declared = document.get("openapi", document.get("swagger"))
    if isinstance(declared, (int, float)):
        declared = str(declared)
    if not isinstance(declared, str) or not declared.strip():
        raise OpenAPILoadError("Missing or invalid 'openapi'/'swagger' version field")

    major_text = declared.strip().split(".", maxsplit=1)[0]
    try:
        return int(major_text)
    except ValueError as exc:
        raise OpenAPILoadError(f"Unable to parse OpenAPI version: {declared}") from exc


def ensure_supported_version(version: int) -> None:
    """Validate that the major version is one the transform understands."""
    if version not in SUPPORTED_VERSIONS:
        supported = ", ".join(str(item) for item in SUPPORTED_VERSIONS)
        raise OpenAPILoadError(f"Unsupported OpenAPI version {version}; supported: {supported}")
