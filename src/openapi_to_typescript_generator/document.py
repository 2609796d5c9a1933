"""Version-tagged views over a decoded OpenAPI document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TypeAlias, Union

from .errors import DocumentShapeError
from .json_types import JSONObject, JSONValue


@dataclass(frozen=True)
class DocumentV2:
    """Swagger 2.0 document with flat component collections."""

    root: JSONObject
    paths: Optional[JSONObject]
    webhooks: Optional[JSONObject]
    definitions: Optional[JSONObject]
    parameters: Optional[JSONObject]
    responses: Optional[JSONObject]

    @property
    def global_parameters(self) -> JSONObject:
        return self.parameters or {}


@dataclass(frozen=True)
class ComponentsV3:
    """The ``components`` collections used for type generation."""

    schemas: Optional[JSONObject]
    responses: Optional[JSONObject]
    parameters: Optional[JSONObject]
    request_bodies: Optional[JSONObject]
    headers: Optional[JSONObject]


@dataclass(frozen=True)
class DocumentV3:
    """OpenAPI 3.x document with nested ``components``."""

    root: JSONObject
    paths: Optional[JSONObject]
    webhooks: Optional[JSONObject]
    components: Optional[ComponentsV3]

    @property
    def global_parameters(self) -> JSONObject:
        if self.components is None:
            return {}
        return self.components.parameters or {}


@dataclass(frozen=True)
class UnversionedDocument:
    """Document whose declared version has no version-specific sections."""

    root: JSONObject
    paths: Optional[JSONObject]
    webhooks: Optional[JSONObject]

    @property
    def global_parameters(self) -> JSONObject:
        return {}


Document: TypeAlias = Union[DocumentV2, DocumentV3, UnversionedDocument]


def parse_document(raw: JSONObject, version: int) -> Document:
    """Build the version-tagged document view.

    Args:
        raw (JSONObject): Decoded document mapping.
        version (int): Major OpenAPI version the document is read as.

    Returns:
        Document: ``DocumentV2``, ``DocumentV3`` or ``UnversionedDocument``.

    Raises:
        DocumentShapeError: A present section is not a mapping.
    """
    paths = _optional_mapping(raw, "paths", "#/paths")
    webhooks = _optional_mapping(raw, "webhooks", "#/webhooks")

    if version == 2:
        return DocumentV2(
            root=raw,
            paths=paths,
            webhooks=webhooks,
            definitions=_optional_mapping(raw, "definitions", "#/definitions"),
            parameters=_optional_mapping(raw, "parameters", "#/parameters"),
            responses=_optional_mapping(raw, "responses", "#/responses"),
        )

    if version == 3:
        raw_components = _optional_mapping(raw, "components", "#/components")
        components: Optional[ComponentsV3] = None
        if raw_components is not None:
            components = ComponentsV3(
                schemas=_optional_mapping(raw_components, "schemas", "#/components/schemas"),
                responses=_optional_mapping(raw_components, "responses", "#/components/responses"),
                parameters=_optional_mapping(
                    raw_components, "parameters", "#/components/parameters"
                ),
                request_bodies=_optional_mapping(
                    raw_components, "requestBodies", "#/components/requestBodies"
                ),
                headers=_optional_mapping(raw_components, "headers", "#/components/headers"),
            )
        return DocumentV3(root=raw, paths=paths, webhooks=webhooks, components=components)

    return UnversionedDocument(root=raw, paths=paths, webhooks=webhooks)


def _optional_mapping(node: JSONObject, key: str, location: str) -> Optional[JSONObject]:
    value: JSONValue = node.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise DocumentShapeError(f"{location} must be a mapping, got {type(value).__name__}")
    return value
