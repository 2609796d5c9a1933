"""Version-specific component sections."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from .context import GlobalContext
from .document import ComponentsV3, Document, DocumentV2, DocumentV3
from .fragments import ObjectType, wrap_block
from .headers import transform_header_obj_map
from .json_types import JSONObject, SectionMap
from .request import transform_request_bodies
from .responses import transform_responses_obj
from .schema import transform_schema_obj_map


def transform_version_sections(document: Document, ctx: GlobalContext) -> SectionMap:
    """Render the component collections of a version-tagged document.

    Args:
        document (Document): Parsed document view.
        ctx (GlobalContext): Base context.

    Returns:
        SectionMap: ``definitions``/``parameters``/``responses`` for Swagger
        2.0, ``components`` for OpenAPI 3, nothing for other versions.
    """
    if isinstance(document, DocumentV2):
        return _transform_v2(document, ctx)
    if isinstance(document, DocumentV3):
        return {"components": _transform_v3_components(document.components, ctx)}
    return {}


def _transform_v2(document: DocumentV2, ctx: GlobalContext) -> SectionMap:
    output: SectionMap = {"definitions": "", "parameters": "", "responses": ""}
    if document.definitions is not None:
        output["definitions"] = transform_schema_obj_map(
            document.definitions,
            ctx.extend(required=document.definitions.keys()),
        )
    if document.parameters is not None:
        output["parameters"] = transform_schema_obj_map(
            document.parameters,
            ctx.extend(required=document.parameters.keys()),
        )
    if document.responses is not None:
        output["responses"] = transform_responses_obj(document.responses, ctx)
    return output


def _transform_v3_components(components: Optional[ComponentsV3], ctx: GlobalContext) -> str:
    if components is None:
        return ""

    collections: list[tuple[str, Optional[JSONObject], Callable[[JSONObject], str]]] = [
        (
            "schemas",
            components.schemas,
            lambda schemas: transform_schema_obj_map(schemas, ctx.extend(required=schemas.keys())),
        ),
        (
            "responses",
            components.responses,
            lambda responses: transform_responses_obj(responses, ctx),
        ),
        (
            "parameters",
            components.parameters,
            lambda parameters: transform_schema_obj_map(
                parameters, ctx.extend(required=parameters.keys())
            ),
        ),
        (
            "requestBodies",
            components.request_bodies,
            lambda request_bodies: transform_request_bodies(request_bodies, ctx),
        ),
        (
            "headers",
            components.headers,
            lambda headers: transform_header_obj_map(headers, ctx.extend(required=frozenset())),
        ),
    ]

    output = ObjectType()
    for name, collection, render in collections:
        if collection is None:
            continue
        output.add(name, wrap_block(render(collection)), readonly=ctx.immutable_types)
    return output.render_members()
