"""Render request body objects."""

from __future__ import annotations

from typing import Any

from .context import GlobalContext
from .fragments import ObjectType
from .json_types import JSONObject
from .refs import parse_ref
from .schema import describe, transform_schema_obj


def transform_request_bodies(request_bodies: JSONObject, ctx: GlobalContext) -> str:
    """Render ``components.requestBodies`` as object members."""
    output = ObjectType()
    for name, request_body in request_bodies.items():
        output.add(
            str(name),
            transform_request_body_obj(request_body, ctx),
            readonly=ctx.immutable_types,
            description=describe(request_body),
        )
    return output.render_members()


def transform_request_body_obj(request_body: Any, ctx: GlobalContext) -> str:
    """Render one request body as ``{ content: { <media type>: T } }``."""
    if not isinstance(request_body, dict):
        return "unknown"
    ref = request_body.get("$ref")
    if isinstance(ref, str):
        return parse_ref(ref)

    output = ObjectType()
    content = request_body.get("content")
    if isinstance(content, dict):
        output.add("content", transform_content_obj(content, ctx), readonly=ctx.immutable_types)
    return output.render()


def transform_content_obj(content: JSONObject, ctx: GlobalContext) -> str:
    """Render a media type -> media object map."""
    output = ObjectType()
    for media_type, media in content.items():
        schema = media.get("schema") if isinstance(media, dict) else None
        output.add(
            str(media_type),
            transform_schema_obj(schema, ctx) if schema is not None else "unknown",
            readonly=ctx.immutable_types,
        )
    return output.render()
