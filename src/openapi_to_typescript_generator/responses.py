"""Render response objects and response body type unions."""

from __future__ import annotations

from typing import Any

from .context import GlobalContext
from .fragments import ObjectType, wrap_block
from .headers import transform_header_obj_map
from .json_types import JSONObject
from .naming import quote
from .refs import deref, parse_ref
from .request import transform_content_obj
from .schema import describe, transform_schema_obj
from .ts_utils import pick_media_type, ts_union_of


def transform_responses_obj(responses: JSONObject, ctx: GlobalContext) -> str:
    """Render a status code (or name) -> response object map as object members."""
    output = ObjectType()
    for code, response in responses.items():
        output.add(
            str(code),
            transform_response_obj(response, ctx),
            readonly=ctx.immutable_types,
            description=describe(response),
        )
    return output.render_members()


def transform_response_obj(response: Any, ctx: GlobalContext) -> str:
    """Render one response; responses without headers or a body are ``unknown``."""
    if not isinstance(response, dict):
        return "unknown"
    ref = response.get("$ref")
    if isinstance(ref, str):
        return parse_ref(ref)

    output = ObjectType()
    headers = response.get("headers")
    if isinstance(headers, dict) and headers:
        output.add(
            "headers",
            wrap_block(transform_header_obj_map(headers, ctx.extend(required=frozenset()))),
            readonly=ctx.immutable_types,
        )

    content = response.get("content")
    if isinstance(content, dict) and content:
        output.add("content", transform_content_obj(content, ctx), readonly=ctx.immutable_types)
    elif "schema" in response:
        schema_type = transform_schema_obj(response["schema"], ctx)
        output.add("schema", schema_type, readonly=ctx.immutable_types)

    if not output:
        return "unknown"
    return output.render()


def get_response_types(operation_id: str, responses: JSONObject, ctx: GlobalContext) -> str:
    """Union of the body types an operation can respond with.

    Bodies are referenced through the ``operations`` section, so the union
    stays in sync with the rendered operation. Returns ``void`` when no
    declared response carries a body.
    """
    base = f"operations[{quote(operation_id)}][\"responses\"]"
    body_types: list[str] = []
    for code, response in responses.items():
        concrete = deref(ctx.document, response)
        if not isinstance(concrete, dict):
            continue
        status = f"{base}[{quote(str(code))}]"
        content = concrete.get("content")
        if isinstance(content, dict) and content:
            media_type = pick_media_type(content)
            if media_type is not None:
                body_types.append(f"{status}[\"content\"][{quote(media_type)}]")
        elif "schema" in concrete:
            body_types.append(f"{status}[\"schema\"]")
    if not body_types:
        return "void"
    return ts_union_of(body_types)
