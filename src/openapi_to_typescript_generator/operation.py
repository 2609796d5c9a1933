"""Render operation objects and the request-side types derived from them."""

from __future__ import annotations

from typing import Any

from .context import GlobalContext
from .fragments import ObjectType, wrap_block
from .json_types import JSONObject
from .naming import quote
from .parameters import (
    ResolvedParameter,
    has_parameters_in,
    resolve_parameters,
    transform_parameters_array,
)
from .refs import deref
from .request import transform_request_body_obj
from .responses import transform_responses_obj
from .ts_utils import pick_media_type


def transform_operation_obj(operation: JSONObject, ctx: GlobalContext) -> str:
    """Render an operation as object members.

    ``ctx.path_item`` supplies the path-level parameters merged into the
    operation's own.
    """
    output = ObjectType()
    parameters = resolve_parameters(operation, ctx)
    if parameters:
        output.add(
            "parameters",
            transform_parameters_array(parameters, ctx),
            readonly=ctx.immutable_types,
        )

    request_body = operation.get("requestBody")
    if isinstance(request_body, dict):
        concrete = deref(ctx.document, request_body)
        required = isinstance(concrete, dict) and concrete.get("required") is True
        output.add(
            "requestBody",
            transform_request_body_obj(request_body, ctx),
            optional=not required,
            readonly=ctx.immutable_types,
        )

    responses = operation.get("responses")
    if isinstance(responses, dict) and responses:
        output.add(
            "responses",
            wrap_block(transform_responses_obj(responses, ctx)),
            readonly=ctx.immutable_types,
        )
    return output.render_members()


def operation_request_type(operation_id: str, operation: JSONObject, ctx: GlobalContext) -> str:
    """Return ``{ params: P; body: B }`` for an operation's route contract."""
    parameters = resolve_parameters(operation, ctx)
    base = _operation_ref(operation_id)
    params_type = "{}"
    if has_parameters_in(parameters, "path"):
        params_type = f"{base}[\"parameters\"][\"path\"]"
    body_type = _request_body_type(base, operation, parameters, ctx)
    return f"{{ params: {params_type}; body: {body_type} }}"


def query_string_type(operation_id: str, operation: JSONObject, ctx: GlobalContext) -> str:
    """Return the query parameters type, ``{}`` when the operation takes none."""
    parameters = resolve_parameters(operation, ctx)
    if not has_parameters_in(parameters, "query"):
        return "{}"
    return f"{_operation_ref(operation_id)}[\"parameters\"][\"query\"]"


def _request_body_type(
    base: str,
    operation: JSONObject,
    parameters: list[ResolvedParameter],
    ctx: GlobalContext,
) -> str:
    request_body: Any = deref(ctx.document, operation.get("requestBody"))
    if isinstance(request_body, dict):
        content = request_body.get("content")
        if isinstance(content, dict):
            media_type = pick_media_type(content)
            if media_type is not None:
                return f"NonNullable<{base}[\"requestBody\"]>[\"content\"][{quote(media_type)}]"
        return "unknown"

    for parameter in parameters:
        if parameter.location == "body":
            return f"{base}[\"parameters\"][\"body\"][{quote(parameter.name)}]"
    if has_parameters_in(parameters, "formData"):
        return f"{base}[\"parameters\"][\"formData\"]"
    return "unknown"


def _operation_ref(operation_id: str) -> str:
    return f"operations[{quote(operation_id)}]"
