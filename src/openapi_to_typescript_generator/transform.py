"""Top-level document transform."""

from __future__ import annotations

from typing import Optional

from .context import GlobalContext, OperationRegistry
from .document import parse_document
from .json_types import JSONObject, SectionMap
from .paths import transform_paths_obj, transform_webhooks_obj
from .route_contracts import transform_route_contracts
from .schema import transform_schema_obj_map
from .versions import transform_version_sections

_RAW_SCHEMA_SECTIONS: dict[int, str] = {2: "definitions", 3: "schemas"}


def transform_all(
    schema: JSONObject,
    ctx: GlobalContext,
    *,
    registry: Optional[OperationRegistry] = None,
) -> SectionMap:
    """Transform a decoded document into named TypeScript sections.

    Args:
        schema (JSONObject): Decoded OpenAPI document, or a flat schema map
            when ``ctx.raw_schema`` is set.
        ctx (GlobalContext): Base options.
        registry (Optional[OperationRegistry]): Registry to fill while
            walking ``paths``; a fresh one is used when omitted.

    Returns:
        SectionMap: Section name -> trimmed TypeScript fragment.
    """
    if ctx.raw_schema:
        return post_process(_transform_raw_schema(schema, ctx))

    registry = registry if registry is not None else OperationRegistry()
    document = parse_document(schema, ctx.version)
    ctx = ctx.extend(
        operations=registry,
        document=schema,
        global_parameters=document.global_parameters,
    )

    output: SectionMap = {"paths": ""}
    if document.paths:
        output["paths"] += transform_paths_obj(document.paths, ctx)
    registry.close()

    output["webhooks"] = ""
    if document.webhooks:
        output["webhooks"] += transform_webhooks_obj(document.webhooks, ctx)

    output.update(transform_version_sections(document, ctx))
    output.update(transform_route_contracts(document, ctx))
    return post_process(output)


def post_process(output: SectionMap) -> SectionMap:
    """Strip surrounding whitespace from every textual section."""
    for key, value in output.items():
        if isinstance(value, str):
            output[key] = value.strip()
    return output


def _transform_raw_schema(schema: JSONObject, ctx: GlobalContext) -> SectionMap:
    section = _RAW_SCHEMA_SECTIONS.get(ctx.version)
    if section is None:
        return {}
    return {
        section: transform_schema_obj_map(
            schema,
            ctx.extend(required=schema.keys(), document=schema),
        )
    }
