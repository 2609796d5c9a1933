"""Render schema objects as TypeScript types."""

from __future__ import annotations

from typing import Any, Optional

from .context import GlobalContext
from .fragments import ObjectType
from .json_types import JSONObject
from .refs import parse_ref
from .ts_utils import (
    pick_media_type,
    ts_array_of,
    ts_intersection_of,
    ts_literal,
    ts_tuple_of,
    ts_union_of,
)

_PRIMITIVE_TYPES = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "null": "null",
    "file": "Blob",
}


def transform_schema_obj_map(schema_map: JSONObject, ctx: GlobalContext) -> str:
    """Render a name -> schema map as object members.

    Keys listed in ``ctx.required`` are emitted without the ``?`` marker.
    Parameter objects (anything with an ``in`` location) render their schema.
    """
    output = ObjectType()
    for key, value in schema_map.items():
        name = str(key)
        output.add(
            name,
            transform_schema_obj(schema_of(value), ctx),
            optional=name not in ctx.required,
            readonly=ctx.immutable_types,
            description=describe(value),
        )
    return output.render_members()


def transform_schema_obj(node: Any, ctx: GlobalContext) -> str:
    """Render one schema node as a TypeScript type expression."""
    if node is True:
        return "unknown"
    if node is False:
        return "never"
    if not isinstance(node, dict):
        return "unknown"

    ref = node.get("$ref")
    type_text = parse_ref(ref) if isinstance(ref, str) else _base_type(node, ctx)
    if _is_nullable(node, ctx):
        type_text = ts_union_of([type_text, "null"])
    return type_text


def schema_of(value: Any) -> Any:
    """Return the schema carried by a parameter or header object, else ``value``."""
    if not isinstance(value, dict) or "$ref" in value:
        return value
    if isinstance(value.get("schema"), dict):
        return value["schema"]
    content = value.get("content")
    if "in" in value and isinstance(content, dict):
        media_type = pick_media_type(content)
        media = content.get(media_type) if media_type is not None else None
        if isinstance(media, dict) and isinstance(media.get("schema"), dict):
            return media["schema"]
        return {}
    return value


def describe(node: Any) -> Optional[str]:
    """Build the doc comment text for a node, if it has any."""
    if not isinstance(node, dict):
        return None
    lines: list[str] = []
    for key in ("title", "summary", "description"):
        value = node.get(key)
        if isinstance(value, str) and value.strip() and value.strip() not in lines:
            lines.append(value.strip())
    if node.get("deprecated") is True:
        lines.append("@deprecated")
    return "\n".join(lines) or None


def _base_type(node: dict[str, Any], ctx: GlobalContext) -> str:
    if "const" in node:
        return ts_literal(node["const"])

    enum = node.get("enum")
    if isinstance(enum, list) and enum:
        return ts_union_of(ts_literal(value) for value in enum)

    for composite in ("oneOf", "anyOf"):
        options = node.get(composite)
        if isinstance(options, list) and options:
            union = ts_union_of(transform_schema_obj(option, ctx) for option in options)
            if _has_object_members(node):
                return ts_intersection_of([_object_type(node, ctx), union])
            return union

    all_of = node.get("allOf")
    if isinstance(all_of, list) and all_of:
        members = [transform_schema_obj(item, ctx) for item in all_of]
        if _has_object_members(node):
            members.append(_object_type(node, ctx))
        return ts_intersection_of(members)

    schema_type = node.get("type")
    if isinstance(schema_type, list):
        return ts_union_of(_typed(node, member, ctx) for member in schema_type)
    if isinstance(schema_type, str):
        return _typed(node, schema_type, ctx)

    if _has_object_members(node):
        return _object_type(node, ctx)
    if "items" in node:
        return _array_type(node, ctx)
    return "unknown"


def _typed(node: dict[str, Any], schema_type: str, ctx: GlobalContext) -> str:
    if schema_type == "object":
        return _object_type(node, ctx)
    if schema_type == "array":
        return _array_type(node, ctx)
    return _PRIMITIVE_TYPES.get(schema_type, "unknown")


def _array_type(node: dict[str, Any], ctx: GlobalContext) -> str:
    readonly = ctx.immutable_types
    prefix_items = node.get("prefixItems")
    items = node.get("items")
    for members in (prefix_items, items):
        if isinstance(members, list):
            member_types = [transform_schema_obj(item, ctx) for item in members]
            return ts_tuple_of(member_types, readonly=readonly)
    item_type = transform_schema_obj(items, ctx) if items is not None else "unknown"
    return ts_array_of(item_type, readonly=readonly)


def _object_type(node: dict[str, Any], ctx: GlobalContext) -> str:
    raw_required = node.get("required")
    required = (
        {str(name) for name in raw_required if isinstance(name, (str, int))}
        if isinstance(raw_required, list)
        else set()
    )
    object_ctx = ctx.extend(required=required)

    members = ObjectType()
    properties = node.get("properties")
    if isinstance(properties, dict):
        for key, prop in properties.items():
            name = str(key)
            members.add(
                name,
                transform_schema_obj(prop, object_ctx),
                optional=name not in object_ctx.required,
                readonly=object_ctx.immutable_types,
                description=describe(prop),
            )

    additional = node.get("additionalProperties")
    if additional is None or additional is False:
        if members:
            return members.render()
        if additional is None:
            return _index_signature("unknown", object_ctx)
        return "Record<string, never>"

    value_type = "unknown" if additional is True else transform_schema_obj(additional, object_ctx)
    if not members:
        return _index_signature(value_type, object_ctx)
    return ts_intersection_of([members.render(), _index_signature(value_type, object_ctx)])


def _index_signature(value_type: str, ctx: GlobalContext) -> str:
    signature = ObjectType()
    signature.add_index_signature(value_type, readonly=ctx.immutable_types)
    return signature.render()


def _has_object_members(node: dict[str, Any]) -> bool:
    return isinstance(node.get("properties"), dict) or "additionalProperties" in node


def _is_nullable(node: dict[str, Any], ctx: GlobalContext) -> bool:
    if ctx.version == 2:
        return node.get("x-nullable") is True
    return node.get("nullable") is True
