"""Render header object maps."""

from __future__ import annotations

from .context import GlobalContext
from .fragments import ObjectType
from .json_types import JSONObject
from .refs import parse_ref
from .schema import describe, schema_of, transform_schema_obj


def transform_header_obj_map(headers: JSONObject, ctx: GlobalContext) -> str:
    """Render a header name -> header object map as object members.

    A header is non-optional when its name is in ``ctx.required`` or the
    header object itself sets ``required: true``.
    """
    output = ObjectType()
    for key, header in headers.items():
        name = str(key)
        ref = header.get("$ref") if isinstance(header, dict) else None
        if isinstance(ref, str):
            type_text = parse_ref(ref)
            required = name in ctx.required
        else:
            type_text = transform_schema_obj(schema_of(header), ctx)
            required = name in ctx.required or (
                isinstance(header, dict) and header.get("required") is True
            )
        output.add(
            name,
            type_text,
            optional=not required,
            readonly=ctx.immutable_types,
            description=describe(header),
        )
    return output.render_members()
