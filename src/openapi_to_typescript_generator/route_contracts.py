"""Route contract sections derived from the operation registry.

Three sections are produced from the registry filled by the paths transform:

- ``operations``: one entry per operation id with its parameters, request
  body and responses.
- ``express``: per operation id, the ``responses``/``request``/``response``/
  ``handler`` types for an Express route handler.
- ``handlers``: per path, one member per HTTP method pointing at the
  matching ``express`` handler type.
"""

from __future__ import annotations

from .context import GlobalContext
from .document import Document
from .fragments import ObjectType, wrap_block
from .json_types import SectionMap
from .naming import HTTP_METHODS, get_operation_id, path_to_identifier, quote
from .operation import operation_request_type, query_string_type, transform_operation_obj
from .responses import get_response_types

EXPRESS_TYPE = "express<SLocals, RLocals>"


def transform_route_contracts(document: Document, ctx: GlobalContext) -> SectionMap:
    """Build ``operations``, ``express`` and ``handlers`` from ``ctx.operations``.

    Args:
        document (Document): Parsed document view; its ``paths`` drive the
            ``handlers`` section.
        ctx (GlobalContext): Context holding the closed operation registry.

    Returns:
        SectionMap: The three route contract sections; all empty when the
        registry is empty.
    """
    output: SectionMap = {"operations": "", "express": "", "handlers": ""}
    if not ctx.operations:
        return output

    operation_ctx = ctx.extend(global_parameters=document.global_parameters)
    output["operations"] = _transform_operations(operation_ctx)
    output["express"] = _transform_express(operation_ctx)
    output["handlers"] = _transform_handlers(document)
    return output


def _transform_operations(ctx: GlobalContext) -> str:
    output = ObjectType()
    for entry in ctx.operations.items():
        description = entry.operation.get("description")
        if not isinstance(description, str) or not description.strip():
            description = None
        operation_ctx = ctx.extend(path_item=entry.path_item)
        output.add(
            quote(entry.operation_id),
            wrap_block(transform_operation_obj(entry.operation, operation_ctx)),
            readonly=ctx.immutable_types,
            description=description,
            raw_key=True,
        )
    return output.render_members()


def _transform_express(ctx: GlobalContext) -> str:
    output = ObjectType()
    for entry in ctx.operations.items():
        operation_ctx = ctx.extend(path_item=entry.path_item)
        operation_id = entry.operation_id
        self_ref = f"{EXPRESS_TYPE}[{quote(operation_id)}]"
        responses = entry.operation.get("responses")

        contract = ObjectType()
        contract.add(
            "responses",
            get_response_types(operation_id, responses, operation_ctx)
            if isinstance(responses, dict) and responses
            else "void",
        )
        contract.add(
            "request",
            "ExpressRequest<"
            f"{operation_request_type(operation_id, entry.operation, operation_ctx)}, "
            f"{query_string_type(operation_id, entry.operation, operation_ctx)}, "
            "SLocals>",
        )
        contract.add("response", f"ExpressResponse<{self_ref}[\"responses\"], RLocals>")
        contract.add(
            "handler",
            f"(req: {self_ref}[\"request\"], res: {self_ref}[\"response\"])"
            " => void | Promise<void>",
        )
        output.add(quote(operation_id), contract.render(), raw_key=True)
    return output.render_members()


def _transform_handlers(document: Document) -> str:
    output = ObjectType()
    for path, path_item in (document.paths or {}).items():
        if not isinstance(path_item, dict):
            continue
        methods = ObjectType()
        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, dict):
                continue
            operation_id = get_operation_id(operation, method, str(path))
            methods.add(method, f"{EXPRESS_TYPE}[{quote(operation_id)}][\"handler\"]")
        output.add(path_to_identifier(str(path)), methods.render())
    return output.render_members()
