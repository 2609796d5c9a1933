"""Render path items and register their operations."""

from __future__ import annotations

from .context import GlobalContext
from .fragments import ObjectType, wrap_block
from .json_types import JSONObject
from .naming import HTTP_METHODS, get_operation_id, quote
from .operation import transform_operation_obj
from .parameters import resolve_parameters, transform_parameters_array
from .schema import describe


def transform_paths_obj(paths: JSONObject, ctx: GlobalContext) -> str:
    """Render ``paths`` as object members.

    Every operation is registered into ``ctx.operations`` and referenced as
    ``operations["<id>"]``; the operation bodies themselves are rendered by
    the route contract generator.
    """
    output = ObjectType()
    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue
        output.add(
            str(path),
            wrap_block(transform_path_item(path_item, ctx, path=str(path), register=True)),
            readonly=ctx.immutable_types,
        )
    return output.render_members()


def transform_webhooks_obj(webhooks: JSONObject, ctx: GlobalContext) -> str:
    """Render ``webhooks`` with operations inlined; nothing is registered."""
    output = ObjectType()
    for name, path_item in webhooks.items():
        if not isinstance(path_item, dict):
            continue
        output.add(
            str(name),
            wrap_block(transform_path_item(path_item, ctx, path=str(name), register=False)),
            readonly=ctx.immutable_types,
        )
    return output.render_members()


def transform_path_item(
    path_item: JSONObject,
    ctx: GlobalContext,
    *,
    path: str,
    register: bool,
) -> str:
    """Render one path item's methods and shared parameters as object members."""
    output = ObjectType()
    for method in HTTP_METHODS:
        operation = path_item.get(method)
        if not isinstance(operation, dict):
            continue
        if register:
            operation_id = get_operation_id(operation, method, path)
            ctx.operations.register(
                operation_id,
                method=method,
                path=path,
                operation=operation,
                path_item=path_item,
            )
            type_text = f"operations[{quote(operation_id)}]"
        else:
            operation_ctx = ctx.extend(path_item=path_item)
            type_text = wrap_block(transform_operation_obj(operation, operation_ctx))
        output.add(
            method,
            type_text,
            readonly=ctx.immutable_types,
            description=describe(operation),
        )

    shared_parameters = resolve_parameters(path_item, ctx.extend(path_item=None))
    if shared_parameters:
        output.add(
            "parameters",
            transform_parameters_array(shared_parameters, ctx),
            readonly=ctx.immutable_types,
        )
    return output.render_members()
