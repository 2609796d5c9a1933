"""Parameter resolution and rendering grouped by location."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .context import GlobalContext
from .fragments import ObjectType
from .json_types import JSONObject
from .refs import parse_ref, ref_tokens, resolve_ref
from .schema import describe, schema_of, transform_schema_obj

PARAMETER_LOCATIONS: tuple[str, ...] = ("path", "query", "header", "cookie", "body", "formData")


@dataclass(frozen=True)
class ResolvedParameter:
    """A parameter with its location, name and rendered type."""

    name: str
    location: str
    required: bool
    type_text: str
    description: Optional[str]


def resolve_parameters(operation: JSONObject, ctx: GlobalContext) -> list[ResolvedParameter]:
    """Merge path-item and operation parameters; operation entries win on (in, name)."""
    sources: list[Any] = []
    if ctx.path_item is not None:
        sources.append(ctx.path_item.get("parameters"))
    sources.append(operation.get("parameters"))

    merged: dict[tuple[str, str], ResolvedParameter] = {}
    for raw in sources:
        if not isinstance(raw, list):
            continue
        for parameter in raw:
            resolved = _resolve_parameter(parameter, ctx)
            if resolved is not None:
                merged[(resolved.location, resolved.name)] = resolved
    return list(merged.values())


def transform_parameters_array(
    parameters: list[ResolvedParameter],
    ctx: GlobalContext,
) -> str:
    """Render parameters as ``{ path: {...}; query: {...} }``."""
    groups: dict[str, ObjectType] = {}
    for parameter in parameters:
        group = groups.setdefault(parameter.location, ObjectType())
        group.add(
            parameter.name,
            parameter.type_text,
            optional=not parameter.required,
            readonly=ctx.immutable_types,
            description=parameter.description,
        )

    output = ObjectType()
    ordered = [location for location in PARAMETER_LOCATIONS if location in groups]
    ordered.extend(location for location in groups if location not in PARAMETER_LOCATIONS)
    for location in ordered:
        output.add(location, groups[location].render(), readonly=ctx.immutable_types)
    return output.render()


def has_parameters_in(parameters: list[ResolvedParameter], location: str) -> bool:
    return any(parameter.location == location for parameter in parameters)


def _resolve_parameter(parameter: Any, ctx: GlobalContext) -> Optional[ResolvedParameter]:
    if not isinstance(parameter, dict):
        return None

    ref = parameter.get("$ref")
    if isinstance(ref, str):
        target = _lookup_parameter_ref(ref, ctx)
        type_text = parse_ref(ref)
    else:
        target = parameter
        type_text = transform_schema_obj(schema_of(parameter), ctx)

    if not isinstance(target, dict):
        return None
    name = target.get("name")
    location = target.get("in")
    if not isinstance(name, str) or not isinstance(location, str):
        return None

    return ResolvedParameter(
        name=name,
        location=location,
        required=location == "path" or target.get("required") is True,
        type_text=type_text,
        description=describe(target),
    )


def _lookup_parameter_ref(ref: str, ctx: GlobalContext) -> Any:
    tokens = ref_tokens(ref)
    if tokens[:-1] in (["components", "parameters"], ["parameters"]):
        candidate = ctx.global_parameters.get(tokens[-1])
        if candidate is not None:
            return candidate
    return resolve_ref(ctx.document, ref)
