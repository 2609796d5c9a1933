"""Unit tests for the schema, response and parameter emitters."""

from __future__ import annotations

from typing import Any

import pytest
import yaml

from openapi_to_typescript_generator.context import GlobalContext
from openapi_to_typescript_generator.errors import (
    UnresolvedReferenceError,
    UnsupportedReferenceError,
)
from openapi_to_typescript_generator.fragments import ObjectType, comment
from openapi_to_typescript_generator.headers import transform_header_obj_map
from openapi_to_typescript_generator.parameters import (
    resolve_parameters,
    transform_parameters_array,
)
from openapi_to_typescript_generator.refs import parse_ref, resolve_ref
from openapi_to_typescript_generator.responses import get_response_types, transform_responses_obj
from openapi_to_typescript_generator.schema import transform_schema_obj, transform_schema_obj_map
from openapi_to_typescript_generator.transform import transform_all

_V3 = GlobalContext(version=3)


@pytest.mark.parametrize(
    ("schema", "expected"),
    [
        ({"type": "string"}, "string"),
        ({"type": "integer"}, "number"),
        ({"type": "boolean"}, "boolean"),
        ({"type": "string", "nullable": True}, "string | null"),
        ({"type": ["string", "null"]}, "string | null"),
        ({"enum": ["a", "b"]}, '"a" | "b"'),
        ({"const": 3}, "3"),
        ({"type": "array", "items": {"type": "string"}}, "(string)[]"),
        ({"items": [{"type": "string"}, {"type": "integer"}]}, "[string, number]"),
        ({"$ref": "#/components/schemas/Pet"}, 'components["schemas"]["Pet"]'),
        ({"oneOf": [{"type": "string"}, {"type": "integer"}]}, "string | number"),
        (
            {"allOf": [{"$ref": "#/components/schemas/A"}, {"$ref": "#/components/schemas/B"}]},
            'components["schemas"]["A"] & components["schemas"]["B"]',
        ),
        ({}, "unknown"),
        (True, "unknown"),
    ],
)
def test_transform_schema_obj(schema: Any, expected: str) -> None:
    """Schema nodes map to TypeScript type expressions."""
    assert transform_schema_obj(schema, _V3) == expected


def test_escaped_string_literals_do_not_hide_union_operators() -> None:
    """A literal ending in a backslash still closes before the next member."""
    schema = {"allOf": [{"enum": ["a\\", "b"]}, {"type": "string"}]}
    assert transform_schema_obj(schema, _V3) == '("a\\\\" | "b") & string'


def test_union_members_are_parenthesized_inside_intersections() -> None:
    """Nested unions keep their grouping inside an intersection."""
    schema = {"allOf": [{"type": ["string", "null"]}, {"$ref": "#/components/schemas/B"}]}
    assert transform_schema_obj(schema, _V3) == '(string | null) & components["schemas"]["B"]'


def test_object_members_follow_own_required_list() -> None:
    """Nested objects use their own ``required`` list, not the caller's."""
    schema = {
        "type": "object",
        "required": ["id"],
        "properties": {
            "id": {"type": "integer"},
            "name": {"type": "string", "description": "Display name"},
        },
    }
    ctx = _V3.extend(required={"name"})
    assert transform_schema_obj(schema, ctx) == (
        "{\n  id: number;\n  /** Display name */\n  name?: string;\n}"
    )


def test_additional_properties_render_index_signature() -> None:
    """``additionalProperties`` becomes a ``[key: string]`` member."""
    schema = {"type": "object", "additionalProperties": {"type": "integer"}}
    assert transform_schema_obj(schema, _V3) == "{\n  [key: string]: number;\n}"


def test_closed_empty_object_has_no_keys() -> None:
    """``additionalProperties: false`` without properties admits no members."""
    schema = {"type": "object", "additionalProperties": False}
    assert transform_schema_obj(schema, _V3) == "Record<string, never>"

    schema["properties"] = {"id": {"type": "integer"}}
    assert transform_schema_obj(schema, _V3) == "{\n  id?: number;\n}"


def test_numeric_yaml_keys_render_as_quoted_members() -> None:
    """Unquoted numeric keys decoded by YAML are rendered like string keys."""
    document = yaml.safe_load(
        """
openapi: 3.0.3
components:
  schemas:
    1:
      type: boolean
    Status:
      type: object
      required:
        - 200
      properties:
        200:
          type: string
        404:
          type: integer
  requestBodies:
    2:
      content:
        application/json:
          schema:
            type: string
  headers:
    7:
      schema:
        type: string
"""
    )
    components = transform_all(document, GlobalContext(version=3))["components"]
    assert '"1": boolean;' in components
    assert '"200": string;' in components
    assert '"404"?: number;' in components
    assert '"2": {' in components
    assert '"7"?: string;' in components


def test_immutable_arrays_are_readonly() -> None:
    """Arrays gain the ``readonly`` modifier when immutable types are requested."""
    ctx = GlobalContext(version=3, immutable_types=True)
    assert transform_schema_obj({"type": "array", "items": {"type": "string"}}, ctx) == (
        "readonly (string)[]"
    )


def test_schema_map_marks_unlisted_keys_optional() -> None:
    """Only keys in ``ctx.required`` are non-optional in a schema map."""
    schema_map = {"A": {"type": "string"}, "B": {"type": "string"}}
    rendered = transform_schema_obj_map(schema_map, _V3.extend(required={"A"}))
    assert rendered == "A: string;\nB?: string;"


def test_schema_map_renders_parameter_schema() -> None:
    """Parameter objects in a schema map render their ``schema``."""
    parameters = {"limit": {"name": "limit", "in": "query", "schema": {"type": "integer"}}}
    rendered = transform_schema_obj_map(parameters, _V3.extend(required={"limit"}))
    assert rendered == "limit: number;"


def test_headers_respect_their_own_required_flag() -> None:
    """Headers are optional unless listed in ``required`` or flagged required."""
    headers = {
        "X-Request-Id": {"required": True, "schema": {"type": "string"}},
        "X-Trace": {"schema": {"type": "string"}},
    }
    rendered = transform_header_obj_map(headers, _V3.extend(required=frozenset()))
    assert rendered == '"X-Request-Id": string;\n"X-Trace"?: string;'


def test_responses_without_body_are_unknown() -> None:
    """A response that declares neither content nor headers is ``unknown``."""
    rendered = transform_responses_obj({"204": {"description": "No content"}}, _V3)
    assert rendered == '/** No content */\n"204": unknown;'


def test_responses_render_headers_and_content() -> None:
    """Responses nest headers and content by media type."""
    responses = {
        200: {
            "headers": {"X-Next": {"schema": {"type": "string"}}},
            "content": {"application/json": {"schema": {"type": "string"}}},
        }
    }
    rendered = transform_responses_obj(responses, _V3)
    assert rendered == (
        '"200": {\n'
        "  headers: {\n"
        '    "X-Next"?: string;\n'
        "  };\n"
        "  content: {\n"
        '    "application/json": string;\n'
        "  };\n"
        "};"
    )


def test_get_response_types_unions_bodies_in_declaration_order() -> None:
    """Only responses with a body contribute to the response union."""
    responses = {
        "200": {"content": {"text/plain": {}, "application/json": {}}},
        "204": {"description": "empty"},
        "default": {"content": {"application/json": {}}},
    }
    assert get_response_types("listPets", responses, _V3) == (
        'operations["listPets"]["responses"]["200"]["content"]["application/json"] | '
        'operations["listPets"]["responses"]["default"]["content"]["application/json"]'
    )


def test_get_response_types_without_bodies_is_void() -> None:
    """No body anywhere means the handler responds with nothing."""
    assert get_response_types("ping", {"204": {"description": "empty"}}, _V3) == "void"


def test_parameters_merge_path_item_and_operation() -> None:
    """Operation parameters override path-level ones with the same location and name."""
    path_item = {
        "parameters": [
            {"name": "id", "in": "path", "schema": {"type": "string"}},
            {"name": "verbose", "in": "query", "schema": {"type": "boolean"}},
        ]
    }
    operation = {
        "parameters": [
            {"name": "verbose", "in": "query", "required": True, "schema": {"type": "string"}}
        ]
    }
    ctx = _V3.extend(path_item=path_item)

    parameters = resolve_parameters(operation, ctx)
    assert [(item.location, item.name, item.required) for item in parameters] == [
        ("path", "id", True),
        ("query", "verbose", True),
    ]
    assert transform_parameters_array(parameters, ctx) == (
        "{\n"
        "  path: {\n"
        "    id: string;\n"
        "  };\n"
        "  query: {\n"
        "    verbose: string;\n"
        "  };\n"
        "}"
    )


def test_parameter_refs_resolve_through_global_pool() -> None:
    """Referenced parameters take their location from the global parameter pool."""
    ctx = _V3.extend(global_parameters={"limit": {"name": "limit", "in": "query"}})
    operation = {"parameters": [{"$ref": "#/components/parameters/limit"}]}
    parameters = resolve_parameters(operation, ctx)
    assert len(parameters) == 1
    assert parameters[0].location == "query"
    assert parameters[0].type_text == 'components["parameters"]["limit"]'


def test_refs_are_escaped_and_resolved() -> None:
    """JSON pointer escapes are decoded in both rendering and resolution."""
    document = {"paths": {"/pets/{id}": {"get": {"operationId": "x"}}}}
    assert parse_ref("#/paths/~1pets~1{id}") == 'paths["/pets/{id}"]'
    assert resolve_ref(document, "#/paths/~1pets~1{id}/get") == {"operationId": "x"}


def test_non_local_refs_are_rejected() -> None:
    """References into other files are not supported."""
    with pytest.raises(UnsupportedReferenceError):
        parse_ref("other.yaml#/components/schemas/Pet")


def test_missing_refs_fail_fast() -> None:
    """Unresolvable local references propagate an error."""
    with pytest.raises(UnresolvedReferenceError):
        resolve_ref({}, "#/components/schemas/Missing")


def test_object_type_builder_renders_members() -> None:
    """The fragment builder handles optional, readonly and commented members."""
    members = ObjectType()
    members.add("id", "number", readonly=True)
    members.add("x-tag", "string", optional=True, description="Tag")
    assert members.render() == '{\n  readonly id: number;\n  /** Tag */\n  "x-tag"?: string;\n}'
    assert ObjectType().render() == "{}"


def test_comment_handles_multiline_text() -> None:
    """Multi-line descriptions become block comments."""
    assert comment("one") == "/** one */"
    assert comment("one\ntwo") == "/**\n * one\n * two\n */"
