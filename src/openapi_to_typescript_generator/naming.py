"""Naming helpers for operation ids, path identifiers and TypeScript keys."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Optional

HTTP_METHODS: tuple[str, ...] = (
    "get",
    "put",
    "post",
    "delete",
    "options",
    "head",
    "patch",
    "trace",
)

_IDENTIFIER_SANITIZE_RE = re.compile(r"[^0-9a-zA-Z_$]+")
_MULTIPLE_UNDERSCORES_RE = re.compile(r"_+")
_PATH_PARAM_RE = re.compile(r"^\{(?P<name>[^{}]+)\}$")
_TS_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

_TS_RESERVED_WORDS = frozenset(
    {
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "enum",
        "export",
        "extends",
        "false",
        "finally",
        "for",
        "function",
        "if",
        "import",
        "in",
        "instanceof",
        "new",
        "null",
        "return",
        "super",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
    }
)


def sanitize_identifier(raw: str) -> str:
    """Convert arbitrary text into a valid TypeScript identifier."""
    text = _IDENTIFIER_SANITIZE_RE.sub("_", raw)
    text = _MULTIPLE_UNDERSCORES_RE.sub("_", text).strip("_")
    if not text:
        text = "root"
    if text[0].isdigit():
        text = f"x_{text}"
    if text in _TS_RESERVED_WORDS:
        text = f"{text}_"
    return text


def path_to_identifier(path: str) -> str:
    """Create an identifier for a route path.

    ``/pets/{petId}/toys`` becomes ``pets__by_petId__toys`` and ``/`` becomes
    ``root``. Path parameter names keep their original casing.
    """
    segments = [segment for segment in path.split("/") if segment]
    normalized_segments: list[str] = []
    for segment in segments:
        match = _PATH_PARAM_RE.match(segment)
        if match:
            normalized_segments.append(f"by_{sanitize_identifier(match.group('name'))}")
            continue
        normalized_segments.append(sanitize_identifier(segment))

    identifier = "__".join(segment for segment in normalized_segments if segment)
    return identifier or "root"


def get_operation_id(operation: Mapping[str, object], method: str, path: str) -> str:
    """Return the explicit ``operationId`` or synthesize one from method and path."""
    explicit = _normalize_operation_id(operation.get("operationId"))
    if explicit is not None:
        return explicit
    return f"{method.lower()}_{path_to_identifier(path)}"


def _normalize_operation_id(operation_id_raw: object) -> Optional[str]:
    if isinstance(operation_id_raw, str) and operation_id_raw.strip():
        return operation_id_raw.strip()
    return None


def member_key(name: str) -> str:
    """Render an object member key, quoting it unless it is a plain identifier."""
    if _TS_IDENTIFIER_RE.match(name):
        return name
    return quote(name)


def quote(value: str) -> str:
    """Render a TypeScript string literal."""
    return json.dumps(value, ensure_ascii=False)
