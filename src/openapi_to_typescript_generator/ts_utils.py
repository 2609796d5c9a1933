"""Helpers for composing TypeScript type expressions."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, Optional

PREFERRED_MEDIA_TYPES: tuple[str, ...] = (
    "application/json",
    "application/*+json",
    "application/problem+json",
    "application/x-www-form-urlencoded",
    "multipart/form-data",
)


def ts_union_of(types: Iterable[str]) -> str:
    """Join member types with ``|``, dropping duplicates."""
    members = _dedupe(types)
    if not members:
        return "never"
    if len(members) == 1:
        return members[0]
    return " | ".join(_parenthesize(member) for member in members)


def ts_intersection_of(types: Iterable[str]) -> str:
    """Join member types with ``&``, dropping duplicates."""
    members = _dedupe(types)
    if not members:
        return "unknown"
    if len(members) == 1:
        return members[0]
    return " & ".join(_parenthesize(member) for member in members)


def ts_array_of(item_type: str, *, readonly: bool = False) -> str:
    prefix = "readonly " if readonly else ""
    return f"{prefix}({item_type})[]"


def ts_tuple_of(types: Iterable[str], *, readonly: bool = False) -> str:
    prefix = "readonly " if readonly else ""
    return f"{prefix}[{', '.join(types)}]"


def ts_literal(value: Any) -> str:
    """Render a JSON scalar as a TypeScript literal type."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return "unknown"


def pick_media_type(content: dict[str, Any]) -> Optional[str]:
    """Choose the media type whose schema stands for the body type."""
    for media_type in PREFERRED_MEDIA_TYPES:
        if media_type in content:
            return media_type
    for media_type in content:
        if isinstance(media_type, str):
            return media_type
    return None


def _dedupe(types: Iterable[str]) -> list[str]:
    deduped: list[str] = []
    for type_text in types:
        if type_text not in deduped:
            deduped.append(type_text)
    return deduped


def _parenthesize(type_text: str) -> str:
    if _has_top_level_operator(type_text):
        return f"({type_text})"
    return type_text


def _has_top_level_operator(type_text: str) -> bool:
    depth = 0
    in_string = False
    escaped = False
    previous = ""
    for char in type_text:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in "{[(<":
            depth += 1
        elif char in "}])>" and not (char == ">" and previous == "="):
            depth -= 1
        elif depth == 0 and char in "|&":
            return True
        elif depth == 0 and char == ">" and previous == "=":
            return True
        previous = char
    return False
