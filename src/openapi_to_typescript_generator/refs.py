"""Local ``$ref`` handling."""

from __future__ import annotations

from typing import Any

from .errors import UnresolvedReferenceError, UnsupportedReferenceError
from .json_types import JSONObject
from .naming import quote


def ref_tokens(ref: str) -> list[str]:
    """Split a local JSON pointer into unescaped tokens."""
    if not ref.startswith("#/"):
        raise UnsupportedReferenceError(f"Only local references are currently supported: {ref}")
    return [token.replace("~1", "/").replace("~0", "~") for token in ref[2:].split("/")]


def parse_ref(ref: str) -> str:
    """Render a local reference as a TypeScript indexed access type.

    ``#/components/schemas/Pet`` becomes ``components["schemas"]["Pet"]``.
    """
    root, *rest = ref_tokens(ref)
    return root + "".join(f"[{quote(token)}]" for token in rest)


def resolve_ref(document: JSONObject, ref: str) -> Any:
    """Return the node a local reference points at."""
    current: Any = document
    for token in ref_tokens(ref):
        if isinstance(current, list) and token.isdigit() and int(token) < len(current):
            current = current[int(token)]
            continue
        if not isinstance(current, dict) or token not in current:
            raise UnresolvedReferenceError(f"Unresolvable reference: {ref}")
        current = current[token]
    return current


def deref(document: JSONObject, node: Any) -> Any:
    """Follow ``$ref`` chains until a concrete node is reached."""
    seen: set[str] = set()
    while isinstance(node, dict) and isinstance(node.get("$ref"), str):
        ref = node["$ref"]
        if ref in seen:
            raise UnresolvedReferenceError(f"Circular reference: {ref}")
        seen.add(ref)
        node = resolve_ref(document, ref)
    return node
