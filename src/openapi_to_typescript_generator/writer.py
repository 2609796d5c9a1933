"""Assemble sections into a TypeScript module and write it to disk."""

from __future__ import annotations

from pathlib import Path

from .fragments import wrap_block
from .json_types import SectionMap

_HEADER = (
    "/**\n"
    " * This file was auto-generated by openapi-to-typescript-generator.\n"
    " * Do not make direct changes to the file.\n"
    " */\n"
)

_EXPRESS_PREAMBLE = (
    'import type { Request, Response } from "express";\n'
    "\n"
    "type ExpressRequest<\n"
    "  R extends { params: unknown; body: unknown },\n"
    "  Q,\n"
    "  Locals extends Record<string, any>,\n"
    '> = Request<R["params"], any, R["body"], Q, Locals>;\n'
    "type ExpressResponse<Body, Locals extends Record<string, any>> = Response<Body, Locals>;\n"
)

_LOCALS_PARAMS = (
    "<SLocals extends Record<string, any> = Record<string, any>, "
    "RLocals extends Record<string, any> = Record<string, any>>"
)

_SECTION_ORDER: tuple[str, ...] = (
    "paths",
    "webhooks",
    "components",
    "definitions",
    "schemas",
    "parameters",
    "responses",
    "operations",
    "express",
    "handlers",
)

_GENERIC_SECTIONS = frozenset({"express", "handlers"})


class WriteError(RuntimeError):
    """Raised when output files cannot be written."""


def render_typescript_module(output: SectionMap) -> str:
    """Render sections as one TypeScript module.

    Each section becomes ``export interface <name> { ... }``. ``express`` and
    ``handlers`` take ``SLocals``/``RLocals`` type parameters, and the
    ``express`` import plus request/response aliases are emitted only when
    route contracts exist.
    """
    parts: list[str] = [_HEADER]
    if output.get("express"):
        parts.append(_EXPRESS_PREAMBLE)

    ordered = [name for name in _SECTION_ORDER if name in output]
    ordered.extend(name for name in output if name not in _SECTION_ORDER)
    for name in ordered:
        generics = _LOCALS_PARAMS if name in _GENERIC_SECTIONS else ""
        parts.append(f"export interface {name}{generics} {wrap_block(output[name])}\n")
    return "\n".join(parts)


def write_typescript_module(path: Path, source: str) -> None:
    """Write generated source to ``path``.

    Args:
        path (Path): Destination file; must not exist yet.
        source (str): Rendered TypeScript source.
    """
    if path.exists():
        raise WriteError(f"Output file already exists: {path}")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Failed to write file {path}: {exc}") from exc
