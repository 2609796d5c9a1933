"""Command line interface for OpenAPI to TypeScript generation."""

from __future__ import annotations

import argparse
from pathlib import Path

from .errors import TransformError
from .generator import OpenAPILoadError, WriteError, run_generation


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser."""
    parser = argparse.ArgumentParser(
        prog="openapi-to-typescript-generator",
        description="Generate TypeScript types and Express route contracts from OpenAPI",
    )
    parser.add_argument("--input", required=True, help="Path to an OpenAPI YAML or JSON file")
    parser.add_argument("--output", required=True, help="TypeScript file to create")
    parser.add_argument(
        "--immutable-types",
        action="store_true",
        help="Mark generated members and arrays as readonly",
    )
    parser.add_argument(
        "--raw-schema",
        action="store_true",
        help="Treat the input as a flat map of schema objects (requires --version)",
    )
    parser.add_argument(
        "--version",
        type=int,
        choices=(2, 3),
        default=None,
        help="Major OpenAPI version; detected from the document when omitted",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate OpenAPI 3 documents before generating",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run CLI and return process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        result = run_generation(
            input_path=Path(args.input),
            output_path=Path(args.output),
            immutable_types=bool(args.immutable_types),
            raw_schema=bool(args.raw_schema),
            version=args.version,
            validate=bool(args.validate),
        )
    except (OpenAPILoadError, WriteError, TransformError) as exc:
        parser.error(str(exc))
        return 2

    for warning in result.warnings:
        print(f"Warning: {warning}")
    print(f"Wrote {result.output_path} ({len(result.operation_ids)} operations)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
