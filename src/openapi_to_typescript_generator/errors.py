"""Error types raised while transforming an OpenAPI document."""

from __future__ import annotations


class TransformError(RuntimeError):
    """Raised when a document cannot be transformed into TypeScript."""


class DocumentShapeError(TransformError):
    """Raised when a document section has an unexpected shape."""


class RegistryError(TransformError):
    """Raised when the operation registry is used out of order."""


class UnsupportedReferenceError(TransformError):
    """Raised for ``$ref`` values that do not point into the current document."""


class UnresolvedReferenceError(TransformError):
    """Raised when a local ``$ref`` does not resolve."""
