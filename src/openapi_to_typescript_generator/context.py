"""Transformation context and the shared operation registry."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import RegistryError
from .json_types import JSONObject

SUPPORTED_VERSIONS: tuple[int, ...] = (2, 3)


@dataclass(frozen=True)
class RegisteredOperation:
    """An operation discovered while walking ``paths``."""

    operation_id: str
    method: str
    path: str
    operation: JSONObject
    path_item: JSONObject


class OperationRegistry:
    """Insertion-ordered map of operation id to its operation and path item.

    The paths transform writes every operation, then closes the registry.
    Readers may only iterate a closed registry.
    """

    def __init__(self) -> None:
        self._entries: dict[str, RegisteredOperation] = {}
        self._duplicates: list[str] = []
        self._closed = False

    def register(
        self,
        operation_id: str,
        *,
        method: str,
        path: str,
        operation: JSONObject,
        path_item: JSONObject,
    ) -> None:
        """Record an operation; a repeated id replaces the earlier entry in place."""
        if self._closed:
            raise RegistryError(f"Cannot register {operation_id!r}: registry is closed")
        if operation_id in self._entries:
            self._duplicates.append(operation_id)
        self._entries[operation_id] = RegisteredOperation(
            operation_id=operation_id,
            method=method,
            path=path,
            operation=operation,
            path_item=path_item,
        )

    def close(self) -> None:
        """Mark the paths walk as finished."""
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def duplicates(self) -> tuple[str, ...]:
        """Operation ids that were registered more than once, in write order."""
        return tuple(self._duplicates)

    def get(self, operation_id: str) -> Optional[RegisteredOperation]:
        self._ensure_readable()
        return self._entries.get(operation_id)

    def items(self) -> list[RegisteredOperation]:
        """Return entries in first-seen order."""
        self._ensure_readable()
        return list(self._entries.values())

    def __iter__(self) -> Iterator[RegisteredOperation]:
        return iter(self.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def _ensure_readable(self) -> None:
        if not self._closed:
            raise RegistryError("Operation registry read before the paths transform finished")


@dataclass(frozen=True)
class GlobalContext:
    """Options and per-call state threaded through every emitter.

    Nested transforms derive their context with :meth:`extend`; the registry
    is the only member shared by reference between copies.
    """

    version: int = 3
    immutable_types: bool = False
    raw_schema: bool = False
    required: frozenset[str] = frozenset()
    global_parameters: Mapping[str, Any] = field(default_factory=dict)
    path_item: Optional[JSONObject] = None
    operations: OperationRegistry = field(default_factory=OperationRegistry)
    document: JSONObject = field(default_factory=dict)

    def extend(self, **overrides: Any) -> GlobalContext:
        """Return a copy with ``overrides`` applied."""
        if "required" in overrides:
            overrides["required"] = frozenset(str(name) for name in overrides["required"])
        return dataclasses.replace(self, **overrides)
