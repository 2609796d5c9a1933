"""Small builder for TypeScript object-type fragments.

Emitters collect members into an :class:`ObjectType` instead of splicing
strings, so member order, indentation and terminators are decided in one
place. A rendered member list (``render_members``) is what a section body
holds; ``render`` wraps the same members in braces for nested use.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .naming import member_key

INDENT = "  "


@dataclass(frozen=True)
class Member:
    """One ``key: type;`` member of an object type."""

    key: str
    type_text: str
    optional: bool = False
    readonly: bool = False
    description: Optional[str] = None

    def render(self) -> str:
        """Render the member including its doc comment."""
        prefix = "readonly " if self.readonly else ""
        marker = "?" if self.optional else ""
        line = f"{prefix}{self.key}{marker}: {self.type_text};"
        if self.description:
            return f"{comment(self.description)}\n{line}"
        return line


class ObjectType:
    """Ordered collection of members rendered as a TypeScript object type."""

    def __init__(self) -> None:
        self._members: list[Member] = []

    def add(
        self,
        name: str,
        type_text: str,
        *,
        optional: bool = False,
        readonly: bool = False,
        description: Optional[str] = None,
        raw_key: bool = False,
    ) -> None:
        """Append a member.

        Args:
            name (str): Member name; quoted unless it is an identifier or
                ``raw_key`` is set.
            type_text (str): Rendered TypeScript type.
            optional (bool): Whether to add the ``?`` marker.
            readonly (bool): Whether to add the ``readonly`` modifier.
            description (Optional[str]): Text for a leading doc comment.
            raw_key (bool): Use ``name`` verbatim as the key.
        """
        key = name if raw_key else member_key(name)
        self._members.append(
            Member(
                key=key,
                type_text=type_text,
                optional=optional,
                readonly=readonly,
                description=description,
            )
        )

    def add_index_signature(self, type_text: str, *, readonly: bool = False) -> None:
        """Append a ``[key: string]: T`` member."""
        self.add("[key: string]", type_text, readonly=readonly, raw_key=True)

    def __len__(self) -> int:
        return len(self._members)

    def render_members(self) -> str:
        """Render members one per line without surrounding braces."""
        return "\n".join(member.render() for member in self._members)

    def render(self) -> str:
        """Render the members wrapped in braces."""
        if not self._members:
            return "{}"
        return wrap_block(self.render_members())


def wrap_block(body: str) -> str:
    """Wrap an already rendered member list in indented braces."""
    if not body.strip():
        return "{}"
    return "{\n" + indent_block(body) + "\n}"


def indent_block(text: str, *, level: int = 1) -> str:
    """Indent every non-empty line of ``text``."""
    padding = INDENT * level
    return "\n".join(f"{padding}{line}" if line.strip() else line for line in text.splitlines())


def comment(text: str) -> str:
    """Render a JSDoc comment, one line when the text fits on one line."""
    lines = [line.rstrip() for line in text.strip().replace("*/", "*\\/").splitlines()]
    if len(lines) == 1:
        return f"/** {lines[0]} */"
    body = "\n".join(f" * {line}".rstrip() for line in lines)
    return f"/**\n{body}\n */"
