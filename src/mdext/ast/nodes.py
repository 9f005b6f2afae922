#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/ast/nodes.py
"""AST node classes produced by the extension grammar.

Every node is an immutable dataclass tagged with a class-level ``kind``
string. Nodes form a tagged union (see :data:`Node`) rather than a class
hierarchy: consumers dispatch on ``kind`` (or ``isinstance``) and new node
kinds never have to subclass a shared abstract base.

Extension nodes are leaves carrying only parsed data:
    - CodeReferenceNode: ``@[label](source)``
    - TocNode: ``@toc@``
    - VariableNode: ``%name%``

Host nodes position the extension nodes inside a complete document:
    - Document: root node
    - Element: any construct of the host Markdown grammar, tagged with the
      host token type (``paragraph``, ``heading``, ``emphasis``, ...)
    - Text: literal inline text

"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional, Union

# ============================================================================
# Extension Nodes
# ============================================================================


@dataclass(frozen=True)
class CodeReferenceNode:
    """Reference to an external source to be included by the renderer.

    Parameters
    ----------
    label : str
        Text between ``[`` and ``]``; may be empty
    source : str
        Text between ``(`` and ``)``; never empty

    """

    kind: ClassVar[str] = "code_reference"

    label: str
    source: str


@dataclass(frozen=True)
class TocNode:
    """Marks the position of a generated table of contents.

    Carries no data. Each ``@toc@`` occurrence produces its own instance;
    instances compare equal because they are structurally identical.

    """

    kind: ClassVar[str] = "toc"


@dataclass(frozen=True)
class VariableNode:
    """Placeholder for a named text variable.

    Parameters
    ----------
    name : str
        Configured variable name, without the ``%`` delimiters

    """

    kind: ClassVar[str] = "variable"

    name: str


# ============================================================================
# Host Nodes
# ============================================================================


@dataclass(frozen=True)
class Text:
    """Literal inline text."""

    kind: ClassVar[str] = "text"

    content: str


@dataclass(frozen=True)
class Element:
    """A construct recognised by the host Markdown grammar.

    Parameters
    ----------
    type : str
        Host token type, e.g. ``"paragraph"`` or ``"emphasis"``
    attrs : Mapping[str, Any], default = empty mapping
        Token attributes reported by the host (heading level, link url, ...).
        Stored as a read-only copy.
    children : tuple of Node, default = ()
        Nested block or inline nodes
    raw : str or None, default = None
        Raw text for leaf constructs such as code blocks and code spans

    """

    kind: ClassVar[str] = "element"

    type: str
    attrs: Mapping[str, Any] = field(default_factory=dict)
    children: tuple[Node, ...] = ()
    raw: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))

    def __hash__(self) -> int:
        return hash((self.type, tuple(sorted(self.attrs.items())), self.children, self.raw))


@dataclass(frozen=True)
class Document:
    """Root document node containing the top-level blocks."""

    kind: ClassVar[str] = "document"

    children: tuple[Node, ...] = ()


ExtensionNode = Union[CodeReferenceNode, TocNode, VariableNode]
Node = Union[Document, Element, Text, CodeReferenceNode, TocNode, VariableNode]

EXTENSION_NODE_TYPES: tuple[type, ...] = (CodeReferenceNode, TocNode, VariableNode)


def is_extension_node(node: Any) -> bool:
    """Return True if ``node`` was produced by one of the extension rules."""
    return isinstance(node, EXTENSION_NODE_TYPES)


def get_node_children(node: Node) -> tuple[Node, ...]:
    """Return the child nodes of ``node``; leaves return an empty tuple."""
    if isinstance(node, (Document, Element)):
        return node.children
    return ()
