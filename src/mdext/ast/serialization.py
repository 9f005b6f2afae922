#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/ast/serialization.py
"""JSON serialization for AST nodes.

Produces a plain-data view of a parsed document, one dictionary per node
tagged with ``node_type``. Used by the command-line tool and handy for
snapshot-style tests.

Examples
--------
    >>> from mdext.ast import CodeReferenceNode
    >>> from mdext.ast.serialization import ast_to_dict
    >>> ast_to_dict(CodeReferenceNode(label="Hello", source="docs/hello.md"))
    {'node_type': 'code_reference', 'label': 'Hello', 'source': 'docs/hello.md'}

"""

from __future__ import annotations

import json
from typing import Any, Callable

from mdext.ast.nodes import (
    CodeReferenceNode,
    Document,
    Element,
    Node,
    Text,
    TocNode,
    VariableNode,
)

SCHEMA_VERSION = 1


def _serialize_document(node: Document) -> dict[str, Any]:
    return {"node_type": node.kind, "children": [ast_to_dict(child) for child in node.children]}


def _serialize_element(node: Element) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": node.kind, "type": node.type}
    if node.attrs:
        result["attrs"] = dict(node.attrs)
    if node.children:
        result["children"] = [ast_to_dict(child) for child in node.children]
    if node.raw is not None:
        result["raw"] = node.raw
    return result


def _serialize_text(node: Text) -> dict[str, Any]:
    return {"node_type": node.kind, "content": node.content}


def _serialize_code_reference(node: CodeReferenceNode) -> dict[str, Any]:
    return {"node_type": node.kind, "label": node.label, "source": node.source}


def _serialize_toc(node: TocNode) -> dict[str, Any]:
    return {"node_type": node.kind}


def _serialize_variable(node: VariableNode) -> dict[str, Any]:
    return {"node_type": node.kind, "name": node.name}


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Document: _serialize_document,
    Element: _serialize_element,
    Text: _serialize_text,
    CodeReferenceNode: _serialize_code_reference,
    TocNode: _serialize_toc,
    VariableNode: _serialize_variable,
}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node and its descendants

    Raises
    ------
    ValueError
        If ``node`` is not one of the known node types

    """
    node_class = type(node)
    serializer = _SERIALIZATION_DISPATCH.get(node_class)
    if serializer:
        return serializer(node)

    raise ValueError(f"Unknown node type for serialization: {node_class.__name__}")


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with a schema version.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string of the form ``{"schema_version": 1, "node_type": ...}``

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)
