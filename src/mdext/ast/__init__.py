#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/ast/__init__.py
"""AST node model produced by the extension grammar.

- nodes: immutable node dataclasses (extension nodes and generic host nodes)
- visitors: ``kind``-dispatching visitor base for renderers
- serialization: plain-data and JSON dumps of node trees

"""

from __future__ import annotations

from mdext.ast.nodes import (
    EXTENSION_NODE_TYPES,
    CodeReferenceNode,
    Document,
    Element,
    ExtensionNode,
    Node,
    Text,
    TocNode,
    VariableNode,
    get_node_children,
    is_extension_node,
)
from mdext.ast.serialization import ast_to_dict, ast_to_json
from mdext.ast.visitors import NodeVisitor

__all__ = [
    "EXTENSION_NODE_TYPES",
    "CodeReferenceNode",
    "Document",
    "Element",
    "ExtensionNode",
    "Node",
    "NodeVisitor",
    "Text",
    "TocNode",
    "VariableNode",
    "ast_to_dict",
    "ast_to_json",
    "get_node_children",
    "is_extension_node",
]
