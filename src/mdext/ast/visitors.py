#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/ast/visitors.py
"""Visitor base class for consuming the extension AST.

Dispatch is driven by each node's ``kind`` tag instead of an ``accept``
method on the nodes, so nodes stay plain data. A renderer subclasses
:class:`NodeVisitor` and overrides the cases it cares about; everything else
falls through to :meth:`NodeVisitor.generic_visit`.

"""

from __future__ import annotations

from typing import Any

from mdext.ast.nodes import (
    CodeReferenceNode,
    Document,
    Element,
    Node,
    Text,
    TocNode,
    VariableNode,
    get_node_children,
)


class NodeVisitor:
    """Base class for AST node visitors.

    Examples
    --------
    Collect every referenced source in a document:

        >>> class SourceCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.sources = []
        ...
        ...     def visit_code_reference(self, node):
        ...         self.sources.append(node.source)
        ...
        >>> collector = SourceCollector()
        >>> collector.visit(document)
        >>> collector.sources
        ['docs/hello.md']

    """

    def visit(self, node: Node) -> Any:
        """Dispatch ``node`` to the matching ``visit_<kind>`` method.

        Parameters
        ----------
        node : Node
            Node to visit

        Returns
        -------
        Any
            Result of the handler method

        """
        method = getattr(self, f"visit_{node.kind}", self.generic_visit)
        return method(node)

    def visit_document(self, node: Document) -> Any:
        return self.generic_visit(node)

    def visit_element(self, node: Element) -> Any:
        return self.generic_visit(node)

    def visit_text(self, node: Text) -> Any:
        return self.generic_visit(node)

    def visit_code_reference(self, node: CodeReferenceNode) -> Any:
        return self.generic_visit(node)

    def visit_toc(self, node: TocNode) -> Any:
        return self.generic_visit(node)

    def visit_variable(self, node: VariableNode) -> Any:
        return self.generic_visit(node)

    def generic_visit(self, node: Node) -> Any:
        """Visit the children of ``node`` in document order."""
        for child in get_node_children(node):
            self.visit(child)
        return None
