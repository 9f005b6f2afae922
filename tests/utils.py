"""Test utilities for the mdext test suite."""

from mdext.ast import NodeVisitor


class ExtensionNodeCollector(NodeVisitor):
    """Collect extension nodes in document order."""

    def __init__(self):
        self.nodes = []

    def visit_code_reference(self, node):
        self.nodes.append(node)

    def visit_toc(self, node):
        self.nodes.append(node)

    def visit_variable(self, node):
        self.nodes.append(node)


def collect_extension_nodes(node) -> list:
    """Return every extension node below ``node`` in document order."""
    collector = ExtensionNodeCollector()
    collector.visit(node)
    return collector.nodes
