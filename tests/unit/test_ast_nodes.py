#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes.py
"""Unit tests for AST node classes.

Tests cover:
- Node creation and immutability
- Structural equality
- Kind tags and helper functions

"""

import dataclasses

import pytest

from mdext.ast import (
    EXTENSION_NODE_TYPES,
    CodeReferenceNode,
    Document,
    Element,
    Text,
    TocNode,
    VariableNode,
    get_node_children,
    is_extension_node,
)
from mdext.parser import parse_markdown


@pytest.mark.unit
class TestExtensionNodes:
    """Tests for the nodes produced by the extension rules."""

    def test_code_reference_fields(self):
        node = CodeReferenceNode(label="Hello", source="docs/hello.md")
        assert node.label == "Hello"
        assert node.source == "docs/hello.md"
        assert node.kind == "code_reference"

    def test_code_reference_allows_empty_label(self):
        node = CodeReferenceNode(label="", source="code/Example.scala")
        assert node.label == ""

    def test_toc_node_carries_no_data(self):
        assert dataclasses.fields(TocNode) == ()
        assert TocNode().kind == "toc"

    def test_toc_nodes_are_equal_but_distinct(self):
        first, second = TocNode(), TocNode()
        assert first == second
        assert first is not second

    def test_variable_node(self):
        node = VariableNode(name="version")
        assert node.name == "version"
        assert node.kind == "variable"

    @pytest.mark.parametrize(
        "node, attribute, value",
        [
            (CodeReferenceNode(label="a", source="b"), "label", "c"),
            (CodeReferenceNode(label="a", source="b"), "source", "c"),
            (VariableNode(name="a"), "name", "b"),
        ],
    )
    def test_nodes_are_immutable(self, node, attribute, value):
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(node, attribute, value)

    def test_structural_equality_and_hashing(self):
        assert CodeReferenceNode("a", "b") == CodeReferenceNode("a", "b")
        assert CodeReferenceNode("a", "b") != CodeReferenceNode("a", "c")
        assert VariableNode("a") != VariableNode("b")
        assert len({VariableNode("a"), VariableNode("a"), TocNode(), TocNode()}) == 2


@pytest.mark.unit
class TestHostNodes:
    """Tests for the generic host nodes."""

    def test_element_defaults(self):
        element = Element(type="thematic_break")
        assert element.attrs == {}
        assert element.children == ()
        assert element.raw is None
        assert element.kind == "element"

    def test_element_with_children(self):
        element = Element(type="paragraph", children=(Text("Hi "), VariableNode("user")))
        assert get_node_children(element) == (Text("Hi "), VariableNode("user"))

    def test_document_children(self):
        doc = Document(children=(TocNode(),))
        assert doc.kind == "document"
        assert get_node_children(doc) == (TocNode(),)

    def test_element_attrs_are_read_only_copy(self):
        attrs = {"level": 2}
        element = Element(type="heading", attrs=attrs)
        attrs["level"] = 3

        assert element.attrs["level"] == 2
        with pytest.raises(TypeError):
            element.attrs["level"] = 4

    def test_element_equality_and_hashing(self):
        first = Element(type="heading", attrs={"level": 1}, children=(Text("h"),))
        second = Element(type="heading", attrs={"level": 1}, children=(Text("h"),))

        assert first == second
        assert hash(first) == hash(second)
        assert first != Element(type="heading", attrs={"level": 2}, children=(Text("h"),))

    def test_parsed_document_is_hashable(self):
        doc = parse_markdown("# Title\n\n- item with *emphasis*\n")
        assert hash(doc) == hash(parse_markdown("# Title\n\n- item with *emphasis*\n"))

    def test_leaves_have_no_children(self):
        assert get_node_children(Text("x")) == ()
        assert get_node_children(CodeReferenceNode("a", "b")) == ()
        assert get_node_children(TocNode()) == ()
        assert get_node_children(VariableNode("v")) == ()


@pytest.mark.unit
class TestExtensionNodeHelpers:
    """Tests for extension node detection."""

    def test_extension_node_types(self):
        assert set(EXTENSION_NODE_TYPES) == {CodeReferenceNode, TocNode, VariableNode}

    @pytest.mark.parametrize(
        "node, expected",
        [
            (CodeReferenceNode("a", "b"), True),
            (TocNode(), True),
            (VariableNode("v"), True),
            (Text("t"), False),
            (Element(type="paragraph"), False),
            (Document(), False),
        ],
    )
    def test_is_extension_node(self, node, expected):
        assert is_extension_node(node) is expected
