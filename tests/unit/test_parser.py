#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the Markdown to AST parser."""

from pathlib import Path

import pytest
from utils import collect_extension_nodes

from mdext.ast import CodeReferenceNode, Document, Element, Text, TocNode, VariableNode
from mdext.exceptions import ConfigurationError, FileError
from mdext.options import MarkdownExtensionOptions
from mdext.parser import ExtendedMarkdownParser, parse_markdown


@pytest.mark.unit
class TestBlockExtensions:
    """Test code references and TOC markers inside documents."""

    def test_code_reference_document(self):
        doc = parse_markdown("@[Hello](docs/hello.md)\n")

        assert isinstance(doc, Document)
        assert doc.children == (CodeReferenceNode(label="Hello", source="docs/hello.md"),)

    def test_empty_source_falls_back_to_paragraph(self):
        doc = parse_markdown("@[Label]()\n")

        assert len(doc.children) == 1
        assert isinstance(doc.children[0], Element)
        assert doc.children[0].type == "paragraph"
        assert collect_extension_nodes(doc) == []

    def test_two_toc_markers(self):
        doc = parse_markdown("@toc@\n\n@toc@\n")

        assert doc.children == (TocNode(), TocNode())
        assert doc.children[0] is not doc.children[1]

    def test_toc_with_trailing_text_is_paragraph(self):
        doc = parse_markdown("@toc@ please\n")

        assert doc.children[0].type == "paragraph"
        assert doc.children[0].children == (Text(content="@toc@ please"),)

    def test_blocks_between_paragraphs(self):
        doc = parse_markdown("Intro\n\n@toc@\n\n@[Example](code/Example.scala)\n\nOutro\n")

        assert [child.kind for child in doc.children] == ["element", "toc", "code_reference", "element"]
        assert doc.children[0].type == "paragraph"
        assert doc.children[-1].type == "paragraph"

    @pytest.mark.parametrize(
        "text",
        ["Intro\n@toc@\n", "See:\n@[ex](code/Ex.scala)\n"],
    )
    def test_line_continuing_a_paragraph_is_not_a_block(self, text):
        doc = parse_markdown(text)

        assert len(doc.children) == 1
        assert doc.children[0].type == "paragraph"
        assert collect_extension_nodes(doc) == []

    def test_block_after_heading_is_recognised(self):
        doc = parse_markdown("# Contents\n@toc@\n")

        assert [child.kind for child in doc.children] == ["element", "toc"]

    def test_marker_inside_fenced_code_is_not_parsed(self):
        doc = parse_markdown("```\n@toc@\n@[a](b)\n```\n")

        assert len(doc.children) == 1
        assert doc.children[0].type == "block_code"
        assert "@toc@" in doc.children[0].raw
        assert collect_extension_nodes(doc) == []

    def test_indented_marker_is_code(self):
        doc = parse_markdown("    @toc@\n")

        assert doc.children[0].type == "block_code"

    def test_toc_inside_list_item(self):
        doc = parse_markdown("- first\n- @toc@\n")

        assert doc.children[0].type == "list"
        assert collect_extension_nodes(doc) == [TocNode()]

    def test_code_reference_inside_block_quote(self):
        doc = parse_markdown("> @[Quoted](code/quoted.scala)\n")

        assert doc.children[0].type == "block_quote"
        assert collect_extension_nodes(doc) == [CodeReferenceNode(label="Quoted", source="code/quoted.scala")]

    def test_nested_blocks_disabled(self):
        doc = parse_markdown("- @toc@\n", MarkdownExtensionOptions(nested_blocks=False))

        assert collect_extension_nodes(doc) == []


@pytest.mark.unit
class TestInlineVariables:
    """Test %name% variables inside running text."""

    def test_variable_in_paragraph(self, parser):
        doc = parser.parse("Some %user% text")

        assert doc.children == (
            Element(
                type="paragraph",
                children=(Text(content="Some "), VariableNode(name="user"), Text(content=" text")),
            ),
        )

    def test_unknown_variable_stays_literal(self, parser):
        doc = parser.parse("%nobody%")

        assert doc.children[0].children == (Text(content="%nobody%"),)

    def test_variable_without_configuration(self):
        doc = parse_markdown("Some %user% text")

        assert collect_extension_nodes(doc) == []

    def test_multiple_variables(self, parser):
        doc = parser.parse("%user% uses %version% and %user%")

        assert collect_extension_nodes(doc) == [
            VariableNode(name="user"),
            VariableNode(name="version"),
            VariableNode(name="user"),
        ]

    def test_variable_in_heading(self, parser):
        doc = parser.parse("# Release %version%\n")

        heading = doc.children[0]
        assert heading.type == "heading"
        assert heading.attrs["level"] == 1
        assert heading.children[-1] == VariableNode(name="version")

    def test_variable_inside_emphasis(self, parser):
        doc = parser.parse("Hello *dear %user%*")

        emphasis = doc.children[0].children[-1]
        assert emphasis.type == "emphasis"
        assert emphasis.children == (Text(content="dear "), VariableNode(name="user"))

    def test_code_span_wins_over_variable(self, parser):
        doc = parser.parse("Use `%user%` here")

        assert collect_extension_nodes(doc) == []
        codespan = doc.children[0].children[1]
        assert codespan.type == "codespan"
        assert codespan.raw == "%user%"

    def test_escaped_delimiter_is_not_a_variable(self, parser):
        doc = parser.parse("\\%user%")

        assert collect_extension_nodes(doc) == []

    def test_variable_is_not_a_block_rule(self, parser):
        doc = parser.parse("%user%\n")

        assert doc.children[0].type == "paragraph"
        assert doc.children[0].children == (VariableNode(name="user"),)


@pytest.mark.unit
class TestParserBehaviour:
    """Test input handling, idempotence and configuration."""

    def test_reparse_is_structurally_identical(self, parser, sample_markdown):
        assert parser.parse(sample_markdown) == parser.parse(sample_markdown)

    def test_separate_parsers_agree(self, variable_options, sample_markdown):
        first = ExtendedMarkdownParser(variable_options).parse(sample_markdown)
        second = ExtendedMarkdownParser(variable_options).parse(sample_markdown)

        assert first == second

    def test_blank_lines_are_dropped(self):
        doc = parse_markdown("\n\n@toc@\n\n\n")

        assert doc.children == (TocNode(),)

    def test_empty_document(self):
        assert parse_markdown("") == Document()

    def test_parse_path(self, tmp_path: Path, parser):
        path = tmp_path / "page.md"
        path.write_text("@toc@\n\nHi %user%\n", encoding="utf-8")

        doc = parser.parse(path)

        assert collect_extension_nodes(doc) == [TocNode(), VariableNode(name="user")]

    def test_parse_bytes(self, parser):
        text = "@[Déjà vu, café crème](code/résumé.scala)\n"
        doc = parser.parse(text.encode("utf-8"))

        assert doc.children == (CodeReferenceNode(label="Déjà vu, café crème", source="code/résumé.scala"),)

    def test_missing_file(self, tmp_path: Path, parser):
        missing = tmp_path / "missing.md"

        with pytest.raises(FileError) as exc_info:
            parser.parse(missing)

        assert exc_info.value.file_path == str(missing)

    def test_string_input_is_content_not_path(self, tmp_path: Path, parser):
        path = tmp_path / "page.md"
        path.write_text("@toc@\n", encoding="utf-8")

        doc = parser.parse(str(path))

        assert collect_extension_nodes(doc) == []

    def test_unsupported_input_type(self, parser):
        with pytest.raises(ConfigurationError):
            parser.parse(42)

    def test_wrong_options_type(self):
        with pytest.raises(ConfigurationError):
            ExtendedMarkdownParser(options={"variables": ("user",)})

    def test_extensions_exposed(self, parser):
        assert [ext.rule_name for ext in parser.extensions] == ["code_reference", "toc", "variable"]
