#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/parser.py
"""Markdown to AST parser with the documentation extensions enabled.

Mistune tokenizes the document; this module converts the token stream into
the node model of :mod:`mdext.ast`. Tokens produced by the extension rules
become extension nodes, ``text`` tokens become :class:`Text`, and every other
host token becomes a generic :class:`Element` tagged with its token type.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Union

from mdext.ast import Document, Element, Node, Text
from mdext.constants import IGNORED_TOKEN_TYPES
from mdext.exceptions import ConfigurationError, FileError, ParsingError
from mdext.extensions import Extension
from mdext.markdown import build_extensions, create_markdown
from mdext.options import MarkdownExtensionOptions
from mdext.utils.encoding import read_text_with_encoding_detection

logger = logging.getLogger(__name__)


class ExtendedMarkdownParser:
    r"""Parse Markdown with code references, TOC markers and variables.

    The parser holds only its immutable configuration and the assembled
    grammar; each :meth:`parse` call works on fresh mistune state, so a single
    instance can be shared between threads.

    Parameters
    ----------
    options : MarkdownExtensionOptions or None, default = None
        Grammar configuration

    Raises
    ------
    ConfigurationError
        If ``options`` has the wrong type or the grammar cannot be assembled

    Examples
    --------
        >>> parser = ExtendedMarkdownParser(MarkdownExtensionOptions(variables=("user",)))
        >>> doc = parser.parse("@[Hello](docs/hello.md)\n")
        >>> doc.children[0]
        CodeReferenceNode(label='Hello', source='docs/hello.md')

    """

    def __init__(self, options: MarkdownExtensionOptions | None = None):
        """Validate options and assemble the grammar."""
        if options is not None and not isinstance(options, MarkdownExtensionOptions):
            raise ConfigurationError(
                f"Expected MarkdownExtensionOptions, got {type(options).__name__}",
                parameter_name="options",
                parameter_value=options,
            )
        self.options: MarkdownExtensionOptions = options or MarkdownExtensionOptions()
        self.extensions: tuple[Extension, ...] = tuple(build_extensions(self.options))
        self._extensions_by_rule: dict[str, Extension] = {ext.rule_name: ext for ext in self.extensions}
        self._markdown = create_markdown(self.options, self.extensions)

    def parse(self, input_data: Union[str, Path, bytes]) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, Path, or bytes
            Markdown input to parse. Can be:
            - Markdown string
            - File path (Path)
            - Raw markdown bytes

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        FileError
            If a path is given and the file cannot be read
        ParsingError
            If the host grammar returns something other than a token list

        """
        markdown_content = self._load_text_content(input_data)

        tokens, _state = self._markdown.parse(markdown_content)
        if not isinstance(tokens, list):
            raise ParsingError(
                f"Expected a token list from mistune, got {type(tokens).__name__}", parsing_stage="tokenize"
            )

        children = self._process_tokens(tokens)
        logger.debug("Parsed document into %d top-level nodes", len(children))
        return Document(children=tuple(children))

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, bytes]) -> str:
        """Load Markdown text from a string, a path, or raw bytes.

        Strings are always treated as Markdown content; pass a :class:`Path`
        to read a file.

        """
        if isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        if isinstance(input_data, Path):
            try:
                data = input_data.read_bytes()
            except OSError as e:
                raise FileError(f"Could not read {input_data}: {e}", file_path=str(input_data), original_error=e) from e
            return read_text_with_encoding_detection(data)
        if isinstance(input_data, str):
            return input_data
        raise ConfigurationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=type(input_data).__name__,
        )

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune tokens into AST nodes.

        Parameters
        ----------
        tokens : list of dict
            Mistune token dictionaries

        Returns
        -------
        list of Node
            AST nodes, with ignorable tokens dropped

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node, or None for tokens without content

        """
        token_type = token.get("type", "")

        if token_type in IGNORED_TOKEN_TYPES:
            return None

        extension = self._extensions_by_rule.get(token_type)
        if extension is not None:
            return extension.node_from_token(token)

        if token_type == "text":
            return Text(content=token.get("raw", ""))

        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        return Element(
            type=token_type,
            attrs=attrs,
            children=tuple(self._process_tokens(children)),
            raw=token.get("raw"),
        )


def parse_markdown(markdown_content: str, options: MarkdownExtensionOptions | None = None) -> Document:
    r"""Parse a Markdown string into an AST.

    This is a convenience function that creates a parser and parses the
    markdown in one step.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownExtensionOptions or None, default = None
        Grammar configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
        >>> from mdext.parser import parse_markdown
        >>> doc = parse_markdown("Intro\n\n@toc@\n")
        >>> [child.kind for child in doc.children]
        ['element', 'toc']

    """
    parser = ExtendedMarkdownParser(options)
    return parser.parse(markdown_content)
