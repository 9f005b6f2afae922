"""mdext - Markdown extension grammar for documentation toolchains.

mdext plugs three custom syntaxes into the mistune Markdown parser and turns
them into typed, immutable AST nodes that a renderer can visit uniformly:

- ``@[label](source)`` on its own line: a source-code inclusion reference
  (:class:`~mdext.ast.CodeReferenceNode`)
- ``@toc@`` on its own line: a table-of-contents marker
  (:class:`~mdext.ast.TocNode`)
- ``%name%`` inside running text, for configured names: a text variable
  (:class:`~mdext.ast.VariableNode`)

The package only recognizes syntax. It does not read referenced sources,
build tables of contents, or substitute variable values; that is the
renderer's job.

Examples
--------
Parse a document:

    >>> from mdext import MarkdownExtensionOptions, parse_markdown
    >>> doc = parse_markdown(
    ...     "Some %user% text",
    ...     MarkdownExtensionOptions(variables=("user",)),
    ... )
    >>> doc.children[0].children
    (Text(content='Some '), VariableNode(name='user'), Text(content=' text'))

Use the extensions directly as mistune plugins:

    >>> import mistune
    >>> from mdext.extensions import CodeReferenceExtension, TocExtension
    >>> md = mistune.create_markdown(renderer=None, plugins=[CodeReferenceExtension(), TocExtension()])

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdext requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from mdext.ast import (
    CodeReferenceNode,
    Document,
    Element,
    Node,
    NodeVisitor,
    Text,
    TocNode,
    VariableNode,
    ast_to_dict,
    ast_to_json,
)
from mdext.exceptions import ConfigurationError, FileError, MdextError, ParsingError, ValidationError
from mdext.extensions import (
    CodeReferenceExtension,
    Extension,
    RuleMatch,
    TocExtension,
    VariableExtension,
    VariableRule,
)
from mdext.markdown import build_extensions, create_markdown
from mdext.options import MarkdownExtensionOptions
from mdext.parser import ExtendedMarkdownParser, parse_markdown

__all__ = [
    "__version__",
    "CodeReferenceExtension",
    "CodeReferenceNode",
    "ConfigurationError",
    "Document",
    "Element",
    "ExtendedMarkdownParser",
    "Extension",
    "FileError",
    "MarkdownExtensionOptions",
    "MdextError",
    "Node",
    "NodeVisitor",
    "ParsingError",
    "RuleMatch",
    "Text",
    "TocExtension",
    "TocNode",
    "ValidationError",
    "VariableExtension",
    "VariableNode",
    "VariableRule",
    "ast_to_dict",
    "ast_to_json",
    "build_extensions",
    "create_markdown",
    "parse_markdown",
]
