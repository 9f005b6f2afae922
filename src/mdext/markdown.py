#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/markdown.py
"""Assemble a mistune grammar with the documentation extensions.

Extensions are registered in a fixed order: code references, the table of
contents marker, then one generic rule for every configured variable. When
two rules could match at the same position, the one registered first wins.

"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import mistune

from mdext.exceptions import ConfigurationError
from mdext.extensions import CodeReferenceExtension, Extension, TocExtension, VariableRule
from mdext.options import MarkdownExtensionOptions

logger = logging.getLogger(__name__)


def build_extensions(options: MarkdownExtensionOptions | None = None) -> list[Extension]:
    """Turn options into the ordered list of extensions to register.

    Parameters
    ----------
    options : MarkdownExtensionOptions or None, default = None
        Grammar configuration; defaults enable code references and the TOC
        marker with no variables

    Returns
    -------
    list of Extension
        Extensions in registration order

    """
    options = options or MarkdownExtensionOptions()
    extensions: list[Extension] = []
    if options.code_references:
        extensions.append(CodeReferenceExtension())
    if options.table_of_contents:
        extensions.append(TocExtension())
    if options.variables:
        extensions.append(VariableRule.from_names(options.variables))
    return extensions


def create_markdown(
    options: MarkdownExtensionOptions | None = None,
    extensions: Optional[Sequence[Extension]] = None,
) -> mistune.Markdown:
    """Create a mistune parser extended with the documentation syntax.

    The parser has no renderer, so calling it returns mistune tokens.

    Parameters
    ----------
    options : MarkdownExtensionOptions or None, default = None
        Grammar configuration
    extensions : sequence of Extension or None, default = None
        Extensions to register instead of those derived from ``options``

    Returns
    -------
    mistune.Markdown
        Parser producing token lists

    Raises
    ------
    ConfigurationError
        If a host plugin cannot be loaded or an extension is not an
        :class:`Extension`

    Examples
    --------
        >>> md = create_markdown(MarkdownExtensionOptions(variables=("user",)))
        >>> md("Hi %user%")[0]["children"][1]
        {'type': 'variable', 'attrs': {'name': 'user'}}

    """
    options = options or MarkdownExtensionOptions()
    if extensions is None:
        extensions = build_extensions(options)

    for extension in extensions:
        if not isinstance(extension, Extension):
            raise ConfigurationError(
                f"Expected an Extension, got {type(extension).__name__}",
                parameter_name="extensions",
                parameter_value=extension,
            )

    try:
        md = mistune.create_markdown(renderer=None, plugins=list(options.host_plugins))
    except (ImportError, AttributeError, ValueError) as e:
        raise ConfigurationError(
            f"Could not load mistune plugins {list(options.host_plugins)}: {e}",
            parameter_name="host_plugins",
            parameter_value=options.host_plugins,
            original_error=e,
        ) from e

    for extension in extensions:
        extension.register(md, nested=options.nested_blocks)

    logger.debug(
        "Assembled markdown grammar with host plugins %s and extensions %s",
        list(options.host_plugins),
        [extension.rule_name for extension in extensions],
    )
    return md
