#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/extensions/code_reference.py
"""Block rule for source-code inclusion references.

Recognises a line of the form::

    @[label](path/to/source)

The label may be empty; the source may not. A reference with an empty source
is not an error, it just fails to match and the host grammar treats the line
as ordinary paragraph text. No file is opened and the source is not checked.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from mdext.ast.nodes import CodeReferenceNode
from mdext.constants import CODE_REFERENCE_PREFIX, CODE_REFERENCE_RULE, LINE_TERMINATOR_PATTERN
from mdext.extensions.base import Extension

CODE_REFERENCE_PATTERN = (
    r"^" + re.escape(CODE_REFERENCE_PREFIX)
    + r"\[(?P<code_reference_label>[^\]]*)\]"
    + r"\((?P<code_reference_source>[^)]+)\)"
    + LINE_TERMINATOR_PATTERN
)


@dataclass(frozen=True)
class CodeReferenceExtension(Extension):
    """Recognise ``@[label](source)`` at the start of a block."""

    level = "block"
    rule_name = CODE_REFERENCE_RULE
    node_type = CodeReferenceNode

    @property
    def pattern(self) -> str:
        return CODE_REFERENCE_PATTERN

    def build_node(self, match: re.Match[str]) -> CodeReferenceNode:
        return CodeReferenceNode(
            label=match.group("code_reference_label"),
            source=match.group("code_reference_source"),
        )
