#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/extensions/toc.py
"""Block rule for the table-of-contents marker ``@toc@``."""

from __future__ import annotations

import re
from dataclasses import dataclass

from mdext.ast.nodes import TocNode
from mdext.constants import LINE_TERMINATOR_PATTERN, TOC_MARKER, TOC_RULE
from mdext.extensions.base import Extension

# The marker must fill its line; the line break ends the block.
TOC_PATTERN = r"^" + re.escape(TOC_MARKER) + LINE_TERMINATOR_PATTERN


@dataclass(frozen=True)
class TocExtension(Extension):
    """Recognise a standalone ``@toc@`` block.

    Every occurrence yields a fresh :class:`TocNode`; what a second marker
    means is left to the renderer.

    """

    level = "block"
    rule_name = TOC_RULE
    node_type = TocNode

    @property
    def pattern(self) -> str:
        return TOC_PATTERN

    def build_node(self, match: re.Match[str]) -> TocNode:
        return TocNode()
