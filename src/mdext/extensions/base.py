#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/extensions/base.py
"""Base class for grammar extensions.

An extension pairs a recognizer (a regular expression plus the node it builds)
with a way of installing that recognizer into the host Markdown grammar.
Recognizers are pure: :meth:`Extension.trial` either returns a
:class:`RuleMatch` describing the node and the consumed span, or ``None``.
A failed trial never raises and never consumes input, which is exactly the
contract mistune expects from a registered rule: a rule either matches at the
scan position or the next rule gets a chance there.

"""

from __future__ import annotations

import dataclasses
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Optional

from mdext.ast.nodes import ExtensionNode
from mdext.constants import RuleLevel

if TYPE_CHECKING:
    from mistune import Markdown

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleMatch:
    """Successful trial of an extension rule.

    Parameters
    ----------
    node : ExtensionNode
        Node built from the matched text
    start : int
        Position the trial started at
    end : int
        Position right after the consumed text

    """

    node: ExtensionNode
    start: int
    end: int

    @property
    def consumed(self) -> int:
        """Number of characters consumed by the match."""
        return self.end - self.start


class Extension(ABC):
    """Abstract base class for block and inline grammar extensions.

    Subclasses declare ``level``, ``rule_name`` and ``node_type`` and provide
    :attr:`pattern` and :meth:`build_node`. Group names used inside
    :attr:`pattern` must be prefixed with the rule name, because mistune
    joins every registered pattern into a single alternation.

    Examples
    --------
    Registering with a mistune parser:

        >>> import mistune
        >>> md = mistune.create_markdown(renderer=None, plugins=[TocExtension()])
        >>> md("@toc@\\n")
        [{'type': 'toc', 'attrs': {}}]

    """

    level: ClassVar[RuleLevel]
    rule_name: ClassVar[str]
    node_type: ClassVar[type]

    @property
    @abstractmethod
    def pattern(self) -> str:
        """Regular expression source recognising the syntax."""

    @abstractmethod
    def build_node(self, match: re.Match[str]) -> ExtensionNode:
        """Build the node for a successful match of :attr:`pattern`."""

    @property
    def flags(self) -> int:
        """Regex flags; block rules anchor with ``^`` at line starts."""
        return re.MULTILINE if self.level == "block" else 0

    def trial(self, text: str, pos: int = 0) -> Optional[RuleMatch]:
        """Try the rule at ``pos`` without consuming anything on failure.

        Parameters
        ----------
        text : str
            Source text
        pos : int, default = 0
            Position to try the rule at. Block rules only match where a line
            starts.

        Returns
        -------
        RuleMatch or None
            The match, or None when the rule does not apply at ``pos``

        """
        match = re.compile(self.pattern, self.flags).match(text, pos)
        if match is None:
            return None
        return RuleMatch(node=self.build_node(match), start=pos, end=match.end())

    def to_token(self, node: ExtensionNode) -> dict[str, Any]:
        """Encode ``node`` as a mistune token."""
        return {"type": self.rule_name, "attrs": dataclasses.asdict(node)}

    def node_from_token(self, token: dict[str, Any]) -> ExtensionNode:
        """Rebuild the node stored in a token produced by :meth:`to_token`."""
        return self.node_type(**token.get("attrs", {}))

    def _parse(self, parser: Any, match: re.Match[str], state: Any) -> int:
        """Mistune rule callback: push the token and report the end position.

        Block rules only start a new block; a line directly below paragraph
        text is a continuation of that paragraph.

        """
        if self.level == "block":
            end_pos = state.append_paragraph()
            if end_pos:
                return end_pos
        state.append_token(self.to_token(self.build_node(match)))
        return match.end()

    def register(self, md: Markdown, nested: bool = True) -> None:
        """Install the rule into a mistune ``Markdown`` instance.

        Parameters
        ----------
        md : mistune.Markdown
            Host grammar to extend
        nested : bool, default = True
            For block rules, also install the rule for block-quote and
            list-item content

        """
        if self.level == "block":
            md.block.register(self.rule_name, self.pattern, self._parse)
            if nested:
                for rules in (md.block.block_quote_rules, md.block.list_rules):
                    if self.rule_name not in rules:
                        rules.append(self.rule_name)
        else:
            md.inline.register(self.rule_name, self.pattern, self._parse)
        logger.debug("Registered %s rule '%s'", self.level, self.rule_name)

    def __call__(self, md: Markdown) -> None:
        """Mistune plugin hook, so extensions can be passed as ``plugins=[...]``."""
        self.register(md)
