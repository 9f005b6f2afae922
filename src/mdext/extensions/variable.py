#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/extensions/variable.py
"""Inline rule for named text variables such as ``%version%``.

Each known variable is described by an immutable :class:`VariableExtension`
value. All of them are served by a single generic inline rule,
:class:`VariableRule`, whose pattern alternates over the configured names.
A ``%name%`` sequence whose name is not configured matches nothing and stays
literal text; that is the intended fallback, not an error.

Mistune resolves the leftmost match first, so code spans and backslash
escapes (``\\%version%``) take precedence over variables.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable

from mdext.ast.nodes import VariableNode
from mdext.constants import VARIABLE_DELIMITER, VARIABLE_RULE
from mdext.exceptions import ConfigurationError
from mdext.extensions.base import Extension

if TYPE_CHECKING:
    from mistune import Markdown

logger = logging.getLogger(__name__)

_DELIMITER_PATTERN = re.escape(VARIABLE_DELIMITER)
_RULE_PATTERN_SHAPE = re.compile(
    _DELIMITER_PATTERN + r"\(\?P<variable_name>(?P<alternatives>.*)\)" + _DELIMITER_PATTERN, re.DOTALL
)
# One alternative of the shape above: escaped characters or anything but "|".
_ALTERNATIVE = re.compile(r"(?:\\.|[^|\\])+", re.DOTALL)
_ESCAPED_CHARACTER = re.compile(r"\\(.)", re.DOTALL)


def validate_variable_name(name: Any) -> str:
    """Check that ``name`` can be used between ``%`` delimiters.

    Parameters
    ----------
    name : Any
        Candidate variable name

    Returns
    -------
    str
        The validated name

    Raises
    ------
    ConfigurationError
        If the name is not a string, is empty, or contains the delimiter or
        whitespace

    """
    if not isinstance(name, str):
        raise ConfigurationError(
            f"Variable name must be a string, got {type(name).__name__}",
            parameter_name="name",
            parameter_value=name,
        )
    if not name:
        raise ConfigurationError("Variable name must not be empty", parameter_name="name", parameter_value=name)
    if VARIABLE_DELIMITER in name:
        raise ConfigurationError(
            f"Variable name {name!r} must not contain '{VARIABLE_DELIMITER}'",
            parameter_name="name",
            parameter_value=name,
        )
    if any(ch.isspace() for ch in name):
        raise ConfigurationError(
            f"Variable name {name!r} must not contain whitespace",
            parameter_name="name",
            parameter_value=name,
        )
    return name


@dataclass(frozen=True)
class VariableExtension(Extension):
    """Configuration for one known variable.

    Parameters
    ----------
    name : str
        Variable identifier, written ``%name%`` in documents

    Raises
    ------
    ConfigurationError
        If ``name`` is invalid (see :func:`validate_variable_name`)

    """

    level = "inline"
    rule_name = VARIABLE_RULE
    node_type = VariableNode

    name: str

    def __post_init__(self) -> None:
        validate_variable_name(self.name)

    @property
    def marker(self) -> str:
        """The literal text this variable is written as."""
        return f"{VARIABLE_DELIMITER}{self.name}{VARIABLE_DELIMITER}"

    @property
    def pattern(self) -> str:
        delimiter = re.escape(VARIABLE_DELIMITER)
        return f"{delimiter}(?P<variable_name>{re.escape(self.name)}){delimiter}"

    def build_node(self, match: re.Match[str]) -> VariableNode:
        return VariableNode(name=self.name)

    def register(self, md: Markdown, nested: bool = True) -> None:
        """Add this variable to the generic variable rule of ``md``."""
        VariableRule((self,)).register(md, nested=nested)


@dataclass(frozen=True)
class VariableRule(Extension):
    """The single inline rule matching every configured variable.

    Parameters
    ----------
    variables : tuple of VariableExtension
        Known variables; duplicates are collapsed, first occurrence wins

    """

    level = "inline"
    rule_name = VARIABLE_RULE
    node_type = VariableNode

    variables: tuple[VariableExtension, ...]

    def __post_init__(self) -> None:
        if not self.variables:
            raise ConfigurationError(
                "VariableRule needs at least one variable", parameter_name="variables", parameter_value=self.variables
            )
        for variable in self.variables:
            if not isinstance(variable, VariableExtension):
                raise ConfigurationError(
                    f"Expected VariableExtension, got {type(variable).__name__}",
                    parameter_name="variables",
                    parameter_value=variable,
                )
        object.__setattr__(self, "variables", tuple(dict.fromkeys(self.variables)))

    @classmethod
    def from_names(cls, names: Iterable[str]) -> VariableRule:
        """Build the rule from plain variable names."""
        return cls(tuple(VariableExtension(name) for name in names))

    @classmethod
    def from_pattern(cls, pattern: str) -> VariableRule:
        """Rebuild the rule from the pattern it registered with mistune.

        Raises
        ------
        ConfigurationError
            If ``pattern`` was not produced by :attr:`pattern`

        """
        match = _RULE_PATTERN_SHAPE.fullmatch(pattern)
        if match is None:
            raise ConfigurationError(
                f"Inline rule '{VARIABLE_RULE}' is already registered with a foreign pattern",
                parameter_name="pattern",
                parameter_value=pattern,
            )
        alternatives = _ALTERNATIVE.findall(match.group("alternatives"))
        return cls.from_names(_ESCAPED_CHARACTER.sub(r"\1", alternative) for alternative in alternatives)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(variable.name for variable in self.variables)

    @property
    def pattern(self) -> str:
        alternatives = "|".join(re.escape(name) for name in self.names)
        delimiter = re.escape(VARIABLE_DELIMITER)
        return f"{delimiter}(?P<variable_name>{alternatives}){delimiter}"

    def build_node(self, match: re.Match[str]) -> VariableNode:
        return VariableNode(name=match.group("variable_name"))

    def merged(self, other: VariableRule) -> VariableRule:
        """Return a rule covering the variables of both rules."""
        return VariableRule(self.variables + other.variables)

    def register(self, md: Markdown, nested: bool = True) -> None:
        """Install the rule, merging it with variables already on ``md``."""
        installed = md.inline.specification.get(self.rule_name)
        rule = VariableRule.from_pattern(installed).merged(self) if installed else self
        md.inline.register(rule.rule_name, rule.pattern, rule._parse)
        logger.debug("Registered inline rule '%s' for variables: %s", rule.rule_name, ", ".join(rule.names))
