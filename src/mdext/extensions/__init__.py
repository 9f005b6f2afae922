#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/extensions/__init__.py
"""Grammar extensions for the mistune Markdown parser.

Block rules:
    - CodeReferenceExtension: ``@[label](source)``
    - TocExtension: ``@toc@``

Inline rules:
    - VariableRule: ``%name%`` for every configured VariableExtension

"""

from mdext.extensions.base import Extension, RuleMatch
from mdext.extensions.code_reference import CODE_REFERENCE_PATTERN, CodeReferenceExtension
from mdext.extensions.toc import TOC_PATTERN, TocExtension
from mdext.extensions.variable import VariableExtension, VariableRule, validate_variable_name

__all__ = [
    "CODE_REFERENCE_PATTERN",
    "TOC_PATTERN",
    "CodeReferenceExtension",
    "Extension",
    "RuleMatch",
    "TocExtension",
    "VariableExtension",
    "VariableRule",
    "validate_variable_name",
]
