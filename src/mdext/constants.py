#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdext package.

This module centralizes the syntax literals, rule names and default
configuration values shared by the extensions, the parser and the CLI.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Extension Syntax - Delimiters and literals recognised by the rules
3. Host Grammar - Mistune rule names and default plugins
4. CLI - Environment variables and exit codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

RuleLevel = Literal["block", "inline"]

# =============================================================================
# Extension Syntax
# =============================================================================

CODE_REFERENCE_PREFIX = "@"
TOC_MARKER = "@toc@"
VARIABLE_DELIMITER = "%"

# Line terminator accepted after a block construct. End of input counts as a
# terminator because mistune does not always hand the final newline to nested
# block states.
LINE_TERMINATOR_PATTERN = r"(?:\r?\n|$)"

# =============================================================================
# Host Grammar
# =============================================================================

CODE_REFERENCE_RULE = "code_reference"
TOC_RULE = "toc"
VARIABLE_RULE = "variable"

# Token types mistune emits that carry no document content
IGNORED_TOKEN_TYPES = frozenset({"blank_line"})

DEFAULT_HOST_PLUGINS: tuple[str, ...] = ("strikethrough", "table")
DEFAULT_NESTED_BLOCKS = True

# =============================================================================
# CLI
# =============================================================================

ENV_VARIABLES = "MDEXT_VARIABLES"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
