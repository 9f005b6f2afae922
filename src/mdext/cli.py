#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/cli.py
"""Command-line interface for inspecting the extended Markdown AST.

Parses a Markdown file with the documentation extensions enabled and prints
the resulting AST as JSON.

Environment Variable Support
----------------------------
``MDEXT_VARIABLES`` holds a comma-separated list of variable names used when
no ``--var`` option is given.

Examples
--------
Dump a document::

    $ mdext docs/index.md --indent 2

Declare variables::

    $ mdext docs/index.md --var version --var user

Read from standard input::

    $ cat docs/index.md | mdext -

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from mdext import __version__
from mdext.ast import ast_to_json
from mdext.constants import (
    DEFAULT_HOST_PLUGINS,
    ENV_VARIABLES,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from mdext.exceptions import FileError, ParsingError, ValidationError
from mdext.logging_utils import configure_logging
from mdext.options import MarkdownExtensionOptions
from mdext.parser import ExtendedMarkdownParser

logger = logging.getLogger(__name__)


def _env_variables() -> list[str]:
    """Return the variable names listed in ``MDEXT_VARIABLES``."""
    raw = os.environ.get(ENV_VARIABLES, "")
    return [name.strip() for name in raw.split(",") if name.strip()]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``mdext`` command."""
    parser = argparse.ArgumentParser(
        prog="mdext",
        description="Parse Markdown with code references, TOC markers and variables; print the AST as JSON.",
    )
    parser.add_argument("input", help="Markdown file to parse, or '-' for standard input")
    parser.add_argument(
        "--var",
        dest="variables",
        action="append",
        metavar="NAME",
        help=f"Known variable name, matched as %%NAME%% (repeatable; default from ${ENV_VARIABLES})",
    )
    parser.add_argument("--no-toc", action="store_true", help="Do not recognise @toc@ markers")
    parser.add_argument(
        "--no-code-references", action="store_true", help="Do not recognise @[label](source) references"
    )
    parser.add_argument(
        "--no-nested-blocks",
        action="store_true",
        help="Only recognise block extensions at the top level, not inside lists and quotes",
    )
    parser.add_argument(
        "--plugin",
        dest="plugins",
        action="append",
        metavar="NAME",
        help=f"mistune plugin to enable on the host grammar (repeatable; default: {', '.join(DEFAULT_HOST_PLUGINS)})",
    )
    parser.add_argument("--indent", type=int, default=None, help="Indent JSON output by N spaces")
    parser.add_argument("--out", "-o", help="Write JSON to this file instead of standard output")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_options(parsed_args: argparse.Namespace) -> MarkdownExtensionOptions:
    """Translate command-line arguments into grammar options."""
    variables = parsed_args.variables if parsed_args.variables else _env_variables()
    plugins = parsed_args.plugins if parsed_args.plugins else DEFAULT_HOST_PLUGINS
    return MarkdownExtensionOptions(
        code_references=not parsed_args.no_code_references,
        table_of_contents=not parsed_args.no_toc,
        variables=tuple(variables),
        nested_blocks=not parsed_args.no_nested_blocks,
        host_plugins=tuple(plugins),
    )


def main(args: list[str] | None = None) -> int:
    """Run the ``mdext`` command and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        options = build_options(parsed_args)
        md_parser = ExtendedMarkdownParser(options)
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        if parsed_args.input == "-":
            document = md_parser.parse(sys.stdin.read())
        else:
            document = md_parser.parse(Path(parsed_args.input))
    except FileError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except ParsingError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_PARSING_ERROR
    except Exception as e:
        logger.exception("Unexpected error while parsing %s", parsed_args.input)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    output = ast_to_json(document, indent=parsed_args.indent)
    if parsed_args.out:
        try:
            Path(parsed_args.out).write_text(output + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Error: could not write {parsed_args.out}: {e}", file=sys.stderr)
            return EXIT_FILE_ERROR
        logger.info("Wrote AST to %s", parsed_args.out)
    else:
        print(output)

    return EXIT_SUCCESS
