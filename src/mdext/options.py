#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdext/options.py
"""Configuration options for assembling the extended Markdown grammar."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdext.constants import DEFAULT_HOST_PLUGINS, DEFAULT_NESTED_BLOCKS
from mdext.exceptions import ConfigurationError
from mdext.extensions.variable import validate_variable_name


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class MarkdownExtensionOptions(CloneFrozenMixin):
    """Configuration options for the extended Markdown grammar.

    Instances are immutable, so one options object can be shared by parsers
    running concurrently.

    Parameters
    ----------
    code_references : bool, default True
        Recognise ``@[label](source)`` blocks.
    table_of_contents : bool, default True
        Recognise ``@toc@`` blocks.
    variables : tuple of str, default ()
        Names of the known ``%name%`` variables. Validated on construction.
    nested_blocks : bool, default True
        Also recognise block extensions inside block quotes and list items.
    host_plugins : tuple of str, default ("strikethrough", "table")
        Built-in mistune plugins enabled on the host grammar.

    Raises
    ------
    ConfigurationError
        If a variable name or host plugin name is invalid.

    Examples
    --------
        >>> options = MarkdownExtensionOptions(variables=("version",))
        >>> options.create_updated(table_of_contents=False).variables
        ('version',)

    """

    code_references: bool = field(
        default=True,
        metadata={"help": "Recognise @[label](source) code reference blocks", "importance": "core"},
    )
    table_of_contents: bool = field(
        default=True,
        metadata={"help": "Recognise @toc@ table of contents markers", "importance": "core"},
    )
    variables: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Names of known %name% variables", "importance": "core"},
    )
    nested_blocks: bool = field(
        default=DEFAULT_NESTED_BLOCKS,
        metadata={"help": "Recognise block extensions inside block quotes and list items", "importance": "advanced"},
    )
    host_plugins: tuple[str, ...] = field(
        default=DEFAULT_HOST_PLUGINS,
        metadata={"help": "Built-in mistune plugins enabled on the host grammar", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Normalize sequences to tuples and validate names.

        Raises
        ------
        ConfigurationError
            If any variable name or plugin name is invalid.

        """
        if isinstance(self.variables, str):
            raise ConfigurationError(
                "variables must be a sequence of names, not a single string",
                parameter_name="variables",
                parameter_value=self.variables,
            )
        object.__setattr__(self, "variables", tuple(validate_variable_name(name) for name in self.variables))

        if isinstance(self.host_plugins, str):
            raise ConfigurationError(
                "host_plugins must be a sequence of plugin names, not a single string",
                parameter_name="host_plugins",
                parameter_value=self.host_plugins,
            )
        for plugin in self.host_plugins:
            if not isinstance(plugin, str) or not plugin:
                raise ConfigurationError(
                    f"Invalid mistune plugin name: {plugin!r}",
                    parameter_name="host_plugins",
                    parameter_value=plugin,
                )
        object.__setattr__(self, "host_plugins", tuple(self.host_plugins))
