"""Pytest configuration and shared fixtures for the mdext test suite."""

import logging
from typing import Generator

import pytest

from mdext import ExtendedMarkdownParser, MarkdownExtensionOptions

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)

    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def variable_options() -> MarkdownExtensionOptions:
    """Options with a couple of known variables."""
    return MarkdownExtensionOptions(variables=("user", "version"))


@pytest.fixture
def parser(variable_options: MarkdownExtensionOptions) -> ExtendedMarkdownParser:
    """Parser with every extension enabled and the sample variables."""
    return ExtendedMarkdownParser(variable_options)


@pytest.fixture
def sample_markdown() -> str:
    """Provide a document using every extension.

    Returns
    -------
    str
        Markdown with a TOC marker, code references and variables.

    """
    return """# Guide for %version%

@toc@

## Getting started

Welcome, %user%! This page documents release %version%.

@[Hello world](code/hello.scala)

- Step one
- @[](code/step.scala)

> Quoted %user%

```
@toc@
%user%
```

Unknown %nobody% stays literal.
"""


@pytest.fixture
def restore_mdext_logger() -> Generator[None, None, None]:
    """Undo logging configuration applied by the CLI."""
    package_logger = logging.getLogger("mdext")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    try:
        yield
    finally:
        for handler in package_logger.handlers:
            if handler not in handlers:
                handler.close()
        package_logger.handlers[:] = handlers
        package_logger.setLevel(level)
        package_logger.propagate = propagate
