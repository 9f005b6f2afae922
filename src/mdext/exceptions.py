#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdext package.

Failed rule matches are never exceptions: a rule that does not recognise its
syntax simply reports no match and the host grammar moves on. The classes here
cover the rare cases that must stop work, mostly misconfiguration detected
while a grammar is being assembled.

Exception Hierarchy
-------------------
- MdextError (base exception)

  - ValidationError (parameter/option validation)
    - ConfigurationError (invalid extension configuration)

  - FileError (input could not be read)

  - ParsingError (host grammar produced unusable output)

"""

from typing import Any


class MdextError(Exception):
    """Base exception class for all mdext-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdextError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class ConfigurationError(ValidationError):
    """Exception raised when an extension is configured with invalid values.

    Raised at construction time, for example by ``VariableExtension("")``,
    so that a grammar is never assembled from a broken configuration.

    """


class FileError(MdextError):
    """Exception raised when an input document cannot be read.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ParsingError(MdextError):
    """Exception raised when the host grammar output cannot be converted.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage

