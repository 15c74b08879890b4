#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the org2subtext library.

This module defines specialized exception classes for the error conditions
that can occur while parsing org documents, resolving note links and
rendering subtext. These exceptions provide more specific error information
than generic built-ins.

Exception Hierarchy
-------------------
- Org2SubtextError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, unreadable files)

  - ParsingError (input document parsing failures)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

  - LinkResolutionError (a single link could not be resolved)
    - LinkNotFoundError (identifier unknown to the link index)

  - LinkIndexError (link index unreachable or unusable)

  - DependencyError (missing packages)

"""

from typing import Any


class Org2SubtextError(Exception):
    """Base exception class for all org2subtext-specific errors.

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


class ValidationError(Org2SubtextError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Org2SubtextError):
    """Base exception for file access and I/O errors.

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


class FileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file exists but cannot be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(Org2SubtextError):
    """Exception raised when document parsing fails.

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


class RenderingError(Org2SubtextError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing the output file fails."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class LinkResolutionError(Org2SubtextError):
    """Exception raised when a single internal link cannot be resolved.

    The renderer treats this as recoverable: it logs a warning and writes an
    empty wiki-link in place of the title.

    Parameters
    ----------
    identifier : str
        The identifier that failed to resolve
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The backing index error, if any

    """

    def __init__(self, identifier: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the link resolution error."""
        if message is None:
            message = f"Unable to resolve link '{identifier}'"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, original_error=original_error)
        self.identifier = identifier


class LinkNotFoundError(LinkResolutionError):
    """Exception raised when the link index has no entry for an identifier."""

    def __init__(self, identifier: str, message: str | None = None):
        """Initialize the not found error."""
        if message is None:
            message = f"No note with id '{identifier}' in the link index"
        super().__init__(identifier, message=message)


class LinkIndexError(Org2SubtextError):
    """Exception raised when the link index itself cannot be used.

    Unlike LinkResolutionError this is fatal: the index is unreachable, the
    database file is missing, or the expected table does not exist.

    Parameters
    ----------
    message : str
        Description of the failure
    database_url : str, optional
        The connection string that was used (password masked)
    original_error : Exception, optional
        The underlying database error

    """

    def __init__(self, message: str, database_url: str | None = None, original_error: Exception | None = None):
        """Initialize the link index error."""
        super().__init__(message, original_error=original_error)
        self.database_url = database_url


class DependencyError(Org2SubtextError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the component requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The first ImportError raised while checking

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        self.original_import_error = original_import_error
        if message is None:
            pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
            packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in missing_packages)
            message = (
                f"{converter_name} requires the following packages: {pkg_list}\n"
                f"Install with: pip install {packages_str}"
            )
        super().__init__(message)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
