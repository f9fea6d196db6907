#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2adoc library.

This module defines specialized exception classes for the error conditions
that can occur while converting Markdown to AsciiDoc. These exceptions
provide more specific error information than generic built-ins.

Exception Hierarchy
-------------------
- Md2AdocError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class or option value)

  - FileError (file access and I/O on the input side)
    - FileNotFoundError (file doesn't exist)

  - ParsingError (input text could not be turned into a document tree)
    - EncodingError (input bytes could not be decoded)

  - RenderingError (output generation failures)
    - UnsupportedNodeError (node kind with no AsciiDoc mapping)
    - OutputWriteError (destination write failures)

Errors raised by caller-supplied preprocessors and postprocessors are not
wrapped; they propagate unchanged.

"""

from typing import Any


class Md2AdocError(Exception):
    """Base exception class for all md2adoc-specific errors.

    Catching this will catch all library-specific errors.

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


class ValidationError(Md2AdocError):
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
    """Exception raised when an options object has the wrong type or value.

    Parameters
    ----------
    message : str
        Description of the problem
    component_name : str, optional
        Name of the parser or renderer that rejected the options
    expected_type : type, optional
        The expected options class
    received_type : type, optional
        The options class that was actually received

    """

    def __init__(
        self,
        message: str | None = None,
        component_name: str | None = None,
        expected_type: type | None = None,
        received_type: type | None = None,
        parameter_name: str | None = None,
        parameter_value: Any = None,
    ):
        """Initialize the options error, building a default message from the types."""
        if message is None:
            expected = expected_type.__name__ if expected_type else "unknown"
            received = received_type.__name__ if received_type else "unknown"
            message = f"{component_name or 'component'} expected options of type {expected}, got {received}"
        super().__init__(message, parameter_name=parameter_name, parameter_value=parameter_value)
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Md2AdocError):
    """Exception raised when an input file cannot be read.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path of the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with the offending path."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when the input file does not exist."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize with the missing path."""
        super().__init__(message or f"File not found: {file_path}", file_path=file_path, original_error=original_error)


class ParsingError(Md2AdocError):
    """Exception raised when the input cannot be turned into a document tree.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        Stage of the pipeline where parsing failed
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with the failing stage."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class EncodingError(ParsingError):
    """Exception raised when input bytes cannot be decoded to text.

    Parameters
    ----------
    message : str
        Description of the decoding failure
    encoding : str, optional
        The encoding that was attempted, if one was declared
    original_error : Exception, optional
        The underlying ``UnicodeDecodeError`` or ``LookupError``

    """

    def __init__(self, message: str, encoding: str | None = None, original_error: Exception | None = None):
        """Initialize with the attempted encoding."""
        super().__init__(message, parsing_stage="decoding", original_error=original_error)
        self.encoding = encoding


class RenderingError(Md2AdocError):
    """Exception raised when AsciiDoc output cannot be produced.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        Stage of rendering where the failure occurred
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error with the failing stage."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class UnsupportedNodeError(RenderingError):
    """Exception raised when the tree contains a node kind with no AsciiDoc mapping.

    Parameters
    ----------
    node_type : str
        Class name of the offending node
    location : str, optional
        Human-readable source location (e.g. ``"line 12"``), if known

    """

    def __init__(self, node_type: str, location: str | None = None):
        """Initialize with the node kind and its approximate location."""
        message = f"No AsciiDoc mapping for node type '{node_type}'"
        if location:
            message += f" at {location}"
        super().__init__(message, rendering_stage="node")
        self.node_type = node_type
        self.location = location


class OutputWriteError(RenderingError):
    """Exception raised when rendered output cannot be written to its destination.

    Parameters
    ----------
    file_path : str
        Destination that failed
    message : str, optional
        Custom message; a default is built from the path
    original_error : Exception, optional
        The underlying ``OSError``

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize with the failing destination path."""
        if message is None:
            message = f"Failed to write output to {file_path}"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, rendering_stage="output", original_error=original_error)
        self.file_path = file_path


__all__ = [
    "Md2AdocError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileNotFoundError",
    "ParsingError",
    "EncodingError",
    "RenderingError",
    "UnsupportedNodeError",
    "OutputWriteError",
]
