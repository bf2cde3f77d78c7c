#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the knots library.

This module defines the exception classes raised while rendering a Knots
document to HTML.

Exception Hierarchy
-------------------
- KnotsError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - RenderingError (output generation failures)
    - TagStackError (unbalanced start/end tag operations)
    - SerializerFinalizedError (serializer used after finalization)
    - MissingAssetError (no compiled-in asset for a required feature)

"""

from __future__ import annotations

from typing import Any


class KnotsError(Exception):
    """Base exception class for all knots-specific errors.

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


class ValidationError(KnotsError):
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
    """Exception raised when a renderer receives the wrong options class.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(KnotsError):
    """Exception raised when HTML output cannot be generated.

    Parameters
    ----------
    message : str
        Description of the rendering error
    original_error : Exception, optional
        The original exception that caused this error

    """


class TagStackError(RenderingError):
    """Exception raised when start and end tag operations are unbalanced.

    This always indicates a defect in the renderer rather than bad input: an
    ``end_tag`` with nothing open, or finalization while tags remain open.
    It is never caught inside knots so that malformed HTML is never returned.

    Parameters
    ----------
    message : str
        Description of the violated invariant
    open_tags : sequence of str, optional
        Tags still open when the error was detected, outermost first

    """

    def __init__(self, message: str, open_tags: tuple[str, ...] = ()):
        """Initialize the tag stack error with the open tags."""
        super().__init__(message)
        self.open_tags = tuple(open_tags)


class SerializerFinalizedError(RenderingError):
    """Exception raised when a serializer is used after ``into_result()``."""


class MissingAssetError(RenderingError):
    """Exception raised when a required compiled-in asset does not exist.

    Parameters
    ----------
    message : str
        Description of the missing asset
    asset_name : str
        Name of the asset that was looked up

    """

    def __init__(self, message: str, asset_name: str):
        """Initialize the missing asset error."""
        super().__init__(message)
        self.asset_name = asset_name


__all__ = [
    "KnotsError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderingError",
    "TagStackError",
    "SerializerFinalizedError",
    "MissingAssetError",
]
