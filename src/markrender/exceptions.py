#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/exceptions.py
"""Custom exceptions for the markrender library.

Rendering itself never raises for document content: unknown node kinds and
highlighter failures are recovered locally. The exceptions below cover the
construction-time concerns around the renderers (options, theme colors) and
the parser adapter.

Exception Hierarchy
-------------------
- MarkRenderError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer or parser)
    - ThemeError (malformed color or theme values)

  - ParsingError (input document parsing failures)

"""

from typing import Any


class MarkRenderError(Exception):
    """Base exception class for all markrender-specific errors.

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


class ValidationError(MarkRenderError):
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

    For example, passing ``PlainTextOptions`` to the HTML renderer.

    Parameters
    ----------
    component_name : str
        Name of the renderer or parser that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class ThemeError(ValidationError):
    """Exception raised when a color or theme value is malformed.

    Parameters
    ----------
    message : str
        Description of the problem
    field_name : str, optional
        Name of the color field that failed validation
    value : any, optional
        The rejected value

    """

    def __init__(self, message: str, field_name: str | None = None, value: Any = None):
        """Initialize the theme error."""
        super().__init__(message, parameter_name=field_name, parameter_value=value)
        self.field_name = field_name
        self.value = value


class ParsingError(MarkRenderError):
    """Exception raised when Markdown input cannot be parsed.

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
