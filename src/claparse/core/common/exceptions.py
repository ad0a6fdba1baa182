"""
Common exception classes for claparse.

This module defines the exception hierarchy raised while defining parameters,
loading configuration and parsing command line input.
"""

from __future__ import annotations


class CLAParseError(Exception):
    """Base exception class for all claparse errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        # Extra attributes (parameter, token, value...) are exposed directly
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class ParameterDefinitionError(CLAParseError):
    """Raised when a parameter definition is inconsistent."""

    def __init__(
        self,
        message: str = "Invalid parameter definition",
        parameter: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, parameter=parameter, **kwargs)


class ConfigurationError(CLAParseError):
    """Raised when parser configuration or a parameter schema is invalid."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)


class ParseError(CLAParseError):
    """Raised when a token sequence cannot be parsed."""

    def __init__(
        self, message: str = "Parsing failed", details: dict | None = None, **kwargs
    ):
        super().__init__(message, details, **kwargs)


# Token errors -------------------------------------------------------------


class ParameterTokenError(ParseError):
    """Raised when a token is not what the parser expected."""


class UnknownParameterError(ParameterTokenError):
    """Raised when a token does not match any registered marker."""

    def __init__(self, token: str, details: dict | None = None, **kwargs):
        super().__init__(f'Unknown parameter "{token}"', details, token=token, **kwargs)


# Count errors -------------------------------------------------------------


class ParameterCountError(ParseError):
    """Raised when a parameter or its values are missing."""


class InsufficientValuesError(ParameterCountError):
    """Raised when fewer tokens remain than a parameter requires."""

    def __init__(
        self,
        parameter: str,
        required: int,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(
            f'Not enough values for parameter "{parameter}". '
            f"Needs at least {required}",
            details,
            parameter=parameter,
            required=required,
            **kwargs,
        )


class MissingRequiredParameterError(ParameterCountError):
    """Raised when a required parameter never appeared in the input."""

    def __init__(self, parameter: str, details: dict | None = None, **kwargs):
        super().__init__(
            f'Parameter "{parameter}" required', details, parameter=parameter, **kwargs
        )


# Value errors -------------------------------------------------------------


class ParameterValueError(ParseError):
    """Raised when a parameter occurrence or value is not acceptable."""


class InvalidValueError(ParameterValueError):
    """Raised when a value is outside a parameter's fixed value set."""

    def __init__(
        self,
        parameter: str,
        value: str,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(
            f'Value "{value}" invalid for parameter "{parameter}"',
            details,
            parameter=parameter,
            value=value,
            **kwargs,
        )


class DuplicateParameterError(ParameterValueError):
    """Raised when a parameter marker is matched twice in one parse call."""

    def __init__(self, parameter: str, details: dict | None = None, **kwargs):
        super().__init__(
            f'Duplicate parameter "{parameter}"', details, parameter=parameter, **kwargs
        )
