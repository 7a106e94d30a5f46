"""Argument error types shared by every helper module.

Each error records the name of the offending parameter in ``param_name`` so
that callers (and tests) can tell which argument was rejected without parsing
the message text.
"""

from __future__ import annotations

from typing import Optional


class ArgumentError(ValueError):
    """Raised when an argument value is not acceptable.

    Parameters
    ----------
    param_name:
        Name of the rejected parameter.
    message:
        Optional human-readable description. When omitted a generic message
        mentioning ``param_name`` is used.
    """

    default_message = "The value of '{param_name}' is not valid."

    def __init__(self, param_name: str, message: Optional[str] = None) -> None:
        self.param_name = param_name
        if not message or not message.strip():
            message = self.default_message.format(param_name=param_name)
        super().__init__(message)


class ArgumentNullError(ArgumentError, TypeError):
    """Raised when a required argument is ``None``."""

    default_message = "The {param_name} cannot be None."


class ArgumentOutOfRangeError(ArgumentError):
    """Raised when an argument lies outside its accepted range."""

    default_message = "The value of '{param_name}' is out of range."


class TimeFormatError(ArgumentError):
    """Raised when a time format string cannot be applied."""

    default_message = "The format string passed as '{param_name}' is invalid."


__all__ = [
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "TimeFormatError",
]
