# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argwise.

Registration problems surface immediately to the host program. Parse-time
problems (`ParseError` and its subclasses) are caught by
`ArgumentParser.parse()` and turned into usage/help output and an exit status,
unless the parser is asked to re-raise them. Query problems always surface to
the caller unless a default is supplied.

All exceptions inherit from `ArgwiseError`, the base exception for the package.

Exception Hierarchy:
- ArgwiseError
    ├── RegistrationError
    │   └── ConfigError
    ├── NotFoundError
    ├── ParserNotReadyError
    └── ParseError
        ├── ConversionError
        ├── InsufficientArgumentsError
        └── TooManyArgumentsError
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argwise.typed_value import TypedValue


class ArgwiseError(Exception):
    """Base exception for Argwise."""


class RegistrationError(ArgwiseError):
    """Raised when an argument or option cannot be registered."""


class ConfigError(RegistrationError):
    """Raised when a declaration file cannot be loaded or is invalid."""


class NotFoundError(ArgwiseError):
    """Raised when a name has no bound values."""


class ParserNotReadyError(ArgwiseError):
    """Raised when values are queried before a successful parse."""


class ParseError(ArgwiseError):
    """
    Base exception for errors raised while matching input tokens.

    Attributes:
        bound (dict[str, list[TypedValue]]): Values bound before the failure.
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.bound: dict[str, list[TypedValue]] = {}


class ConversionError(ParseError):
    """Raised when a token cannot be converted to the declared kind."""


class InsufficientArgumentsError(ParseError):
    """Raised when fewer tokens remain than an argument requires."""


class TooManyArgumentsError(ParseError):
    """Raised when tokens are left over after every positional is bound."""
