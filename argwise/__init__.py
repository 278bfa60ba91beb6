"""
Argwise

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import VARIABLE, Argument, OptionalArgument, PositionalArgument
from .exceptions import (
    ArgwiseError,
    ConfigError,
    ConversionError,
    InsufficientArgumentsError,
    NotFoundError,
    ParseError,
    ParserNotReadyError,
    RegistrationError,
    TooManyArgumentsError,
)
from .logger import logger
from .parse_result import ParseResult, ParseStatus
from .parser import MISSING, ArgumentParser
from .typed_value import TypedValue
from .value_kind import ValueKind

__all__ = [
    "ArgumentParser",
    "Argument",
    "PositionalArgument",
    "OptionalArgument",
    "TypedValue",
    "ValueKind",
    "VARIABLE",
    "MISSING",
    "ParseResult",
    "ParseStatus",
    "ArgwiseError",
    "ConfigError",
    "ConversionError",
    "InsufficientArgumentsError",
    "NotFoundError",
    "ParseError",
    "ParserNotReadyError",
    "RegistrationError",
    "TooManyArgumentsError",
    "logger",
]
