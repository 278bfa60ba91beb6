# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueKind`, the closed set of value types an argument can declare.

Each kind maps to a native Python type (used when a value is read without an
explicit target) and to the short descriptor shown in help text.

Kinds can be given as members, as config-friendly strings, or as the matching
Python builtin type:

Example:
    ValueKind("int")     → ValueKind.INTEGER
    ValueKind("boolean") → ValueKind.BOOL
    ValueKind(float)     → ValueKind.FLOAT
"""
from __future__ import annotations

from enum import Enum


class ValueKind(Enum):
    """
    Value types recognized by the parser.

    Members:
        BOOL: `true`/`false` (case-insensitive) or an integer literal.
        INTEGER: A signed integer literal.
        FLOAT: A floating point literal.
        STRING: Any text.

    Aliases:
        - "bool", "boolean", bool → BOOL
        - "int", "integer", int → INTEGER
        - "float", "double", float → FLOAT
        - "str", "string", str → STRING
    """

    BOOL = "bool"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"

    @classmethod
    def choices(cls) -> list[ValueKind]:
        """Return a list of all value kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "boolean": "bool",
            "int": "integer",
            "double": "float",
            "str": "string",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueKind:
        python_types = {bool: "bool", int: "integer", float: "float", str: "string"}
        if isinstance(value, type) and value in python_types:
            return cls(python_types[value])
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def python_type(self) -> type:
        """The builtin type a value of this kind reads as by default."""
        return {
            ValueKind.BOOL: bool,
            ValueKind.INTEGER: int,
            ValueKind.FLOAT: float,
            ValueKind.STRING: str,
        }[self]

    def describe(self) -> str:
        """Return the short type name used in help text."""
        if self is ValueKind.BOOL:
            return "boolean"
        return self.value

    def __str__(self) -> str:
        return self.value
