# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `TypedValue`, a raw command-line token tagged with a `ValueKind`.

The token is validated against its kind when the value is built and every time
it is reassigned, so a `TypedValue` never holds text that cannot be read as its
own kind. Conversion to a concrete Python type happens on every read and is not
cached, which lets the same value be read as different representations:

    value = TypedValue(ValueKind.INTEGER, "42")
    value.read()       # 42
    value.read(float)  # 42.0
    value.read(str)    # "42"
"""
from __future__ import annotations

from typing import Any

from argwise.utils import coerce_integer, coerce_value
from argwise.value_kind import ValueKind


class TypedValue:
    """
    A single token tagged with the kind it must convert to.

    Attributes:
        kind (ValueKind): Declared kind of the value.
        raw (str): The token as it appeared on the command line.
    """

    __slots__ = ("kind", "raw")

    def __init__(self, kind: ValueKind | str | type, raw: str) -> None:
        self.kind: ValueKind = ValueKind(kind)
        self._validate(raw)
        self.raw: str = raw

    def _validate(self, raw: str) -> None:
        if self.kind is ValueKind.INTEGER:
            coerce_integer(raw, strict=True)
        else:
            coerce_value(raw, self.kind.python_type)

    def assign(self, raw: str) -> TypedValue:
        """
        Replace the raw token, validating it against the kind first.

        The previous token is kept when validation fails.

        Raises:
            ConversionError: If `raw` is not a valid token of this kind.
        """
        self._validate(raw)
        self.raw = raw
        return self

    def read(self, target: type | None = None) -> Any:
        """
        Convert the raw token to `target` (the kind's native type by default).

        Raises:
            ConversionError: If `target` is unsupported or the token cannot be
                read as `target`.
        """
        return coerce_value(self.raw, target or self.kind.python_type)

    def render(self) -> str:
        """Return the kind-appropriate text used by status dumps."""
        value = self.read()
        if self.kind is ValueKind.BOOL:
            return "true" if value else "false"
        if self.kind is ValueKind.FLOAT:
            return f"{value:f}"
        return str(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedValue):
            return False
        return self.kind == other.kind and self.raw == other.raw

    def __hash__(self) -> int:
        return hash((self.kind, self.raw))

    def __repr__(self) -> str:
        return f"TypedValue({self.kind.name}, {self.raw!r})"
