# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Declaration file loader for Argwise parsers.

A declaration file describes the arguments and options of a program in YAML or
TOML, so a parser can be built without writing registration code:

    description: Summarize a report
    arguments:
      - name: file
        kind: string
        help: Report to read
      - name: pages
        kind: integer
        nargs: "..."
    options:
      - directives: ["-v", "--verbose"]
        name: verbose
      - directives: ["-c", "--count"]
        name: count
        kind: integer
        nargs: 1

Entries are validated with pydantic, then registered (options first, each
list in file order) through `ArgumentParser.add_option()` / `add_argument()`,
so every registration rule applies. Any problem is reported as a `ConfigError`.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Sequence

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from argwise.exceptions import ConfigError, RegistrationError
from argwise.logger import logger
from argwise.parser import ArgumentParser
from argwise.value_kind import ValueKind


def _validate_kind_name(value: Any) -> str:
    return ValueKind(value).value


class RawArgument(BaseModel):
    """Positional argument entry of a declaration file."""

    name: str
    kind: str = ValueKind.STRING.value
    nargs: int | str = 1
    help: str = ""

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> str:
        return _validate_kind_name(value)


class RawOption(BaseModel):
    """Optional argument entry of a declaration file."""

    directives: list[str] = Field(min_length=1)
    name: str
    kind: str = ValueKind.BOOL.value
    nargs: int | str = 0
    help: str = ""

    @field_validator("directives", mode="before")
    @classmethod
    def validate_directives(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> str:
        return _validate_kind_name(value)


class ParserConfig(BaseModel):
    """Argwise declaration file model."""

    description: str = ""
    add_help: bool = True
    program: str | None = None
    arguments: list[RawArgument] = Field(default_factory=list)
    options: list[RawOption] = Field(default_factory=list)

    def to_parser(self, argv: Sequence[str] | None = None) -> ArgumentParser:
        """Build an `ArgumentParser` holding every declared argument."""
        parser = ArgumentParser(
            argv,
            description=self.description,
            add_help=self.add_help,
            program=self.program,
        )
        for option in self.options:
            parser.add_option(
                option.directives, option.name, option.kind, option.nargs, option.help
            )
        for argument in self.arguments:
            parser.add_argument(argument.name, argument.kind, argument.nargs, argument.help)
        return parser


def _read_config(path: Path) -> Any:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(config_file)
        elif suffix == ".toml":
            return toml.load(config_file)
    raise ConfigError(f"Unsupported config format: {suffix}")


def loader(file_path: Path | str, argv: Sequence[str] | None = None) -> ArgumentParser:
    """
    Load an `ArgumentParser` from a YAML or TOML declaration file.

    Args:
        file_path (Path | str): Path to the declaration file.
        argv (Sequence[str] | None): Program name and tokens handed to the
            parser. Defaults to `sys.argv`.

    Returns:
        ArgumentParser: A parser with every declared argument registered.

    Raises:
        ConfigError: If the file is missing, malformed, or declares arguments
            the parser rejects.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    try:
        raw_config = _read_config(path)
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse {path}: {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Declaration file must contain a mapping.\n"
            "Example:\n"
            "description: 'My program'\n"
            "arguments:\n"
            "  - name: 'file'\n"
            "    kind: 'string'"
        )

    try:
        config = ParserConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid declaration file {path}:\n{error}") from error

    try:
        parser = config.to_parser(argv)
    except RegistrationError as error:
        raise ConfigError(f"Invalid declaration in {path}: {error}") from error
    logger.debug("Loaded %s from %s", parser, path)
    return parser


def find_config() -> Path | None:
    """Return the first declaration file found for the current directory, if any."""
    candidates = [
        Path.cwd() / "argwise.yaml",
        Path.cwd() / "argwise.yml",
        Path.cwd() / "argwise.toml",
    ]
    if os.environ.get("ARGWISE_CONFIG"):
        candidates.insert(0, Path(os.environ["ARGWISE_CONFIG"]))
    return next((path for path in candidates if path.is_file()), None)


__all__ = [
    "ParserConfig",
    "RawArgument",
    "RawOption",
    "find_config",
    "loader",
]
