from pathlib import Path

import pytest

from argwise import ArgumentParser, ConfigError, RegistrationError, ValueKind
from argwise.config import ParserConfig, RawOption, find_config, loader

YAML_CONFIG = """\
description: Summarize a report.
options:
  - directives: ["-v", "--verbose"]
    name: verbose
    help: Print every section.
  - directives: ["-c", "--count"]
    name: count
    kind: int
    nargs: 1
  - directives: "--tags"
    name: tags
    nargs: "..."
    kind: string
arguments:
  - name: file
    help: Report to read.
"""

TOML_CONFIG = """\
description = "Summarize a report."

[[options]]
directives = ["-v", "--verbose"]
name = "verbose"
help = "Print every section."

[[options]]
directives = ["-c", "--count"]
name = "count"
kind = "integer"
nargs = 1

[[options]]
directives = "--tags"
name = "tags"
nargs = "..."
kind = "str"

[[arguments]]
name = "file"
help = "Report to read."
"""


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


@pytest.mark.parametrize(
    "name, content",
    [("argwise.yaml", YAML_CONFIG), ("argwise.yml", YAML_CONFIG), ("argwise.toml", TOML_CONFIG)],
)
def test_loader_builds_parser(tmp_path, name, content):
    path = write(tmp_path, name, content)
    parser = loader(path, ["report", "-c", "3", "data.txt", "--tags", "a", "b"])
    assert isinstance(parser, ArgumentParser)
    assert parser.program == "report"
    assert parser.description == "Summarize a report."
    assert [o.name for o in parser.optional] == ["help", "verbose", "count", "tags"]
    assert parser.get_argument("count").kind is ValueKind.INTEGER
    assert parser.get_argument("tags").nargs == "..."
    assert parser.get_argument("tags").directives == ("--tags",)

    parser.parse()
    assert parser.get("count") == 3
    assert parser.get("file") == "data.txt"
    assert parser.getall("tags") == ["a", "b"]


def test_yaml_and_toml_build_equivalent_parsers(tmp_path):
    from_yaml = loader(write(tmp_path, "a.yaml", YAML_CONFIG), ["prog"])
    from_toml = loader(write(tmp_path, "a.toml", TOML_CONFIG), ["prog"])
    assert from_yaml.to_definition_list() == from_toml.to_definition_list()
    assert from_yaml.format_help() == from_toml.format_help()


def test_loader_accepts_string_path(tmp_path):
    path = write(tmp_path, "argwise.yaml", YAML_CONFIG)
    assert loader(str(path), ["prog"]).get_argument("file") is not None


def test_loader_empty_file(tmp_path):
    parser = loader(write(tmp_path, "empty.yaml", ""), ["prog"])
    assert [o.name for o in parser.optional] == ["help"]
    assert parser.positional == ()


def test_loader_program_and_help_overrides(tmp_path):
    path = write(tmp_path, "argwise.yaml", "program: custom\nadd_help: false\n")
    parser = loader(path, ["prog"])
    assert parser.program == "custom"
    assert parser.optional == ()


def test_loader_round_trips_definition_list(tmp_path):
    parser = loader(write(tmp_path, "argwise.yaml", YAML_CONFIG), ["prog"])
    definitions = parser.to_definition_list()
    config = ParserConfig(
        description=parser.description,
        arguments=[d for d in definitions if "directives" not in d],
        options=[d for d in definitions if "directives" in d],
    )
    assert config.to_parser(["prog"]).format_help() == parser.format_help()


def test_loader_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        loader(tmp_path / "nope.yaml")


def test_loader_bad_path_type():
    with pytest.raises(TypeError):
        loader(42)  # type: ignore[arg-type]


def test_loader_unsupported_format(tmp_path):
    with pytest.raises(ConfigError, match="Unsupported config format"):
        loader(write(tmp_path, "argwise.json", "{}"))


@pytest.mark.parametrize(
    "name, content",
    [
        ("bad.yaml", "options: [\n"),
        ("bad.toml", "[[options]\n"),
        ("list.yaml", "- name: file\n"),
        ("kind.yaml", "arguments:\n  - name: file\n    kind: complex\n"),
        ("nodirectives.yaml", "options:\n  - directives: []\n    name: flag\n"),
        ("noname.yaml", "arguments:\n  - kind: string\n"),
    ],
)
def test_loader_invalid_files(tmp_path, name, content):
    with pytest.raises(ConfigError):
        loader(write(tmp_path, name, content), ["prog"])


@pytest.mark.parametrize(
    "content",
    [
        "arguments:\n  - name: help\n",
        "arguments:\n  - name: file\n  - name: file\n",
        "arguments:\n  - name: file\n    nargs: 0\n",
        "arguments:\n  - name: rest\n    nargs: '...'\n  - name: file\n",
        "options:\n  - directives: --level\n    name: level\n    kind: integer\n",
    ],
)
def test_loader_registration_errors(tmp_path, content):
    with pytest.raises(ConfigError) as exc_info:
        loader(write(tmp_path, "argwise.yaml", content), ["prog"])
    assert isinstance(exc_info.value, RegistrationError)
    assert isinstance(exc_info.value.__cause__, RegistrationError)


def test_raw_option_single_directive():
    option = RawOption(directives="-q", name="quiet")
    assert option.directives == ["-q"]
    assert option.kind == "bool"
    assert option.nargs == 0


def test_find_config_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.delenv("ARGWISE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    assert find_config() is None

    write(tmp_path, "argwise.toml", TOML_CONFIG)
    assert find_config() == tmp_path / "argwise.toml"

    write(tmp_path, "argwise.yaml", YAML_CONFIG)
    assert find_config() == tmp_path / "argwise.yaml"


def test_find_config_environment_first(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write(tmp_path, "argwise.yaml", YAML_CONFIG)
    custom = write(tmp_path, "custom.toml", TOML_CONFIG)
    monkeypatch.setenv("ARGWISE_CONFIG", str(custom))
    assert find_config() == custom


def test_find_config_ignores_missing_environment_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ARGWISE_CONFIG", str(tmp_path / "missing.yaml"))
    assert find_config() is None
