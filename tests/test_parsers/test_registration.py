import pytest

from argwise import (
    VARIABLE,
    ArgumentParser,
    OptionalArgument,
    PositionalArgument,
    RegistrationError,
    ValueKind,
)


def test_str():
    """Test the string representation of ArgumentParser."""
    parser = ArgumentParser(["prog"])
    assert (
        str(parser)
        == "ArgumentParser(positional=0, optional=1, directives=2, completed=False)"
    )

    parser.add_argument("file")
    parser.add_option(["-c", "--count"], "count", ValueKind.INTEGER, 1)
    parser.add_option("-v", "verbose")
    assert (
        repr(parser)
        == "ArgumentParser(positional=1, optional=3, directives=5, completed=False)"
    )


def test_help_option_registered_by_default():
    parser = ArgumentParser(["prog"])
    (help_option,) = parser.optional
    assert help_option.name == "help"
    assert help_option.directives == ("-h", "--help")
    assert help_option.nargs == 0
    assert help_option.kind is ValueKind.BOOL


def test_help_option_can_be_disabled():
    parser = ArgumentParser(["prog"], add_help=False)
    assert parser.optional == ()


def test_add_argument_returns_specification():
    parser = ArgumentParser(["prog"])
    argument = parser.add_argument("nums", "int", VARIABLE, "Numbers")
    assert isinstance(argument, PositionalArgument)
    assert argument.kind is ValueKind.INTEGER
    assert argument.is_variable
    assert parser.get_argument("nums") is argument


def test_add_option_defaults_to_boolean_switch():
    parser = ArgumentParser(["prog"])
    option = parser.add_option(["-v", "--verbose"], "verbose")
    assert isinstance(option, OptionalArgument)
    assert option.kind is ValueKind.BOOL
    assert option.is_flag
    assert option.directives == ("-v", "--verbose")


def test_single_directive_string():
    parser = ArgumentParser(["prog"])
    option = parser.add_option("--dry-run", "dry_run")
    assert option.directives == ("--dry-run",)


@pytest.mark.parametrize("nargs", [..., "*", "..."])
def test_variable_nargs_aliases(nargs):
    parser = ArgumentParser(["prog"])
    assert parser.add_option("--tags", "tags", ValueKind.STRING, nargs).nargs == VARIABLE
    assert parser.add_argument("rest", ValueKind.STRING, nargs).nargs == VARIABLE


def test_reserved_help_name():
    parser = ArgumentParser(["prog"])
    with pytest.raises(RegistrationError):
        parser.add_argument("help")
    with pytest.raises(RegistrationError):
        parser.add_option("--assist", "help")


def test_reserved_help_name_without_help_option():
    parser = ArgumentParser(["prog"], add_help=False)
    with pytest.raises(RegistrationError):
        parser.add_option(["-h", "--help"], "help")


def test_duplicate_names_rejected_across_kinds():
    parser = ArgumentParser(["prog"])
    parser.add_argument("target")
    with pytest.raises(RegistrationError):
        parser.add_argument("target")
    with pytest.raises(RegistrationError):
        parser.add_option("--target", "target", ValueKind.STRING, 1)

    parser.add_option("-q", "quiet")
    with pytest.raises(RegistrationError):
        parser.add_argument("quiet")


def test_no_positional_after_variable_positional():
    parser = ArgumentParser(["prog"])
    parser.add_argument("name")
    parser.add_argument("nums", ValueKind.INTEGER, VARIABLE)
    with pytest.raises(RegistrationError):
        parser.add_argument("extra")
    assert [p.name for p in parser.positional] == ["name", "nums"]


def test_options_allowed_after_variable_positional():
    parser = ArgumentParser(["prog"])
    parser.add_argument("nums", ValueKind.INTEGER, VARIABLE)
    parser.add_option("-v", "verbose")
    assert [o.name for o in parser.optional] == ["help", "verbose"]


@pytest.mark.parametrize("nargs", [-1, -2, 1.5, "2", "+", True, None])
def test_invalid_nargs(nargs):
    parser = ArgumentParser(["prog"])
    with pytest.raises(RegistrationError):
        parser.add_argument("value", ValueKind.STRING, nargs)
    with pytest.raises(RegistrationError):
        parser.add_option("--value", "value", ValueKind.STRING, nargs)


def test_positional_needs_at_least_one_value():
    parser = ArgumentParser(["prog"])
    with pytest.raises(RegistrationError):
        parser.add_argument("nothing", ValueKind.STRING, 0)


def test_switch_must_be_boolean():
    parser = ArgumentParser(["prog"])
    with pytest.raises(RegistrationError):
        parser.add_option("--level", "level", ValueKind.INTEGER, 0)


def test_invalid_kind():
    parser = ArgumentParser(["prog"])
    with pytest.raises(RegistrationError):
        parser.add_argument("value", "complex")


@pytest.mark.parametrize("directives", [[], "", [""], ["-x", 3], 5])
def test_invalid_directives(directives):
    parser = ArgumentParser(["prog"])
    with pytest.raises(RegistrationError):
        parser.add_option(directives, "value")


@pytest.mark.parametrize("name", ["", "   ", None])
def test_invalid_names(name):
    parser = ArgumentParser(["prog"])
    with pytest.raises(RegistrationError):
        parser.add_argument(name)


def test_failed_registration_has_no_side_effects():
    parser = ArgumentParser(["prog"])
    with pytest.raises(RegistrationError):
        parser.add_option([], "value", ValueKind.STRING, 1)
    assert parser.get_argument("value") is None
    parser.add_option("--value", "value", ValueKind.STRING, 1)
    assert parser.get_argument("value") is not None


def test_shared_directives_allowed():
    parser = ArgumentParser(["prog"])
    parser.add_option(["-x", "--first"], "first")
    parser.add_option(["-x", "--second"], "second")
    assert len(parser.optional) == 3


def test_to_definition_list():
    parser = ArgumentParser(["prog"])
    parser.add_option(["-c", "--count"], "count", ValueKind.INTEGER, 1, "How many")
    parser.add_argument("file", help="Input")
    assert parser.to_definition_list() == [
        {"name": "file", "kind": "string", "nargs": 1, "help": "Input"},
        {
            "directives": ["-c", "--count"],
            "name": "count",
            "kind": "integer",
            "nargs": 1,
            "help": "How many",
        },
    ]
