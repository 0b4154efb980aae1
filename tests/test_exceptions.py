import pytest

from argscan.exceptions import (
    ArgscanError,
    CoercionError,
    DeclarationError,
    FlagValueMissingError,
    InvalidArgumentOptionError,
    InvalidFlagOptionError,
    MissingRequiredArgumentError,
    ParseError,
    UnexpectedFlagError,
    UnknownFlagError,
)


@pytest.mark.parametrize(
    "error",
    [
        FlagValueMissingError("name"),
        UnknownFlagError("--nope", ["--force"]),
        UnexpectedFlagError("ghost"),
        InvalidFlagOptionError("env", "staging", ["dev", "prod"]),
        InvalidArgumentOptionError("env", "staging", ["dev", "prod"]),
        MissingRequiredArgumentError(["file"]),
        CoercionError("flag", "port", "http", ValueError("bad")),
    ],
)
def test_parse_errors_share_a_base(error):
    assert isinstance(error, ParseError)
    assert isinstance(error, ArgscanError)
    assert not isinstance(error, DeclarationError)


def test_messages():
    assert str(FlagValueMissingError("name")) == "Flag --name expects a value"
    assert str(UnexpectedFlagError("ghost")) == "Unexpected flag ghost"
    assert (
        str(InvalidFlagOptionError("env", "staging", ["dev", "prod"]))
        == "Expected --env=staging to be one of: dev, prod"
    )
    assert str(MissingRequiredArgumentError(["file"])) == "Missing required argument 'file'"
    assert (
        str(MissingRequiredArgumentError(["src", "dest"]))
        == "Missing required arguments 'src', 'dest'"
    )
    assert "No flags are declared" in str(UnknownFlagError("-x"))
    assert "staging" in str(InvalidArgumentOptionError("env", "staging", ["dev"]))


def test_coercion_error_keeps_original():
    original = ValueError("invalid literal")
    error = CoercionError("argument", "count", "many", original)
    assert error.error is original
    assert str(error) == "Invalid value for argument 'count': 'many' (invalid literal)"
