# argscan Token Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argscan.

Declaration problems are reported when specs are built or handed to a parser.
Parse problems abort the current parse immediately; no partial result is
returned and nothing is retried.

Exception Hierarchy:
- ArgscanError
    ├── DeclarationError
    └── ParseError
        ├── FlagValueMissingError
        ├── UnknownFlagError
        ├── UnexpectedFlagError
        ├── InvalidFlagOptionError
        ├── InvalidArgumentOptionError
        ├── MissingRequiredArgumentError
        └── CoercionError

Every `ParseError` names the flag, argument or token that caused it so the
surrounding command layer can report it without re-parsing.
"""
from __future__ import annotations

from typing import Sequence


class ArgscanError(Exception):
    """Base exception for argscan."""


class DeclarationError(ArgscanError):
    """Raised when an argument or flag declaration is invalid."""


class ParseError(ArgscanError):
    """Base exception for every failure raised while parsing input tokens."""


class FlagValueMissingError(ParseError):
    """Raised when a value-taking flag has neither an inline nor a following value."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Flag --{flag} expects a value")


class UnknownFlagError(ParseError):
    """Raised in strict mode when a flag-shaped token matches no declared flag."""

    def __init__(self, token: str, available: Sequence[str] = ()) -> None:
        self.token = token
        self.available = tuple(available)
        if self.available:
            message = (
                f"Unrecognized option '{token}'. "
                f"Available flags: {', '.join(self.available)}"
            )
        else:
            message = f"Unrecognized option '{token}'. No flags are declared."
        super().__init__(message)


class UnexpectedFlagError(ParseError):
    """Raised when a flag occurrence references a flag that was never declared."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Unexpected flag {flag}")


class InvalidFlagOptionError(ParseError):
    """Raised when a flag value is not one of the flag's declared options."""

    def __init__(self, flag: str, value: str, options: Sequence[str]) -> None:
        self.flag = flag
        self.value = value
        self.options = tuple(options)
        super().__init__(
            f"Expected --{flag}={value} to be one of: {', '.join(self.options)}"
        )


class InvalidArgumentOptionError(ParseError):
    """Raised when a positional value is not one of the argument's declared options."""

    def __init__(self, argument: str, value: str, options: Sequence[str]) -> None:
        self.argument = argument
        self.value = value
        self.options = tuple(options)
        super().__init__(
            f"Expected {value} to be one of: {', '.join(self.options)} "
            f"(argument '{argument}')"
        )


class MissingRequiredArgumentError(ParseError):
    """
    Raised when required positional arguments received no token.

    `argument` is the first missing name; `missing` lists every missing name
    in declaration order.
    """

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = tuple(missing)
        self.argument = self.missing[0]
        if len(self.missing) == 1:
            message = f"Missing required argument '{self.argument}'"
        else:
            names = ", ".join(f"'{name}'" for name in self.missing)
            message = f"Missing required arguments {names}"
        super().__init__(message)


class CoercionError(ParseError):
    """
    Raised when a declared coercion function fails on raw input.

    The original exception is available as `error` and is chained as the
    `__cause__` of this exception.
    """

    def __init__(self, kind: str, name: str, value: str, error: Exception) -> None:
        self.kind = kind
        self.name = name
        self.value = value
        self.error = error
        target = f"--{name}" if kind == "flag" else f"'{name}'"
        super().__init__(f"Invalid value for {kind} {target}: {value!r} ({error})")
