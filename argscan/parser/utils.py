# argscan Token Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion helpers for argscan declarations.

Declarations take a plain `coerce` callable. These helpers build such callables
from Python types, so `option(type=Mode)` or `option(type=int | None)` work
without writing a converter by hand.

Raw flag and argument text always arrives as `str`; every helper either returns
a converted value or raises `ValueError`, which the resolvers wrap in a
`CoercionError` naming the flag or argument.

Functions:
- coerce_bool: Convert flag text to a boolean, rejecting anything unrecognized.
- coerce_enum: Resolve an Enum member from its name (any case) or its value.
- coerce_value: General-purpose coercion to a target type.
- coercer: Build a `coerce` callable for a target type.
"""
import types
from datetime import date, datetime
from enum import Enum, EnumMeta
from typing import Any, Callable, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

TRUE_WORDS = frozenset({"true", "t", "1", "yes", "y", "on"})
FALSE_WORDS = frozenset({"false", "f", "0", "no", "n", "off", ""})


def coerce_bool(value: str | bool) -> bool:
    """
    Convert flag text to a boolean.

    Accepts 'true', 'yes', 'on', '1' and their opposites in any case. An empty
    string is False, which lets `--color=` switch a value off.

    Raises:
        ValueError: The text is not a recognized boolean word.
    """
    if isinstance(value, bool):
        return value
    word = value.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueError(f"'{value}' is not a boolean (expected one of yes/no, true/false, on/off, 1/0)")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Enum:
    """
    Resolve an Enum member from raw text.

    Member names match exactly first, then case-insensitively; member values
    match on their text form, so `Status` with integer values accepts "1".

    Raises:
        ValueError: No member matches.
    """
    if isinstance(value, enum_type):
        return value

    text = str(value)
    if text in enum_type.__members__:
        return enum_type.__members__[text]

    folded = text.casefold()
    for name, member in enum_type.__members__.items():
        if name.casefold() == folded or str(member.value) == text:
            return member

    choices = ", ".join(str(member.value) for member in enum_type)
    raise ValueError(f"'{value}' should be one of {{{choices}}}")


def _coerce_literal(value: str, target_type: Any) -> Any:
    for choice in get_args(target_type):
        if value == choice or value == str(choice):
            return choice
    raise ValueError(f"Value '{value}' is not a valid literal for type {target_type}")


def _coerce_union(value: str, target_type: Any) -> Any:
    members = [member for member in get_args(target_type) if member is not type(None)]
    reasons = []
    for member in members:
        try:
            return coerce_value(value, member)
        except (ValueError, TypeError) as error:
            reasons.append(str(error))
    raise ValueError(
        f"Value '{value}' could not be coerced to any of {tuple(members)}: "
        + "; ".join(reasons)
    )


def _coerce_datetime(value: str, target_type: type) -> datetime | date:
    try:
        parsed = date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise ValueError(
            f"Value '{value}' could not be parsed as a {target_type.__name__}"
        ) from error
    return parsed if target_type is datetime else parsed.date()


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Convert raw text to `target_type`.

    Understands `Literal`, `Union` / `X | Y` (None members are skipped, since raw
    text is never None), `Enum`, `bool`, `datetime` and `date`. Any other type is
    called with the text.

    Raises:
        ValueError: The text cannot be converted.
    """
    origin = get_origin(target_type)

    if origin is Literal:
        return _coerce_literal(value, target_type)
    if isinstance(target_type, types.UnionType) or origin is Union:
        return _coerce_union(value, target_type)
    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)
    if target_type is bool:
        return coerce_bool(value)
    if target_type in (datetime, date):
        return _coerce_datetime(value, target_type)
    return target_type(value)


def coercer(target_type: Any) -> Callable[[str], Any]:
    """
    Build a `coerce` function converting raw text to `target_type`.

    `str` and `Any` return the identity so plain text passes through untouched.
    """
    if target_type is str or target_type is Any:
        return identity

    def coerce(value: str) -> Any:
        return coerce_value(value, target_type)

    coerce.__name__ = f"coerce_{getattr(target_type, '__name__', 'value')}"
    return coerce


def identity(value: Any) -> Any:
    return value
