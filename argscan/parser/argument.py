# argscan Token Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentSpec` dataclass describing one positional argument.

Positional specs are matched to input tokens purely by order: the first
positional token fills the first spec, and so on. Tokens beyond the last spec
are kept as overflow in `ParseResult.remaining_tokens`.

Key Attributes:
- `name`: Key used in `ParseResult.positional_values`
- `required`: Whether the parse fails when no token fills this slot
- `coerce`: Callable converting the raw text into a value
- `default`: `Default` used when no token fills the slot
- `options`: Whitelist of accepted raw text
- `consumes_rest`: Once this slot is filled, every later token is positional

Specs are usually created with `arg()`. Plain defaults are wrapped in `Default`
and options are frozen into a tuple on construction.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from argscan.exceptions import DeclarationError
from argscan.parser.parser_types import Default
from argscan.parser.utils import identity


def normalize_options(options: Iterable[str] | None, owner: str) -> tuple[str, ...] | None:
    """Validate an options whitelist and freeze it into a tuple."""
    if options is None:
        return None
    if isinstance(options, (str, dict)):
        raise DeclarationError(f"options for {owner} must be a list of strings")
    try:
        normalized = tuple(options)
    except TypeError:
        raise DeclarationError(
            f"options for {owner} must be iterable (like list, tuple, or set)"
        ) from None
    for option in normalized:
        if not isinstance(option, str):
            raise DeclarationError(
                f"Invalid option {option!r} for {owner}: options must be strings"
            )
    return normalized


@dataclass(frozen=True)
class ArgumentSpec:
    """
    Represents a positional argument.

    Attributes:
        name (str): Key for the resolved value.
        required (bool): True if the argument must be supplied.
        coerce (Callable[[str], Any]): Converts raw text into the stored value.
        default (Default | None): Used when no token fills the slot.
        options (tuple[str, ...] | None): Accepted raw values, if restricted.
        consumes_rest (bool): Treat every later token as positional once filled.
        description (str): Free-form description of the argument.
    """

    name: str
    required: bool = False
    coerce: Callable[[str], Any] = identity
    default: Default | None = None
    options: tuple[str, ...] | None = None
    consumes_rest: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise DeclarationError("Argument name must be a non-empty string")
        if not callable(self.coerce):
            raise DeclarationError(f"coerce for argument '{self.name}' must be callable")
        object.__setattr__(self, "default", Default.of(self.default))
        object.__setattr__(
            self, "options", normalize_options(self.options, f"argument '{self.name}'")
        )
        if self.required and self.default is not None:
            raise DeclarationError(
                f"Argument '{self.name}' cannot be required and have a default"
            )

    @property
    def has_default(self) -> bool:
        return self.default is not None


def arg(
    name: str,
    *,
    required: bool = False,
    coerce: Callable[[str], Any] | None = None,
    default: Any = None,
    options: Iterable[str] | None = None,
    consumes_rest: bool = False,
    description: str = "",
) -> ArgumentSpec:
    """
    Declare a positional argument.

    Args:
        name (str): Key for the resolved value.
        required (bool): Fail the parse when the argument is absent.
        coerce (Callable | None): Converts raw text; identity when omitted.
        default (Any): Static value, zero-argument callable, or `Default`.
        options (Iterable[str] | None): Accepted raw values.
        consumes_rest (bool): Everything after this slot is positional.
        description (str): Free-form description.
    """
    return ArgumentSpec(
        name=name,
        required=required,
        coerce=coerce or identity,
        default=default,
        options=options,
        consumes_rest=consumes_rest,
        description=description,
    )
