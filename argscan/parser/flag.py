# argscan Token Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `FlagSpec` dataclass and the builders used to declare flags.

A flag is matched in input as `--<name>` or, when a short alias is declared,
as `-<short>`. Boolean flags record presence (and `--no-<name>` when negation
is allowed). Valued flags take a value inline (`--name=value`, `-nvalue`,
`-n=value`) or from the next token, and may accumulate repeated occurrences.

Flags are usually declared in a mapping keyed by name:

    flags = {
        "force": boolean(short="f"),
        "tag": option(short="t", multiple=True),
        "retries": integer(default=3, env_var="APP_RETRIES"),
    }

The parser binds each key onto a copy of its spec; specs themselves are frozen
and never mutated, so one declaration set can be shared by concurrent parses.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from argscan.exceptions import DeclarationError
from argscan.parser.argument import normalize_options
from argscan.parser.flag_kind import FlagKind
from argscan.parser.parser_types import Default
from argscan.parser.utils import coercer


@dataclass(frozen=True)
class FlagSpec:
    """
    Represents a flag.

    Attributes:
        name (str | None): Canonical name, matched as `--<name>`. May be left unset
            when the flag is declared under a mapping key.
        short (str | None): Single-character alias matched as `-<short>`.
        kind (FlagKind): BOOLEAN or VALUED.
        multiple (bool): Valued only. Accumulate occurrences into a list.
        allow_negation (bool): Boolean only. Accept `--no-<name>` as False.
        coerce (Callable | None): Valued: converts the raw text. Boolean: post-processes
            the resolved True/False.
        default (Default | None): Used when the flag is absent from input and environment.
        options (tuple[str, ...] | None): Valued only. Accepted raw values.
        env_var (str | None): Valued only. Environment variable used as a fallback.
        description (str): Free-form description of the flag.
        with_context (bool): Pass the caller's parse context as an extra last
            argument to `coerce` and to a default factory.
    """

    name: str | None = None
    short: str | None = None
    kind: FlagKind = FlagKind.VALUED
    multiple: bool = False
    allow_negation: bool = False
    coerce: Callable[..., Any] | None = None
    default: Default | None = None
    options: tuple[str, ...] | None = None
    env_var: str | None = None
    description: str = ""
    with_context: bool = False

    def __post_init__(self) -> None:
        label = f"flag '{self.name}'" if self.name else "flag"
        if not isinstance(self.kind, FlagKind):
            try:
                object.__setattr__(self, "kind", FlagKind(self.kind))
            except ValueError as error:
                raise DeclarationError(f"Invalid kind for {label}: {error}") from error
        if self.name is not None:
            if not isinstance(self.name, str) or not self.name:
                raise DeclarationError("Flag name must be a non-empty string")
            if self.name.startswith("-"):
                raise DeclarationError(
                    f"Flag name '{self.name}' must not include leading dashes"
                )
            if "=" in self.name or any(char.isspace() for char in self.name):
                raise DeclarationError(
                    f"Flag name '{self.name}' must not contain '=' or whitespace"
                )
        if self.short is not None:
            if (
                not isinstance(self.short, str)
                or len(self.short) != 1
                or self.short in "-="
            ):
                raise DeclarationError(
                    f"Short alias for {label} must be a single character other than '-' or '='"
                )
        if self.coerce is not None and not callable(self.coerce):
            raise DeclarationError(f"coerce for {label} must be callable")
        object.__setattr__(self, "default", Default.of(self.default))
        object.__setattr__(self, "options", normalize_options(self.options, label))
        if self.with_context and self.coerce is None and not (
            self.default is not None and self.default.is_factory
        ):
            raise DeclarationError(
                f"with_context on {label} needs a coerce function or a default factory"
            )

        if self.kind is FlagKind.BOOLEAN:
            if self.multiple:
                raise DeclarationError(f"Boolean {label} cannot accept multiple values")
            if self.options is not None:
                raise DeclarationError(f"options cannot be specified for boolean {label}")
            if self.env_var is not None:
                raise DeclarationError(
                    f"env_var is only supported for valued flags, not boolean {label}"
                )
        elif self.allow_negation:
            raise DeclarationError(f"Only boolean flags can be negated, not {label}")

    @property
    def is_boolean(self) -> bool:
        return self.kind is FlagKind.BOOLEAN

    @property
    def long(self) -> str:
        return f"--{self.name}"

    @property
    def negated(self) -> str | None:
        """The `--no-<name>` form, if this flag accepts it."""
        if self.is_boolean and self.allow_negation:
            return f"--no-{self.name}"
        return None

    def display_flags(self) -> list[str]:
        """Return the input forms this flag matches, long form first."""
        forms = [self.long]
        if self.short:
            forms.append(f"-{self.short}")
        if self.negated:
            forms.append(self.negated)
        return forms


def boolean(
    name: str | None = None,
    *,
    short: str | None = None,
    allow_negation: bool = False,
    coerce: Callable[[bool], Any] | None = None,
    default: Any = None,
    description: str = "",
    with_context: bool = False,
) -> FlagSpec:
    """
    Declare a presence flag.

    Args:
        name (str | None): Canonical name; may come from the declaration key instead.
        short (str | None): Single-character alias.
        allow_negation (bool): Accept `--no-<name>` to force False.
        coerce (Callable | None): Applied to the resolved bool before it is stored.
        default (Any): Static value, factory `(spec, flags) -> value`, or `Default`.
        description (str): Free-form description.
        with_context (bool): Call `coerce` and a default factory with the parse
            context as an extra last argument.
    """
    return FlagSpec(
        name=name,
        short=short,
        kind=FlagKind.BOOLEAN,
        allow_negation=allow_negation,
        coerce=coerce,
        default=default,
        description=description,
        with_context=with_context,
    )


def option(
    name: str | None = None,
    *,
    short: str | None = None,
    type: Any = None,
    coerce: Callable[[str], Any] | None = None,
    multiple: bool = False,
    default: Any = None,
    options: Iterable[str] | None = None,
    env_var: str | None = None,
    description: str = "",
    with_context: bool = False,
) -> FlagSpec:
    """
    Declare a flag that takes a value.

    Either `type` (any type `coerce_value` understands) or an explicit `coerce`
    callable may be given, not both. With `with_context`, `coerce` is called as
    `coerce(raw, context)`, so it cannot be combined with `type`.
    """
    if type is not None and coerce is not None:
        raise DeclarationError("Specify either type or coerce for a flag, not both")
    if type is not None and with_context:
        raise DeclarationError("type coercion does not take a context; pass coerce instead")
    if type is not None:
        coerce = coercer(type)
    return FlagSpec(
        name=name,
        short=short,
        kind=FlagKind.VALUED,
        multiple=multiple,
        coerce=coerce,
        default=default,
        options=options,
        env_var=env_var,
        description=description,
        with_context=with_context,
    )


def integer(
    name: str | None = None,
    *,
    short: str | None = None,
    multiple: bool = False,
    default: Any = None,
    options: Iterable[str] | None = None,
    env_var: str | None = None,
    description: str = "",
) -> FlagSpec:
    """Declare a valued flag coerced with `int`."""
    return option(
        name,
        short=short,
        coerce=int,
        multiple=multiple,
        default=default,
        options=options,
        env_var=env_var,
        description=description,
    )
