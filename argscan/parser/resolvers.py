# argscan Token Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Resolution passes run over a classification trace.

- `resolve_positionals`: assigns positional tokens to `ArgumentSpec` slots in
  declaration order, checks options, coerces, and applies defaults.
- `resolve_flags`: folds flag occurrences into values, then fills the gaps from
  the environment and from defaults, recording which flags were defaulted.

Both passes raise on the first problem they hit (missing required arguments are
collected across all slots first and reported together).
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence

from argscan.exceptions import (
    CoercionError,
    InvalidArgumentOptionError,
    InvalidFlagOptionError,
    MissingRequiredArgumentError,
    UnexpectedFlagError,
)
from argscan.parser.argument import ArgumentSpec
from argscan.parser.flag import FlagSpec
from argscan.parser.parser_types import (
    ClassificationToken,
    FlagMetadata,
    FlagToken,
    PositionalToken,
)


def _coerce(
    kind: str, name: str, coerce: Callable[..., Any], raw: Any, *extra: Any
) -> Any:
    try:
        return coerce(raw, *extra)
    except Exception as error:
        raise CoercionError(kind, name, str(raw), error) from error


def resolve_positionals(
    trace: Sequence[ClassificationToken],
    arguments: Sequence[ArgumentSpec],
) -> tuple[dict[str, Any], list[str]]:
    """
    Assign positional tokens to declared arguments.

    Returns:
        tuple[dict[str, Any], list[str]]: The resolved values keyed by argument
        name (declaration order) and the raw text of every positional token.

    Raises:
        InvalidArgumentOptionError: A token is not in its argument's options.
        CoercionError: An argument's `coerce` raised.
        MissingRequiredArgumentError: Required arguments received no token.
    """
    tokens = [token.raw for token in trace if isinstance(token, PositionalToken)]
    values: dict[str, Any] = {}
    missing: list[str] = []
    for index in range(max(len(arguments), len(tokens))):
        spec = arguments[index] if index < len(arguments) else None
        if spec is None:
            continue
        if index < len(tokens):
            raw = tokens[index]
            if spec.options is not None and raw not in spec.options:
                raise InvalidArgumentOptionError(spec.name, raw, spec.options)
            values[spec.name] = _coerce("argument", spec.name, spec.coerce, raw)
        elif spec.has_default:
            values[spec.name] = spec.default.resolve()
        elif spec.required:
            missing.append(spec.name)
    if missing:
        raise MissingRequiredArgumentError(missing)
    return values, tokens


def resolve_flags(
    trace: Sequence[ClassificationToken],
    flags: Mapping[str, FlagSpec],
    environ: Mapping[str, str],
    context: Any = None,
) -> tuple[dict[str, Any], dict[str, FlagMetadata]]:
    """
    Fold flag occurrences into values, then apply environment and defaults.

    Default factories are called as `factory(spec, resolved)` where `resolved` is
    a read-only view of the flags resolved so far. Flags declared
    `with_context` also receive `context` as an extra last argument, both in
    their factory and in `coerce`.

    Returns:
        tuple[dict[str, Any], dict[str, FlagMetadata]]: Flag values and their
        provenance. Flags with no occurrence, environment value, or default are
        absent from both.

    Raises:
        UnexpectedFlagError: An occurrence names a flag that is not declared.
        InvalidFlagOptionError: A value is not in the flag's options.
        CoercionError: A flag's `coerce` raised.
    """
    values: dict[str, Any] = {}
    metadata: dict[str, FlagMetadata] = {}

    for token in trace:
        if not isinstance(token, FlagToken):
            continue
        spec = flags.get(token.flag)
        if spec is None:
            raise UnexpectedFlagError(token.flag)
        if spec.is_boolean:
            value: Any = token.raw != f"--no-{token.flag}"
            if spec.coerce is not None:
                value = _coerce(
                    "flag", token.flag, spec.coerce, value, *_extra(spec, context)
                )
            values[token.flag] = value
        else:
            value = _resolve_flag_value(spec, token.flag, token.raw, context)
            if spec.multiple:
                values.setdefault(token.flag, []).append(value)
            else:
                values[token.flag] = value
        metadata[token.flag] = FlagMetadata(sourced_from_default=False)

    for name, spec in flags.items():
        if name in values:
            continue
        if spec.env_var:
            raw = environ.get(spec.env_var)
            if raw:
                value = _resolve_flag_value(spec, name, raw, context)
                values[name] = [value] if spec.multiple else value
                metadata[name] = FlagMetadata(sourced_from_default=False)
                continue
        if spec.default is not None:
            values[name] = spec.default.resolve(
                spec, MappingProxyType(values), *_extra(spec, context)
            )
            metadata[name] = FlagMetadata(sourced_from_default=True)

    return values, metadata


def _extra(spec: FlagSpec, context: Any) -> tuple[Any, ...]:
    return (context,) if spec.with_context else ()


def _resolve_flag_value(spec: FlagSpec, name: str, raw: str, context: Any) -> Any:
    if spec.options is not None and raw not in spec.options:
        raise InvalidFlagOptionError(name, raw, spec.options)
    if spec.coerce is None:
        return raw
    return _coerce("flag", name, spec.coerce, raw, *_extra(spec, context))
