# argscan Token Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `TokenParser`, which ties the scanner and the two
resolution passes together into a single parse call.

A parse runs in three steps:
1. `TokenScanner.scan()` classifies the input into an ordered trace.
2. `resolve_positionals()` assigns positional tokens to declared arguments.
3. `resolve_flags()` folds flag occurrences, then fills gaps from the
   environment and defaults.

Declarations are validated and name-bound once, when the parser is built. Flag
specs declared under a mapping key without a name are copied with the key as
their name; the caller's specs are never modified. A parser keeps no state
between calls and may be shared across threads.

Example Usage:
    parser = TokenParser(
        arguments=[arg("name", required=True)],
        flags={"force": boolean(short="f"), "tag": option(multiple=True)},
    )
    result = parser.parse(["alice", "--force", "--tag=a", "--tag", "b"])

    # result.positional_values == {"name": "alice"}
    # result.flag_values == {"force": True, "tag": ["a", "b"]}
"""
from __future__ import annotations

import logging
import os
from dataclasses import replace
from typing import Any, Mapping, Sequence

from argscan.config import ParserConfig
from argscan.exceptions import DeclarationError
from argscan.logger import logger
from argscan.parser.argument import ArgumentSpec
from argscan.parser.flag import FlagSpec
from argscan.parser.parser_types import ParseResult
from argscan.parser.resolvers import resolve_flags, resolve_positionals
from argscan.parser.scanner import TokenScanner


class TokenParser:
    """
    Parses raw argument vectors against a fixed set of declarations.

    Args:
        arguments (Sequence[ArgumentSpec]): Positional arguments, in slot order.
        flags (Mapping[str, FlagSpec] | Sequence[FlagSpec]): Flags keyed by name,
            or a sequence of flags that carry their own names.
        config (ParserConfig | None): Parser settings. Individual `strict` and
            `double_dash` keywords override the config's values.
    """

    def __init__(
        self,
        arguments: Sequence[ArgumentSpec] | None = None,
        flags: Mapping[str, FlagSpec] | Sequence[FlagSpec] | None = None,
        config: ParserConfig | None = None,
        strict: bool | None = None,
        double_dash: bool | None = None,
    ) -> None:
        config = config or ParserConfig()
        overrides: dict[str, Any] = {}
        if strict is not None:
            overrides["strict"] = strict
        if double_dash is not None:
            overrides["double_dash"] = double_dash
        if overrides:
            config = config.model_copy(update=overrides)
        self.config: ParserConfig = config
        self.arguments: tuple[ArgumentSpec, ...] = self._validate_arguments(
            arguments or ()
        )
        self.flags: dict[str, FlagSpec] = self._bind_flags(flags or {})
        self._scanner = TokenScanner(
            self.arguments,
            self.flags,
            strict=self.config.strict,
            double_dash=self.config.double_dash,
        )

    def _validate_arguments(
        self, arguments: Sequence[ArgumentSpec]
    ) -> tuple[ArgumentSpec, ...]:
        arguments = tuple(arguments)
        seen: set[str] = set()
        optional_seen: str | None = None
        for spec in arguments:
            if not isinstance(spec, ArgumentSpec):
                raise DeclarationError(f"Expected an ArgumentSpec, got {spec!r}")
            if spec.name in seen:
                raise DeclarationError(f"Argument '{spec.name}' is already defined")
            seen.add(spec.name)
            if spec.required and optional_seen:
                raise DeclarationError(
                    f"Required argument '{spec.name}' cannot follow optional argument '{optional_seen}'"
                )
            if not spec.required:
                optional_seen = optional_seen or spec.name
        return arguments

    def _bind_flags(
        self, flags: Mapping[str, FlagSpec] | Sequence[FlagSpec]
    ) -> dict[str, FlagSpec]:
        """Return name-bound copies of the flag specs, keyed by name."""
        if isinstance(flags, Mapping):
            items = list(flags.items())
        else:
            items = []
            for spec in flags:
                if not isinstance(spec, FlagSpec) or not spec.name:
                    raise DeclarationError(
                        f"Flags given as a sequence must be named FlagSpecs, got {spec!r}"
                    )
                items.append((spec.name, spec))

        bound: dict[str, FlagSpec] = {}
        shorts: dict[str, str] = {}
        for key, spec in items:
            if not isinstance(spec, FlagSpec):
                raise DeclarationError(f"Expected a FlagSpec for '{key}', got {spec!r}")
            if spec.name is None:
                spec = replace(spec, name=key)
            elif spec.name != key:
                raise DeclarationError(
                    f"Flag declared as '{key}' is named '{spec.name}'"
                )
            if key in bound:
                raise DeclarationError(f"Flag '{key}' is already defined")
            if spec.short:
                if spec.short in shorts:
                    raise DeclarationError(
                        f"Short alias '-{spec.short}' is used by both '{shorts[spec.short]}' and '{key}'"
                    )
                shorts[spec.short] = key
            bound[key] = spec
        return bound

    def parse(
        self,
        argv: Sequence[str],
        environ: Mapping[str, str] | None = None,
        context: Any = None,
    ) -> ParseResult:
        """
        Parse `argv` into a `ParseResult`.

        Args:
            argv (Sequence[str]): Raw input tokens, without the program name.
            environ (Mapping[str, str] | None): Environment used for `env_var`
                fallbacks. Defaults to `os.environ`.
            context (Any): Caller state handed to `coerce` functions and default
                factories of flags declared `with_context`.

        Raises:
            ParseError: Any parse failure; no partial result is produced.
        """
        environ = os.environ if environ is None else environ
        argv = list(argv)
        previous_level = logger.level
        if self.config.debug:
            logger.setLevel(logging.DEBUG)
        try:
            self._debug_input(argv)
            trace = self._scanner.scan(argv)
            positional_values, remaining_tokens = resolve_positionals(
                trace, self.arguments
            )
            flag_values, metadata = resolve_flags(
                trace, self.flags, environ, context
            )
            result = ParseResult(
                positional_values=positional_values,
                flag_values=flag_values,
                remaining_tokens=remaining_tokens,
                trace=tuple(trace),
                metadata=metadata,
            )
            self._debug_output(result)
        finally:
            if self.config.debug:
                logger.setLevel(previous_level)
        return result

    def _debug_input(self, argv: list[str]) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug("input: %s", " ".join(argv))
        if self.arguments:
            logger.debug(
                "available args: %s", " ".join(spec.name for spec in self.arguments)
            )
        if self.flags:
            logger.debug(
                "available flags: %s", " ".join(f"--{name}" for name in self.flags)
            )

    def _debug_output(self, result: ParseResult) -> None:
        if result.remaining_tokens:
            logger.debug("argv: %s", result.remaining_tokens)
        if result.positional_values:
            logger.debug("args: %s", result.positional_values)
        if result.flag_values:
            logger.debug("flags: %s", result.flag_values)

    def __str__(self) -> str:
        required = sum(spec.required for spec in self.arguments)
        return (
            f"TokenParser(args={len(self.arguments)}, flags={len(self.flags)}, "
            f"required={required}, strict={self.config.strict})"
        )

    def __repr__(self) -> str:
        return str(self)


def parse(
    argv: Sequence[str],
    arguments: Sequence[ArgumentSpec] | None = None,
    flags: Mapping[str, FlagSpec] | Sequence[FlagSpec] | None = None,
    strict: bool = True,
    double_dash: bool = True,
    environ: Mapping[str, str] | None = None,
    context: Any = None,
) -> ParseResult:
    """Build a one-off `TokenParser` and parse `argv` with it."""
    parser = TokenParser(
        arguments=arguments, flags=flags, strict=strict, double_dash=double_dash
    )
    return parser.parse(argv, environ=environ, context=context)
