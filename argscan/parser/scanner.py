# argscan Token Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `TokenScanner`, which classifies raw input tokens into a trace of
`PositionalToken` and `FlagToken` entries without coercing any values.

The scan is a single left-to-right pass over a queue of remaining tokens,
driven by a `ScanState`:

- `ScanMode.SCANNING_FLAGS`: tokens starting with `-` are matched against the
  declared flags. A bare `--` switches to positional-only mode and is dropped.
- `ScanMode.POSITIONAL_ONLY`: every token is recorded as positional text.
  Entered after `--` or once a `consumes_rest` argument slot is filled.

`ScanState.pending` holds the most recently resolved valued flag. While it is a
`multiple` flag, bare tokens keep feeding it until another flag interrupts.

Tokens may be pushed back onto the queue: the value half of `--name=value`, and
the remainder of a short-flag cluster (`-abc` with boolean `-a` re-queues `-bc`).
"""
from __future__ import annotations

import re
from collections import deque
from typing import Mapping, Sequence

from argscan.exceptions import FlagValueMissingError, UnknownFlagError
from argscan.logger import logger
from argscan.parser.argument import ArgumentSpec
from argscan.parser.flag import FlagSpec
from argscan.parser.parser_types import ClassificationToken, ScanState

NEGATIVE_NUMBER = re.compile(r"^-\d+(\.\d+)?([eE][-+]?\d+)?$")


class TokenScanner:
    """
    Classifies input tokens against a fixed set of declarations.

    The scanner holds only the declarations and lookup tables built from them;
    all per-scan state lives in a `ScanState` created by `scan()`.
    """

    def __init__(
        self,
        arguments: Sequence[ArgumentSpec],
        flags: Mapping[str, FlagSpec],
        strict: bool = True,
        double_dash: bool = True,
    ) -> None:
        self.arguments: tuple[ArgumentSpec, ...] = tuple(arguments)
        self.flags: Mapping[str, FlagSpec] = flags
        self.strict: bool = strict
        self.double_dash: bool = double_dash
        self._short_map: dict[str, FlagSpec] = {
            spec.short: spec for spec in flags.values() if spec.short
        }

    def scan(self, argv: Sequence[str]) -> list[ClassificationToken]:
        """
        Classify `argv` into an ordered trace.

        Raises:
            FlagValueMissingError: A valued flag has no value left to consume.
            UnknownFlagError: In strict mode, a flag-shaped token matched no flag.
        """
        state = ScanState(queue=deque(argv))
        while state.queue:
            token = state.queue.popleft()
            if state.parsing_flags and token.startswith("-"):
                if self.double_dash and token == "--":
                    logger.debug("'--' terminator: remaining tokens are positional")
                    state.stop_flags()
                    continue
                if self._consume_flag(state, token):
                    continue
                if self.strict and self._is_flag_shaped(token):
                    raise UnknownFlagError(token, self._available_flags())
            if state.parsing_flags and state.pending and state.pending.multiple:
                logger.debug("%r continues --%s", token, state.pending.name)
                state.record_flag(state.pending.name, token)
                continue
            slot = state.record_positional(token)
            spec = self.arguments[slot] if slot < len(self.arguments) else None
            logger.debug(
                "%r is positional #%d (%s)", token, slot, spec.name if spec else "overflow"
            )
            if spec and spec.consumes_rest and state.parsing_flags:
                logger.debug("Argument '%s' consumes the rest of the input", spec.name)
                state.stop_flags()
        return state.trace

    def _find_long(self, token: str) -> FlagSpec | None:
        name = token[2:]
        if name in self.flags:
            return self.flags[name]
        if token.startswith("--no-"):
            spec = self.flags.get(token[5:])
            if spec and spec.negated:
                return spec
        return None

    def _find_short(self, token: str) -> FlagSpec | None:
        if len(token) < 2:
            return None
        return self._short_map.get(token[1])

    def _consume_flag(self, state: ScanState, token: str) -> bool:
        """Try to resolve `token` as a flag and record it. Return False if it is not one."""
        is_long = token.startswith("--")
        spec = self._find_long(token) if is_long else self._find_short(token)
        if spec is None:
            head, sep, tail = token.partition("=")
            if not sep:
                return False
            state.queue.appendleft(tail)
            if self._consume_flag(state, head):
                return True
            state.queue.popleft()
            return False

        assert spec.name is not None, "flag names are bound before scanning"
        if spec.is_boolean:
            state.record_flag(spec.name, token)
            state.pending = None
            if not is_long and len(token) > 2:
                rest = token[2:]
                # -f=x mirrors --force=x: the value is left as the next token.
                state.queue.appendleft(rest[1:] if rest[0] == "=" else f"-{rest}")
            logger.debug("%r resolved to boolean --%s", token, spec.name)
            return True

        if is_long or len(token) < 3:
            if not state.queue:
                raise FlagValueMissingError(spec.name)
            value = state.queue.popleft()
        else:
            value = token[3:] if token[2] == "=" else token[2:]
        state.record_flag(spec.name, value)
        state.pending = spec
        logger.debug("%r resolved to --%s=%r", token, spec.name, value)
        return True

    def _is_flag_shaped(self, token: str) -> bool:
        if token in ("-", "--"):
            return False
        return not NEGATIVE_NUMBER.match(token)

    def _available_flags(self) -> list[str]:
        available = []
        for spec in self.flags.values():
            available.extend(spec.display_flags())
        return available
