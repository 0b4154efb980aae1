# argscan Token Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value types and scanner state shared by the argscan parsing engine.

Contents:
- `Default`: A tagged "static value or producer" used for argument and flag defaults.
- `PositionalToken` / `FlagToken`: The two classification tokens recorded in a trace.
- `ScanMode` / `ScanState`: The explicit state machine driven by `TokenScanner`.
- `FlagMetadata`: Per-flag provenance recorded in a `ParseResult`.
- `ParseResult`: The structured output of a single parse.

Everything here is built fresh for each parse call; nothing is shared between calls.
"""
from __future__ import annotations

from collections import deque
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Literal, Union

if TYPE_CHECKING:
    from argscan.parser.flag import FlagSpec


@dataclass(frozen=True)
class Default:
    """
    A default value, either static or produced on demand.

    Static values are deep-copied on every resolution so mutable defaults
    (lists, dicts) are never shared between parses. Factories receive whatever
    context the caller passes to `resolve()`: nothing for positional arguments,
    `(spec, resolved_flags)` for flags, plus the parse context for flags
    declared `with_context`.
    """

    value: Any = None
    factory: Callable[..., Any] | None = None

    @classmethod
    def of(cls, default: Any) -> Default | None:
        """Wrap a plain default: callables become factories, anything else a value."""
        if default is None or isinstance(default, Default):
            return default
        if callable(default):
            return cls(factory=default)
        return cls(value=default)

    @property
    def is_factory(self) -> bool:
        return self.factory is not None

    def resolve(self, *context: Any) -> Any:
        """Return the default, invoking the factory with `context` if there is one."""
        if self.factory is not None:
            return self.factory(*context)
        return deepcopy(self.value)


@dataclass(frozen=True)
class PositionalToken:
    """A token classified as positional input."""

    raw: str
    kind: Literal["positional"] = field(default="positional", init=False)


@dataclass(frozen=True)
class FlagToken:
    """
    A single flag occurrence.

    For valued flags `raw` is the value text. For boolean flags it is the literal
    token that matched, so `--no-<name>` can be told apart from `--<name>`.
    """

    flag: str
    raw: str
    kind: Literal["flag"] = field(default="flag", init=False)


ClassificationToken = Union[PositionalToken, FlagToken]


class ScanMode(Enum):
    """Whether the scanner still recognizes flags."""

    SCANNING_FLAGS = "scanning_flags"
    POSITIONAL_ONLY = "positional_only"

    def __str__(self) -> str:
        return self.value


@dataclass
class ScanState:
    """Mutable state for one scan; discarded when the scan returns."""

    queue: deque[str]
    mode: ScanMode = ScanMode.SCANNING_FLAGS
    pending: FlagSpec | None = None
    trace: list[ClassificationToken] = field(default_factory=list)
    positional_count: int = 0

    @property
    def parsing_flags(self) -> bool:
        return self.mode is ScanMode.SCANNING_FLAGS

    def stop_flags(self) -> None:
        """Switch to positional-only scanning for the rest of the input."""
        self.mode = ScanMode.POSITIONAL_ONLY
        self.pending = None

    def record_flag(self, flag: str, raw: str) -> None:
        self.trace.append(FlagToken(flag=flag, raw=raw))

    def record_positional(self, raw: str) -> int:
        """Record a positional token and return the slot index it fills."""
        slot = self.positional_count
        self.trace.append(PositionalToken(raw=raw))
        self.positional_count += 1
        return slot


@dataclass(frozen=True)
class FlagMetadata:
    """Provenance of a resolved flag value."""

    sourced_from_default: bool = False


@dataclass(frozen=True)
class ParseResult:
    """
    The structured result of a parse.

    Attributes:
        positional_values (dict[str, Any]): Coerced values of declared positional
            arguments, in declaration order.
        flag_values (dict[str, Any]): Resolved flag values. Multi-value flags hold
            a list in occurrence order.
        remaining_tokens (list[str]): Raw text of every positional token,
            including tokens beyond the declared arguments.
        trace (tuple[ClassificationToken, ...]): Every classification in input order.
        metadata (dict[str, FlagMetadata]): Provenance for each resolved flag.
    """

    positional_values: dict[str, Any]
    flag_values: dict[str, Any]
    remaining_tokens: list[str]
    trace: tuple[ClassificationToken, ...]
    metadata: dict[str, FlagMetadata]

    @property
    def positional_tokens(self) -> list[PositionalToken]:
        return [token for token in self.trace if isinstance(token, PositionalToken)]

    @property
    def flag_tokens(self) -> list[FlagToken]:
        return [token for token in self.trace if isinstance(token, FlagToken)]

    def defaulted_flags(self) -> list[str]:
        """Return the names of flags whose value came from a default."""
        return [
            name for name, meta in self.metadata.items() if meta.sourced_from_default
        ]

    def as_dict(self) -> dict[str, Any]:
        """Merge positional and flag values into one mapping (flags win on clashes)."""
        return {**self.positional_values, **self.flag_values}
