# argscan Token Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Introspection helpers for the classification trace of a `ParseResult`.

Functions:
- build_trace_table(result): Returns a `rich.Table` listing every classification.
- print_trace(result): Prints that table to the shared console.
- to_argv(result, flags): Re-serializes a result's occurrences into an argv that
  parses back to the same values.
"""
from __future__ import annotations

from typing import Mapping

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from argscan.console import console
from argscan.exceptions import UnexpectedFlagError
from argscan.parser.flag import FlagSpec
from argscan.parser.parser_types import FlagToken, ParseResult


def build_trace_table(result: ParseResult, title: str = "Token Trace") -> Table:
    """Build a Rich table of the trace, one row per classification token."""
    table = Table(title=title, expand=True, box=box.SIMPLE)
    table.add_column("Index", justify="right", style="dim")
    table.add_column("Kind", style="bold")
    table.add_column("Flag", style="bold cyan")
    table.add_column("Raw", overflow="fold")
    table.add_column("Source", style="dim")

    for index, token in enumerate(result.trace):
        if isinstance(token, FlagToken):
            table.add_row(
                str(index), "flag", f"--{token.flag}", escape(token.raw), "input"
            )
        else:
            table.add_row(str(index), "positional", "", escape(token.raw), "input")

    for name in result.defaulted_flags():
        table.add_row(
            "", "flag", f"--{name}", escape(repr(result.flag_values[name])), "default"
        )
    return table


def print_trace(result: ParseResult, console: Console = console) -> None:
    """Print the trace table for `result`."""
    console.print(build_trace_table(result))


def to_argv(result: ParseResult, flags: Mapping[str, FlagSpec]) -> list[str]:
    """
    Re-serialize the occurrences in `result.trace` into an argv.

    Flags come first in long form, then a `--` terminator and the positional
    text verbatim. Default-filled flags have no occurrence and are left out, so
    re-parsing fills them again. The output assumes the `--` terminator is enabled.

    Raises:
        UnexpectedFlagError: The trace names a flag missing from `flags`.
    """
    argv: list[str] = []
    for token in result.flag_tokens:
        spec = flags.get(token.flag)
        if spec is None:
            raise UnexpectedFlagError(token.flag)
        if spec.is_boolean:
            if token.raw == f"--no-{token.flag}":
                argv.append(token.raw)
            else:
                argv.append(f"--{token.flag}")
        else:
            argv.append(f"--{token.flag}={token.raw}")
    positional = [token.raw for token in result.positional_tokens]
    if positional:
        argv.append("--")
        argv.extend(positional)
    return argv
