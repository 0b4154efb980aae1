"""
argscan Token Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentSpec, arg
from .flag import FlagSpec, boolean, integer, option
from .flag_kind import FlagKind
from .parser_types import (
    ClassificationToken,
    Default,
    FlagMetadata,
    FlagToken,
    ParseResult,
    PositionalToken,
    ScanMode,
    ScanState,
)
from .resolvers import resolve_flags, resolve_positionals
from .scanner import TokenScanner
from .token_parser import TokenParser, parse

__all__ = [
    "ArgumentSpec",
    "arg",
    "FlagSpec",
    "FlagKind",
    "boolean",
    "option",
    "integer",
    "Default",
    "ClassificationToken",
    "PositionalToken",
    "FlagToken",
    "FlagMetadata",
    "ParseResult",
    "ScanMode",
    "ScanState",
    "TokenScanner",
    "TokenParser",
    "parse",
    "resolve_positionals",
    "resolve_flags",
]
