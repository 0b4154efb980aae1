"""
argscan Token Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .config import ParserConfig
from .exceptions import (
    ArgscanError,
    CoercionError,
    DeclarationError,
    FlagValueMissingError,
    InvalidArgumentOptionError,
    InvalidFlagOptionError,
    MissingRequiredArgumentError,
    ParseError,
    UnexpectedFlagError,
    UnknownFlagError,
)
from .parser import (
    ArgumentSpec,
    FlagKind,
    FlagSpec,
    ParseResult,
    TokenParser,
    arg,
    boolean,
    integer,
    option,
    parse,
)

logger = logging.getLogger("argscan")


__all__ = [
    "TokenParser",
    "parse",
    "ParseResult",
    "ParserConfig",
    "ArgumentSpec",
    "FlagSpec",
    "FlagKind",
    "arg",
    "boolean",
    "option",
    "integer",
    "ArgscanError",
    "DeclarationError",
    "ParseError",
    "FlagValueMissingError",
    "UnknownFlagError",
    "UnexpectedFlagError",
    "InvalidFlagOptionError",
    "InvalidArgumentOptionError",
    "MissingRequiredArgumentError",
    "CoercionError",
]
