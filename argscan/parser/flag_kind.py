# argscan Token Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagKind`, the enum separating presence-only flags from flags that
take a value.

Supports alias coercion so declarations can be written with short or
config-friendly names.

Example:
    FlagKind("boolean") → FlagKind.BOOLEAN
    FlagKind("bool")    → FlagKind.BOOLEAN (via alias)
    FlagKind("option")  → FlagKind.VALUED (via alias)
"""
from __future__ import annotations

from enum import Enum


class FlagKind(Enum):
    """
    Defines how a flag consumes input.

    Members:
        BOOLEAN: Presence sets the flag to True (`--no-<name>` sets False when allowed).
        VALUED: The flag takes a value, inline (`--name=value`, `-nvalue`) or from
            the next token.

    Aliases:
        - "bool", "switch" → "boolean"
        - "option", "string", "value" → "valued"
    """

    BOOLEAN = "boolean"
    VALUED = "valued"

    @classmethod
    def choices(cls) -> list[FlagKind]:
        """Return a list of all flag kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "bool": "boolean",
            "switch": "boolean",
            "option": "valued",
            "string": "valued",
            "value": "valued",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> FlagKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the flag kind."""
        return self.value
