# argscan Token Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Parser settings for argscan, optionally read from the environment."""
from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict


class ParserConfig(BaseModel):
    """
    Settings that control how a `TokenParser` scans input.

    Attributes:
        strict (bool): Raise `UnknownFlagError` for flag-shaped tokens that match
            no declared flag. When False they are treated as positional text.
        double_dash (bool): Treat a bare `--` as the end of flag parsing.
        debug (bool): Log every classification decision at DEBUG level while parsing.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict: bool = True
    double_dash: bool = True
    debug: bool = False

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        prefix: str = "ARGSCAN_",
        **overrides: Any,
    ) -> ParserConfig:
        """
        Build a config from `<prefix>STRICT`, `<prefix>DOUBLE_DASH` and `<prefix>DEBUG`.

        Values use pydantic's boolean parsing ("1", "true", "yes", "on", ...).
        Unset variables keep their defaults; keyword overrides win over the environment.

        Raises:
            pydantic.ValidationError: A variable holds something that is not a boolean.
        """
        environ = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for field_name in cls.model_fields:
            raw = environ.get(f"{prefix}{field_name.upper()}")
            if raw is not None:
                values[field_name] = raw
        values.update(overrides)
        return cls(**values)
