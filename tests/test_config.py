import logging
from contextlib import contextmanager

import pytest
from pydantic import ValidationError

from argscan import ParserConfig, TokenParser, UnknownFlagError, boolean


def test_defaults():
    config = ParserConfig()
    assert config.strict is True
    assert config.double_dash is True
    assert config.debug is False


def test_frozen_and_no_extra_fields():
    config = ParserConfig()
    with pytest.raises(ValidationError):
        config.strict = False
    with pytest.raises(ValidationError):
        ParserConfig(verbose=True)


def test_from_env():
    environ = {"ARGSCAN_STRICT": "no", "ARGSCAN_DOUBLE_DASH": "0", "OTHER": "1"}
    config = ParserConfig.from_env(environ)
    assert config.strict is False
    assert config.double_dash is False
    assert config.debug is False


def test_from_env_prefix_and_overrides():
    environ = {"APP_STRICT": "false", "APP_DEBUG": "true"}
    config = ParserConfig.from_env(environ, prefix="APP_", debug=False)
    assert config.strict is False
    assert config.debug is False


def test_from_env_rejects_non_boolean():
    with pytest.raises(ValidationError):
        ParserConfig.from_env({"ARGSCAN_STRICT": "sometimes"})


def test_from_env_reads_os_environ(monkeypatch):
    monkeypatch.setenv("ARGSCAN_STRICT", "off")
    assert ParserConfig.from_env().strict is False


@contextmanager
def argscan_level(level):
    logger = logging.getLogger("argscan")
    previous = logger.level
    logger.setLevel(level)
    try:
        yield logger
    finally:
        logger.setLevel(previous)


def argscan_debug_messages(caplog):
    return [
        record.getMessage()
        for record in caplog.records
        if record.name.startswith("argscan") and record.levelno == logging.DEBUG
    ]


def test_debug_logs_during_parse(caplog):
    with argscan_level(logging.WARNING) as logger:
        parser = TokenParser(flags={"force": boolean()}, config=ParserConfig(debug=True))
        assert logger.level == logging.WARNING

        parser.parse(["--force", "x"])

        assert logger.level == logging.WARNING
        messages = argscan_debug_messages(caplog)
        assert "input: --force x" in messages
        assert "available flags: --force" in messages
        assert any("resolved to boolean --force" in message for message in messages)


def test_debug_level_does_not_leak_to_other_parsers(caplog):
    with argscan_level(logging.WARNING) as logger:
        TokenParser(flags={"force": boolean()}, config=ParserConfig(debug=True))
        TokenParser(flags={"force": boolean()}).parse(["--force"])

        assert logger.level == logging.WARNING
        assert argscan_debug_messages(caplog) == []


def test_debug_level_restored_after_parse_error():
    with argscan_level(logging.WARNING) as logger:
        parser = TokenParser(config=ParserConfig(debug=True))
        with pytest.raises(UnknownFlagError):
            parser.parse(["--nope"])
        assert logger.level == logging.WARNING
