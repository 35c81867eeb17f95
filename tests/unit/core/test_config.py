"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import SeqpipeConfig, parse_log_level
from core.constants import DEFAULT_LOG_LEVEL, DEFAULT_WALKTHROUGH_PREFIX
from core.errors import SeqpipeConfigError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to defaults when variables are unset."""
    monkeypatch.delenv("SEQPIPE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SEQPIPE_WALKTHROUGH_PREFIX", raising=False)

    config = SeqpipeConfig.from_env()

    assert config.log_level == DEFAULT_LOG_LEVEL
    assert config.walkthrough_prefix == DEFAULT_WALKTHROUGH_PREFIX


def test_from_env_normalizes_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should accept lower-case level names."""
    monkeypatch.setenv("SEQPIPE_LOG_LEVEL", " debug ")
    monkeypatch.setenv("SEQPIPE_WALKTHROUGH_PREFIX", "P")

    config = SeqpipeConfig.from_env()

    assert config.log_level == "DEBUG" and config.walkthrough_prefix == "P"


def test_from_env_raises_for_invalid_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unknown level names."""
    monkeypatch.setenv("SEQPIPE_LOG_LEVEL", "chatty")

    with pytest.raises(SeqpipeConfigError, match="SEQPIPE_LOG_LEVEL"):
        SeqpipeConfig.from_env()


def test_parse_log_level_rejects_empty_value() -> None:
    """An empty level name is not a supported level."""
    with pytest.raises(SeqpipeConfigError):
        parse_log_level("")


def test_from_env_override_takes_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """An explicit level should win over an invalid environment value."""
    monkeypatch.setenv("SEQPIPE_LOG_LEVEL", "chatty")

    config = SeqpipeConfig.from_env(log_level="error")

    assert config.log_level == "ERROR"
