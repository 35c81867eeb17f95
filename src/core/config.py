"""Runtime configuration model for Seqpipe.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_WALKTHROUGH_PREFIX,
    LOG_LEVEL_ENV,
    SUPPORTED_LOG_LEVELS,
    WALKTHROUGH_PREFIX_ENV,
)
from core.errors import SeqpipeConfigError


@dataclass(frozen=True)
class SeqpipeConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum level of emitted structured log events.
        walkthrough_prefix: Name prefix used by the walkthrough filter example.
    """

    log_level: str
    walkthrough_prefix: str

    @classmethod
    def from_env(cls, log_level: str | None = None) -> "SeqpipeConfig":
        """Build config from process environment variables.

        Args:
            log_level: Optional level name taking precedence over the
                environment value.

        Returns:
            A validated config object.

        Raises:
            SeqpipeConfigError: If environment values are invalid.
        """
        log_level_value = log_level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
        prefix_value = os.getenv(WALKTHROUGH_PREFIX_ENV, DEFAULT_WALKTHROUGH_PREFIX)
        return cls(
            log_level=parse_log_level(log_level_value),
            walkthrough_prefix=prefix_value,
        )


def parse_log_level(raw_value: str) -> str:
    """Normalize and validate a log level name.

    Args:
        raw_value: Raw level name from environment or CLI.

    Returns:
        Upper-cased supported level name.

    Raises:
        SeqpipeConfigError: If the level is not supported.
    """
    normalized = raw_value.strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        supported = ", ".join(SUPPORTED_LOG_LEVELS)
        raise SeqpipeConfigError(
            f"Invalid {LOG_LEVEL_ENV} value: got '{raw_value}'. "
            f"Choose one of: {supported}."
        )
    return normalized
