"""Core constants used across Seqpipe modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_WALKTHROUGH_PREFIX = "B"
DEFAULT_JOIN_SEPARATOR = ", "
LOG_LEVEL_ENV = "SEQPIPE_LOG_LEVEL"
WALKTHROUGH_PREFIX_ENV = "SEQPIPE_WALKTHROUGH_PREFIX"
