"""Seqpipe exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Pipeline misuse and data collisions raise distinct error types.
"""

from __future__ import annotations


class SeqpipeError(Exception):
    """Base exception for all Seqpipe failures."""


class SeqpipeConfigError(SeqpipeError):
    """Raised for invalid runtime configuration."""


class PipelineError(SeqpipeError):
    """Base exception for sequence pipeline failures."""


class PipelineArgumentError(PipelineError):
    """Raised when a pipeline stage or terminal receives an invalid argument."""


class PipelineConsumedError(PipelineError):
    """Raised when an already evaluated pipeline is used again."""


class DuplicateKeyError(PipelineError):
    """Raised when map collection produces the same key twice.

    Attributes:
        key: The colliding key.
        existing_value: Value already stored under the key.
        new_value: Value that would have replaced it.
    """

    def __init__(self, key: object, existing_value: object, new_value: object) -> None:
        self.key = key
        self.existing_value = existing_value
        self.new_value = new_value
        super().__init__(
            f"Duplicate key {key!r}: already mapped to {existing_value!r}, "
            f"attempted {new_value!r}. "
            "Pass merge= to combine colliding values."
        )
