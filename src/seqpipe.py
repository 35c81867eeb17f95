"""Public SDK surface for Seqpipe.

This module provides a stable import path for library users.
It re-exports the pipeline type, its constructors and error types.
"""

from __future__ import annotations

from core.config import SeqpipeConfig
from core.errors import (
    DuplicateKeyError,
    PipelineArgumentError,
    PipelineConsumedError,
    PipelineError,
    SeqpipeConfigError,
    SeqpipeError,
)
from core.logging_config import configure_logging
from core.types import Country
from stream.pipeline import Pipeline, from_iterable
from stream.stages import StageKind

__all__ = [
    "Country",
    "DuplicateKeyError",
    "Pipeline",
    "PipelineArgumentError",
    "PipelineConsumedError",
    "PipelineError",
    "SeqpipeConfig",
    "SeqpipeConfigError",
    "SeqpipeError",
    "StageKind",
    "configure_logging",
    "from_iterable",
]
