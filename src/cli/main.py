"""Seqpipe CLI entry points.

This module exposes the walkthrough command.
It maps argparse commands onto walkthrough and pipeline calls.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from core.config import SeqpipeConfig
from core.constants import SUPPORTED_LOG_LEVELS
from core.errors import SeqpipeError
from core.logging_config import configure_logging
from core.types import WalkthroughResult
from stream.pipeline import Pipeline
from walkthrough.examples import build_default_options, run_walkthrough


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="seqpipe", description="Seqpipe pipeline CLI")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=SUPPORTED_LOG_LEVELS,
        help="Override SEQPIPE_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_walkthrough_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Seqpipe CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = SeqpipeConfig.from_env(log_level=args.log_level)
        configure_logging(config.log_level)
        if args.command == "walkthrough":
            return _run_walkthrough_command(config, args)
    except SeqpipeError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _add_walkthrough_command(subparsers: Any) -> None:
    """Register walkthrough command arguments."""
    walkthrough_parser = subparsers.add_parser(
        "walkthrough",
        help="Print the results of the example pipelines",
    )
    walkthrough_parser.add_argument(
        "--names",
        help="Comma-separated names replacing the sample country names",
    )
    walkthrough_parser.add_argument(
        "--prefix",
        help="Name prefix for the filter example (default: SEQPIPE_WALKTHROUGH_PREFIX)",
    )


def _run_walkthrough_command(config: SeqpipeConfig, args: argparse.Namespace) -> int:
    """Handle walkthrough command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    names = _parse_names(args.names) if args.names is not None else None
    prefix = args.prefix if args.prefix is not None else config.walkthrough_prefix
    options = build_default_options(names=names, prefix=prefix)
    Pipeline.of(run_walkthrough(options)).map(_format_result).for_each(print)
    return 0


def _parse_names(raw_names: str) -> tuple[str, ...]:
    """Split a comma-separated name list, dropping blank entries."""
    return (
        Pipeline.of(raw_names.split(","))
        .map(str.strip)
        .filter(bool)
        .to_array()
    )


def _format_result(result: WalkthroughResult) -> str:
    return f"{result.title}: {result.value}"
