"""TAMI CLI entry points.
This module exposes commands for computing the index from transaction files.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Any, Sequence

from cli.history_command import (
    add_history_command,
    add_ratios_command,
    run_history_command,
    run_ratios_command,
)
from cli.source_arguments import add_source_arguments
from core.config import TamiConfig
from core.errors import TamiConfigError, TamiError
from core.time_windows import parse_instant
from core.types import TamiResult
from ingest.input_reader import read_transactions
from ingest.pipeline import run_tami_pipeline


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="tami", description="Time-adjusted market index CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_compute_command(subparsers)
    add_history_command(subparsers)
    add_ratios_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the TAMI CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        result = _run_pipeline(args)
    except TamiError as error:
        print(f"error={error}")
        return 1
    if args.command == "compute":
        return _run_compute_command(result)
    if args.command == "history":
        return run_history_command(result, args)
    if args.command == "ratios":
        return run_ratios_command(result)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_pipeline(args: argparse.Namespace) -> TamiResult:
    """Load the source and run the pipeline for any subcommand.

    Args:
        args: Parsed CLI args.

    Returns:
        Pipeline result.
    """
    config = _build_config(args.now)
    transactions = read_transactions(args.source)
    return run_tami_pipeline(transactions, config=config)


def _build_config(now: str | None) -> TamiConfig:
    """Build config with optional reference-time override.

    Args:
        now: Optional ISO-8601 override.

    Returns:
        Validated config.
    """
    config = TamiConfig.from_env()
    if not now:
        return config
    try:
        reference_time = parse_instant(now)
    except ValueError as error:
        raise TamiConfigError(
            f"Invalid --now value '{now}': expected ISO-8601 instant."
        ) from error
    return replace(config, reference_time=reference_time)


def _run_compute_command(result: TamiResult) -> int:
    """Handle compute command.

    Args:
        result: Pipeline result.

    Returns:
        Exit code.
    """
    print(f"tami={result.tami}")
    print(f"index_value={result.index_value}")
    print(f"asset_count={len(result.ratios)}")
    print(f"transaction_count={len(result.filtered_transactions)}")
    return 0


def _add_compute_command(subparsers: Any) -> None:
    """Register compute subcommand."""
    parser = subparsers.add_parser("compute", help="Compute the time-adjusted market index")
    add_source_arguments(parser)
