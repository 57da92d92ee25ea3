"""History and ratio command wiring for TAMI CLI."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from cli.source_arguments import add_source_arguments
from core.types import IndexValueRecord, TamiResult


def add_history_command(subparsers: Any) -> None:
    """Register history subcommand."""
    parser = subparsers.add_parser(
        "history",
        help="Show the chain index level after each retained transaction",
    )
    add_source_arguments(parser)
    parser.add_argument("--output", help="Optional JSON file to write history rows to")


def add_ratios_command(subparsers: Any) -> None:
    """Register ratios subcommand."""
    parser = subparsers.add_parser(
        "ratios",
        help="Show each asset's last price-to-index ratio",
    )
    add_source_arguments(parser)


def run_history_command(result: TamiResult, args: argparse.Namespace) -> int:
    """Print or export the index history rows."""
    rows = [_history_row(record) for record in result.index_history]
    if args.output:
        output_path = Path(args.output).expanduser()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(rows, indent=2), encoding="utf-8")
        print(f"history_path={output_path}")
        return 0
    for row in rows:
        print(f"{row['timestamp']}\t{row['asset_id']}\t{row['price']}\t{row['index_value']}")
    return 0


def run_ratios_command(result: TamiResult) -> int:
    """Print one row per asset with its last price and ratio."""
    for ratio in result.ratios:
        record = ratio.record
        print(f"{record.asset_id}\t{record.price}\t{record.index_value}\t{ratio.index_ratio}")
    return 0


def _history_row(record: IndexValueRecord) -> dict[str, object]:
    return {
        "timestamp": record.transaction.timestamp.isoformat(),
        "asset_id": record.asset_id,
        "price": record.price,
        "index_value": record.index_value,
    }
