"""Shared argument registration for source-reading commands."""

from __future__ import annotations

import argparse


def add_source_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the transaction source and reference time arguments."""
    parser.add_argument("source", help="Transaction .jsonl/.csv file or directory")
    parser.add_argument(
        "--now",
        help="Reference ISO-8601 instant; overrides TAMI_REFERENCE_TIME and wall clock",
    )
