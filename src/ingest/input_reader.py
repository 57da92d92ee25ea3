"""Transaction source readers.

This module loads sale transactions from local JSONL or CSV files.
It normalizes rows into typed transactions for the index pipeline.
"""

from __future__ import annotations

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Mapping

from core.constants import (
    ASSET_ID_FIELD,
    PRICE_FIELD,
    SUPPORTED_SOURCE_EXTENSIONS,
    TIMESTAMP_FIELD,
    TRANSACTION_FIELDS,
)
from core.errors import TamiIngestError
from core.logging_config import get_logger
from core.time_windows import parse_instant
from core.types import Transaction

_LOGGER = get_logger(__name__)


def read_transactions(source_path: str) -> list[Transaction]:
    """Load transactions from a file or a directory of files.

    Args:
        source_path: JSONL file, CSV file, or directory containing them.

    Returns:
        Transactions in file order; directories are read in sorted order.
        Asset ids are normalized to strings so JSONL and CSV rows agree.

    Raises:
        TamiIngestError: If the source is missing or malformed.
    """
    path = Path(source_path).expanduser()
    if not path.exists():
        raise TamiIngestError(
            f"Failed to read transactions at {path}: path does not exist. "
            "Provide an existing file or directory."
        )
    if path.is_file():
        transactions = _read_file_transactions(path)
    else:
        transactions = _read_directory_transactions(path)
    _LOGGER.info(
        "transactions_loaded",
        source_path=str(path),
        transaction_count=len(transactions),
    )
    return transactions


def _read_directory_transactions(path: Path) -> list[Transaction]:
    """Read every supported file under a directory in sorted path order."""
    transactions: list[Transaction] = []
    matched_files = 0
    for file_path in sorted(path.rglob("*")):
        if file_path.is_file() and _is_supported_file(file_path):
            matched_files += 1
            transactions.extend(_read_file_transactions(file_path))
    if matched_files == 0:
        raise TamiIngestError(
            f"No transaction files found under {path}. "
            f"Supported extensions: {SUPPORTED_SOURCE_EXTENSIONS}."
        )
    return transactions


def _read_file_transactions(file_path: Path) -> list[Transaction]:
    """Dispatch a single file to its format reader."""
    suffix = file_path.suffix.lower()
    if suffix == ".jsonl":
        return _read_jsonl_transactions(file_path)
    if suffix == ".csv":
        return _read_csv_transactions(file_path)
    raise TamiIngestError(
        f"Unsupported transaction file {file_path}. "
        f"Supported extensions: {SUPPORTED_SOURCE_EXTENSIONS}."
    )


def _read_jsonl_transactions(file_path: Path) -> list[Transaction]:
    """Read one transaction per non-blank JSONL line.

    Raises:
        TamiIngestError: If a line is not a JSON object with required fields.
    """
    transactions: list[Transaction] = []
    lines = file_path.read_text(encoding="utf-8").splitlines()
    for line_number, line in enumerate(lines, 1):
        if not line.strip():
            continue
        try:
            payload = json.loads(line)
        except json.JSONDecodeError as error:
            raise TamiIngestError(
                f"Failed to parse JSONL transaction at {file_path}:{line_number}: "
                f"{error.msg}. Fix the JSON syntax and retry."
            ) from error
        if not isinstance(payload, dict):
            raise TamiIngestError(
                f"Invalid JSONL transaction at {file_path}:{line_number}: "
                "expected a JSON object."
            )
        transactions.append(_build_transaction(payload, f"{file_path}:{line_number}"))
    return transactions


def _read_csv_transactions(file_path: Path) -> list[Transaction]:
    """Read transactions from a CSV file with a header row.

    Raises:
        TamiIngestError: If the header lacks required columns or a row is invalid.
    """
    with file_path.open(encoding="utf-8", newline="") as csv_file:
        reader = csv.DictReader(csv_file)
        missing = [name for name in TRANSACTION_FIELDS if name not in (reader.fieldnames or [])]
        if missing:
            raise TamiIngestError(
                f"Invalid CSV header in {file_path}: missing columns {missing}. "
                f"Expected columns {list(TRANSACTION_FIELDS)}."
            )
        return [
            _build_transaction(row, f"{file_path}:{line_number}")
            for line_number, row in enumerate(reader, 2)
        ]


def _build_transaction(payload: Mapping[str, object], location: str) -> Transaction:
    """Validate field presence and types for one source row.

    Args:
        payload: Parsed row fields.
        location: ``path:line`` used in error messages.

    Returns:
        Parsed transaction.

    Raises:
        TamiIngestError: If a field is missing or cannot be parsed.
    """
    asset_id = payload.get(ASSET_ID_FIELD)
    if isinstance(asset_id, bool) or not isinstance(asset_id, (str, int)):
        raise TamiIngestError(
            f"Invalid transaction at {location}: expected string or integer "
            f"field '{ASSET_ID_FIELD}', got {asset_id!r}."
        )
    return Transaction(
        price=_parse_price(payload.get(PRICE_FIELD), location),
        asset_id=str(asset_id),
        timestamp=_parse_timestamp(payload.get(TIMESTAMP_FIELD), location),
    )


def _parse_price(raw_value: object, location: str) -> float:
    if isinstance(raw_value, bool) or not isinstance(raw_value, (str, int, float)):
        raise TamiIngestError(
            f"Invalid transaction at {location}: expected numeric field "
            f"'{PRICE_FIELD}', got {raw_value!r}."
        )
    try:
        return float(raw_value)
    except ValueError as error:
        raise TamiIngestError(
            f"Invalid transaction at {location}: cannot parse "
            f"'{PRICE_FIELD}' value {raw_value!r} as a number."
        ) from error


def _parse_timestamp(raw_value: object, location: str) -> datetime:
    if not isinstance(raw_value, str):
        raise TamiIngestError(
            f"Invalid transaction at {location}: expected ISO-8601 string field "
            f"'{TIMESTAMP_FIELD}', got {raw_value!r}."
        )
    try:
        return parse_instant(raw_value)
    except ValueError as error:
        raise TamiIngestError(
            f"Invalid transaction at {location}: cannot parse "
            f"'{TIMESTAMP_FIELD}' value {raw_value!r} as ISO-8601."
        ) from error


def _is_supported_file(file_path: Path) -> bool:
    return file_path.suffix.lower() in SUPPORTED_SOURCE_EXTENSIONS
