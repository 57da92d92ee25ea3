"""Unit tests for TAMI CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cli.main import main
from market_fixtures import fixture_path

_NOW = "2024-06-15T12:00:00+00:00"


def test_cli_compute_prints_tami_and_index_value(capsys) -> None:
    """Compute command should print key=value result lines."""
    exit_code = main(["compute", str(fixture_path("market_history.jsonl")), "--now", _NOW])
    lines = capsys.readouterr().out.splitlines()
    values = dict(line.split("=", 1) for line in lines)

    assert exit_code == 0
    assert float(values["tami"]) == pytest.approx(1832.411067193676)
    assert float(values["index_value"]) == pytest.approx(746.3414634146342)
    assert (values["asset_count"], values["transaction_count"]) == ("2", "4")


def test_cli_compute_reads_reference_time_from_env(monkeypatch, capsys) -> None:
    """TAMI_REFERENCE_TIME should apply when --now is omitted."""
    monkeypatch.setenv("TAMI_REFERENCE_TIME", _NOW)

    exit_code = main(["compute", str(fixture_path("market_history.csv"))])
    output = capsys.readouterr().out

    assert exit_code == 0 and "asset_count=2" in output


def test_cli_history_prints_one_row_per_retained_transaction(capsys) -> None:
    """History command should print tab-separated rows."""
    exit_code = main(["history", str(fixture_path("market_history.jsonl")), "--now", _NOW])
    rows = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert [row.split("\t")[1] for row in rows] == ["Mars", "Hyacinth", "Hyacinth", "Mars"]


def test_cli_history_writes_json_output(tmp_path: Path, capsys) -> None:
    """History command should export rows when --output is given."""
    output_path = tmp_path / "out" / "history.json"

    exit_code = main(
        [
            "history",
            str(fixture_path("market_history.jsonl")),
            "--now",
            _NOW,
            "--output",
            str(output_path),
        ]
    )
    _ = capsys.readouterr()
    rows = json.loads(output_path.read_text(encoding="utf-8"))

    assert exit_code == 0
    assert rows[-1]["asset_id"] == "Mars"
    assert rows[-1]["index_value"] == pytest.approx(746.3414634146342)


def test_cli_ratios_prints_one_row_per_asset(capsys) -> None:
    """Ratios command should list each retained asset once."""
    exit_code = main(["ratios", str(fixture_path("market_history.jsonl")), "--now", _NOW])
    rows = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert sorted(row.split("\t")[0] for row in rows) == ["Hyacinth", "Mars"]


def test_cli_returns_one_for_missing_source(tmp_path: Path, capsys) -> None:
    """Missing sources should print an error line instead of a traceback."""
    exit_code = main(["compute", str(tmp_path / "missing.jsonl"), "--now", _NOW])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("error=")


def test_cli_returns_one_for_negative_price(capsys) -> None:
    """Validation failures should map to exit code one."""
    exit_code = main(["compute", str(fixture_path("negative_price.jsonl")), "--now", _NOW])
    output = capsys.readouterr().out

    assert exit_code == 1 and "negative price" in output


def test_cli_returns_one_for_invalid_now(capsys) -> None:
    """Unparseable --now values are config errors."""
    exit_code = main(["compute", str(fixture_path("market_history.jsonl")), "--now", "soon"])
    output = capsys.readouterr().out

    assert exit_code == 1 and "--now" in output
