from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from table2json.cli import app


EXAMPLE_INPUT = "*Table1\n@Name Age \nJohn 20  \n"
INVENTORY = Path(__file__).resolve().parents[1] / "examples" / "inventory.txt"


def test_cli_prints_compact_json() -> None:
    runner = CliRunner()

    result = runner.invoke(app, [], input=EXAMPLE_INPUT)

    assert result.exit_code == 0, result.output
    assert result.stdout == '[{"title":"*Table1","values":[{"Name":"John","Age":"20"}]}]\n'


def test_cli_pretty_matches_compact() -> None:
    runner = CliRunner()

    compact = runner.invoke(app, [], input=EXAMPLE_INPUT)
    pretty = runner.invoke(app, ["--pretty"], input=EXAMPLE_INPUT)

    assert pretty.exit_code == 0, pretty.output
    assert '  {\n    "title": "*Table1"' in pretty.stdout
    assert json.loads(pretty.stdout) == json.loads(compact.stdout)


def test_cli_search_reads_input_file() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["--search", "*Stock", "--input", str(INVENTORY)])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "title": "*Stock",
        "values": [
            {"Sku": "A-100", "Item": "Hex bolt", "Qty": "250"},
            {"Sku": "A-101", "Item": "Washer", "Qty": "1200"},
        ],
    }


def test_cli_dumps_every_table_in_file() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["-i", str(INVENTORY)])

    assert result.exit_code == 0, result.output
    tables = json.loads(result.stdout)
    assert [table["title"] for table in tables] == ["*Stock", "*Suppliers"]
    assert tables[1]["values"][0] == {"Code": "S01", "Name": "Acme Fasteners", "Country": "US"}


def test_cli_search_miss_exits_non_zero() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["--search", "*Missing"], input=EXAMPLE_INPUT)

    assert result.exit_code == 1
    assert "Table not found" in result.output


def test_cli_short_row_exits_non_zero(tmp_path: Path) -> None:
    source = tmp_path / "short.txt"
    source.write_text("*T\n@Name Age \nJo\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["--input", str(source)])

    assert result.exit_code == 1
    assert "line 3" in result.output


def test_cli_rejects_missing_input_file(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["--input", str(tmp_path / "absent.txt")])

    assert result.exit_code != 0


LATIN1_INPUT = b"*T\xe9\n@Name Age \nJos\xe9 20  \n"
LATIN1_EXPECTED = [{"title": "*T\ufffd", "values": [{"Name": "Jos\ufffd", "Age": "20"}]}]


def test_cli_accepts_non_utf8_stdin() -> None:
    runner = CliRunner()

    result = runner.invoke(app, [], input=LATIN1_INPUT)

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == LATIN1_EXPECTED


def test_cli_accepts_non_utf8_file(tmp_path: Path) -> None:
    source = tmp_path / "latin1.txt"
    source.write_bytes(LATIN1_INPUT)
    runner = CliRunner()

    result = runner.invoke(app, ["-i", str(source)])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == LATIN1_EXPECTED
