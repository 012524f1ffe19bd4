"""Tests for batch reading, evaluation and rendering."""

from __future__ import annotations

from pathlib import Path

import orjson
import pytest
from rich.console import Console

from string_calculator.batch.errors import BatchInputError
from string_calculator.batch.reader import read_batch_inputs
from string_calculator.batch.render import render_batch_report
from string_calculator.batch.schemas import BatchInput
from string_calculator.batch.service import BatchService
from string_calculator.parsing.schemas import NegativeNumber


def test_read_batch_inputs_accepts_strings_and_objects(tmp_path: Path) -> None:
    """Reader should accept bare strings and `input` objects, skipping blank lines."""
    input_file = tmp_path / "inputs.jsonl"
    _write_jsonl(input_file, ["1,2", {"input": "//;\n1;2"}])
    with input_file.open("ab") as handle:
        handle.write(b"\n")

    inputs = read_batch_inputs(input_file)

    assert inputs == [BatchInput(line_number=1, text="1,2"), BatchInput(line_number=2, text="//;\n1;2")]


def test_read_batch_inputs_fails_on_malformed_json(tmp_path: Path) -> None:
    """Malformed JSON lines should raise BatchInputError with line context."""
    input_file = tmp_path / "inputs.jsonl"
    input_file.write_text('"1,2"\n{broken\n', encoding="utf-8")

    with pytest.raises(BatchInputError, match="line 2"):
        read_batch_inputs(input_file)


def test_read_batch_inputs_rejects_non_string_values(tmp_path: Path) -> None:
    """Numbers and objects without a string `input` are rejected."""
    input_file = tmp_path / "inputs.jsonl"
    _write_jsonl(input_file, [{"input": 3}])

    with pytest.raises(BatchInputError, match="expected str"):
        read_batch_inputs(input_file)


def test_batch_service_counts_outcomes() -> None:
    """Counters should split succeeded and faulted inputs by kind."""
    inputs = [
        BatchInput(line_number=1, text="1,2"),
        BatchInput(line_number=2, text="1,-2"),
        BatchInput(line_number=3, text="1,"),
        BatchInput(line_number=4, text="//|\n1|2,-3"),
    ]

    report = BatchService(inputs).run()

    counters = report.counters
    assert counters.inputs_scanned == 4
    assert counters.inputs_succeeded == 1
    assert counters.inputs_faulted == 3
    assert counters.inputs_succeeded + counters.inputs_faulted == counters.inputs_scanned
    assert counters.faults_by_kind == {"negative_number": 1, "trailing_separator": 1, "multiple": 1}
    assert report.outcomes[0].total == 3
    assert report.outcomes[1].fault == NegativeNumber(numbers=(-2,))


def test_render_batch_report_prints_table_and_counters() -> None:
    """Rendering should show results, nested faults and counter lines."""
    report = BatchService(
        [
            BatchInput(line_number=1, text="4,5"),
            BatchInput(line_number=2, text="//|\n1|2,-3"),
        ]
    ).run()
    console = Console(record=True, width=160)

    render_batch_report(report, console)

    output = console.export_text()
    assert "Batch Results" in output
    assert "//|\\n1|2,-3" in output
    assert "multiple errors" in output
    assert "Negative number(s) are not allowed: -3" in output
    assert "inputs_faulted=1" in output
    assert "faults_multiple=1" in output


def test_render_batch_report_keeps_non_ascii_input() -> None:
    """Only control characters are escaped in the input column."""
    report = BatchService([BatchInput(line_number=1, text="1\t\u00e9")]).run()
    console = Console(record=True, width=160)

    render_batch_report(report, console)

    output = console.export_text()
    assert "1\\t\u00e9" in output
    assert "\\xe9" not in output


def test_render_batch_report_handles_empty_report() -> None:
    """Rendering an empty batch should print a no-data message."""
    console = Console(record=True)

    render_batch_report(BatchService([]).run(), console)

    assert "No inputs found in the batch file." in console.export_text()


def _write_jsonl(path: Path, values: list[object]) -> None:
    """Write JSONL values to disk."""
    with path.open("wb") as handle:
        for value in values:
            handle.write(orjson.dumps(value))
            handle.write(b"\n")
