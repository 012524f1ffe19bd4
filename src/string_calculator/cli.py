"""CLI entrypoints for the string calculator."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import orjson
import typer
from rich.console import Console

from .batch.errors import BatchError
from .batch.reader import read_batch_inputs
from .batch.render import describe_fault, render_batch_report
from .batch.service import BatchService
from .parsing.schemas import CalculationResult, Fault
from .parsing.service import add

LOGGER = logging.getLogger(__name__)
STDIN_MARKER = "-"
_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\"}

TYPER_APP = typer.Typer(help="Sum delimited integers with structured fault reporting.")


@TYPER_APP.callback()
def main() -> None:
    """Root CLI callback."""


@TYPER_APP.command("add")
def add_command(
    numbers: str | None = typer.Argument(
        None,
        help="Delimited integers, optionally prefixed by '//<char>\\n'. Reads stdin when omitted or '-'.",
    ),
    escapes: bool = typer.Option(
        False,
        "--escapes/--no-escapes",
        help="Decode '\\n', '\\t' and '\\\\' escapes in the input.",
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the result as a JSON document."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable info-level logging."),
) -> None:
    """Sum the integers in one input string."""
    _configure_logging(verbose)
    text = _read_input(numbers)
    if escapes:
        text = decode_escapes(text)

    result = add(text)
    if json_output:
        typer.echo(orjson.dumps(_result_document(text, result)).decode())
    elif isinstance(result, Fault):
        typer.echo(describe_fault(result))
    else:
        typer.echo(str(result))

    if isinstance(result, Fault):
        raise typer.Exit(code=1)


@TYPER_APP.command("batch")
def batch_command(
    input_file_path: Path = typer.Argument(..., help="JSONL file with one input string per line."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable info-level logging."),
) -> None:
    """Evaluate every input in a JSONL file and print a results table."""
    _configure_logging(verbose)
    if not input_file_path.is_file():
        raise typer.BadParameter(f"Input file not found: {input_file_path}")

    try:
        inputs = read_batch_inputs(input_file_path)
    except (BatchError, OSError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    report = BatchService(inputs).run()
    render_batch_report(report, Console())
    if report.counters.inputs_faulted:
        raise typer.Exit(code=1)


def decode_escapes(text: str) -> str:
    """Decode backslash escapes; unknown escapes are kept verbatim."""
    decoded: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        escaped = _ESCAPES.get(text[index + 1 : index + 2]) if char == "\\" else None
        if escaped is None:
            decoded.append(char)
            index += 1
        else:
            decoded.append(escaped)
            index += 2
    return "".join(decoded)


def _read_input(numbers: str | None) -> str:
    """Return the CLI argument, or stdin without its final newline."""
    if numbers is not None and numbers != STDIN_MARKER:
        return numbers
    text = sys.stdin.read()
    return text[:-1] if text.endswith("\n") else text


def _result_document(text: str, result: CalculationResult) -> dict[str, object]:
    """Build the JSON output document for one evaluation."""
    if isinstance(result, Fault):
        return {"input": text, "ok": False, "fault": result.to_dict()}
    return {"input": text, "ok": True, "total": result}


def _configure_logging(verbose: bool) -> None:
    """Initialize default logging for CLI usage."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="[%(asctime)s][%(levelname)s][%(name)s] %(message)s",
    )
