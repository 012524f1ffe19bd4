"""Rich rendering helpers for batch evaluation reports."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from string_calculator.parsing.schemas import Fault, Multiple

from .schemas import BatchCounters, BatchReport

TABLE_ROW_STYLES = ["white", "yellow"]
_CONTROL_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t"})


def render_batch_report(report: BatchReport, console: Console) -> None:
    """Render the per-input results table and the counters summary."""
    if not report.outcomes:
        console.print("No inputs found in the batch file.")
        return

    table = Table(title="Batch Results", show_footer=True, title_justify="left")
    table.add_column("Line", justify="right")
    table.add_column("Input", justify="left")
    table.add_column("Total", justify="right", footer_style="bold")
    table.add_column("Fault", justify="left")

    grand_total = 0
    for index, outcome in enumerate(report.outcomes):
        style = TABLE_ROW_STYLES[index % len(TABLE_ROW_STYLES)]
        total = outcome.total
        if total is not None:
            grand_total += total
        table.add_row(
            str(outcome.batch_input.line_number),
            Text(_display_input(outcome.batch_input.text)),
            "" if total is None else f"{total:,}",
            Text("" if outcome.fault is None else describe_fault(outcome.fault)),
            style=style,
        )

    table.columns[2].footer = f"{grand_total:,}"
    console.print(table)
    console.print("\n")
    _print_counters(report.counters, console)


def describe_fault(fault: Fault) -> str:
    """Return a fault message, expanding nested faults one per line."""
    if isinstance(fault, Multiple):
        return "\n".join([fault.message, *(f"  - {nested.message}" for nested in fault.faults)])
    return fault.message


def _display_input(text: str) -> str:
    """Escape control characters so each input stays on one table row."""
    return text.translate(_CONTROL_ESCAPES)


def _print_counters(counters: BatchCounters, console: Console) -> None:
    """Print batch counters to the console."""
    summary_lines = [
        f"inputs_scanned={counters.inputs_scanned}",
        f"inputs_succeeded={counters.inputs_succeeded}",
        f"inputs_faulted={counters.inputs_faulted}",
    ]
    summary_lines.extend(f"faults_{kind}={count}" for kind, count in sorted(counters.faults_by_kind.items()))
    for line in summary_lines:
        console.print(line, markup=False, highlight=False)
