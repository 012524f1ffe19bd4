"""Typed schemas used by the batch pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

from string_calculator.parsing.schemas import CalculationResult, Fault


@dataclass(frozen=True)
class BatchInput:
    """One calculator input read from a batch file."""

    line_number: int
    text: str


@dataclass(frozen=True)
class BatchOutcome:
    """Evaluation result for one batch input."""

    batch_input: BatchInput
    result: CalculationResult

    @property
    def fault(self) -> Fault | None:
        """Return the fault when the evaluation failed."""
        return self.result if isinstance(self.result, Fault) else None

    @property
    def total(self) -> int | None:
        """Return the total when the evaluation succeeded."""
        return None if isinstance(self.result, Fault) else self.result


@dataclass
class BatchCounters:
    """Batch counters emitted by service.run()."""

    inputs_scanned: int = 0
    inputs_succeeded: int = 0
    inputs_faulted: int = 0
    faults_by_kind: dict[str, int] = field(default_factory=dict)

    def record_fault(self, fault: Fault) -> None:
        """Count a fault under its kind."""
        self.inputs_faulted += 1
        self.faults_by_kind[fault.kind] = self.faults_by_kind.get(fault.kind, 0) + 1


@dataclass(frozen=True)
class BatchReport:
    """Batch output: per-input outcomes in file order plus counters."""

    outcomes: list[BatchOutcome]
    counters: BatchCounters
