"""Service orchestration for batch evaluation."""

from __future__ import annotations

import logging

from string_calculator.parsing.service import add

from .schemas import BatchCounters, BatchInput, BatchOutcome, BatchReport

LOGGER = logging.getLogger(__name__)


class BatchService:
    """Evaluates batch inputs and tallies outcomes."""

    def __init__(self, inputs: list[BatchInput]) -> None:
        self._inputs = inputs

    def run(self) -> BatchReport:
        """Evaluate every input in order and return outcomes with counters."""
        LOGGER.info("Start evaluating %d batch input(s).", len(self._inputs))
        counters = BatchCounters()
        outcomes: list[BatchOutcome] = []

        for batch_input in self._inputs:
            counters.inputs_scanned += 1
            outcome = BatchOutcome(batch_input=batch_input, result=add(batch_input.text))
            outcomes.append(outcome)

            if outcome.fault is None:
                counters.inputs_succeeded += 1
            else:
                counters.record_fault(outcome.fault)
                LOGGER.debug("Input at line %d faulted: %s", batch_input.line_number, outcome.fault)

        LOGGER.info(
            "Finished evaluating batch: %d succeeded, %d faulted.",
            counters.inputs_succeeded,
            counters.inputs_faulted,
        )
        return BatchReport(outcomes=outcomes, counters=counters)
