"""Fold detected faults into a single calculation result."""

from __future__ import annotations

from .schemas import CalculationResult, Fault, Multiple, NegativeNumber, NumberScan


def aggregate(scan: NumberScan) -> CalculationResult:
    """Return the total, the only fault, or a `Multiple` in detection order."""
    faults: list[Fault] = []
    if scan.separator_fault is not None:
        faults.append(scan.separator_fault)
    if scan.negative_numbers:
        faults.append(NegativeNumber(numbers=scan.negative_numbers))

    if not faults:
        return scan.total
    if len(faults) == 1:
        return faults[0]
    return Multiple(faults=tuple(faults))
