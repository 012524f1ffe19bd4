"""Calculator entry points."""

from __future__ import annotations

import logging

from .aggregator import aggregate
from .errors import error_for_fault
from .numbers import scan_numbers
from .schemas import CalculationResult, Fault, TrailingSeparator
from .separators import resolve
from .tokenizer import has_trailing_separator, tokenize

LOGGER = logging.getLogger(__name__)


def add(text: str) -> CalculationResult:
    """Sum the integers in `text`, or return the fault(s) that prevent it.

    Args:
        text: Comma/newline separated integers, optionally preceded by a
            `//<char>\\n` header declaring `<char>` as the only separator.

    Returns:
        The total as an `int`, or a `Fault`. A `Multiple` fault wraps every
        fault detected when there is more than one.
    """
    if not text:
        return 0

    resolved = resolve(text)
    if not resolved.payload:
        LOGGER.debug("Empty payload after separator header.")
        return 0

    tokens = tokenize(resolved.payload, resolved.separators)
    if has_trailing_separator(tokens):
        LOGGER.debug("Trailing separator in %d token(s); skipping number parsing.", len(tokens))
        return TrailingSeparator()

    result = aggregate(scan_numbers(resolved.payload, resolved.separators))
    LOGGER.debug(
        "Evaluated input with %s separators %r: %r",
        "custom" if resolved.custom else "default",
        resolved.separators,
        result,
    )
    return result


def add_or_raise(text: str) -> int:
    """Sum the integers in `text`, raising `CalculatorError` on any fault.

    Raises:
        CalculatorError: The subclass matching the detected fault, with the
            fault value available as `.fault`.
    """
    result = add(text)
    if isinstance(result, Fault):
        raise error_for_fault(result)
    return result
