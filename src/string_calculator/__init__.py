"""String calculator: sum delimited integers with structured fault reporting."""

from .parsing import (
    CalculationResult,
    CalculatorError,
    Fault,
    InvalidSeparator,
    Multiple,
    NegativeNumber,
    TrailingSeparator,
    add,
    add_or_raise,
)

__all__ = [
    "CalculationResult",
    "CalculatorError",
    "Fault",
    "InvalidSeparator",
    "Multiple",
    "NegativeNumber",
    "TrailingSeparator",
    "add",
    "add_or_raise",
]
