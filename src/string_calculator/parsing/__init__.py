"""Parsing and validation pipeline for delimited integer strings."""

from .errors import (
    CalculatorError,
    InvalidSeparatorError,
    MultipleFaultsError,
    NegativeNumberError,
    TrailingSeparatorError,
)
from .schemas import CalculationResult, Fault, InvalidSeparator, Multiple, NegativeNumber, TrailingSeparator
from .separators import DEFAULT_SEPARATORS
from .service import add, add_or_raise

__all__ = [
    "DEFAULT_SEPARATORS",
    "CalculationResult",
    "CalculatorError",
    "Fault",
    "InvalidSeparator",
    "InvalidSeparatorError",
    "Multiple",
    "MultipleFaultsError",
    "NegativeNumber",
    "NegativeNumberError",
    "TrailingSeparator",
    "TrailingSeparatorError",
    "add",
    "add_or_raise",
]
