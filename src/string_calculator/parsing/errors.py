"""Custom exceptions for callers that prefer raising over fault values."""

from __future__ import annotations

from .schemas import Fault, InvalidSeparator, Multiple, NegativeNumber, TrailingSeparator


class CalculatorError(Exception):
    """Base exception carrying the fault that caused it."""

    def __init__(self, fault: Fault) -> None:
        super().__init__(fault.message)
        self.fault = fault


class TrailingSeparatorError(CalculatorError):
    """Raised when the input ends with an active separator."""


class InvalidSeparatorError(CalculatorError):
    """Raised when the payload uses an unexpected separator or an unparseable token."""


class NegativeNumberError(CalculatorError):
    """Raised when negative numbers are present in the input."""


class MultipleFaultsError(CalculatorError):
    """Raised when more than one fault was detected."""


_ERROR_TYPES: dict[type[Fault], type[CalculatorError]] = {
    TrailingSeparator: TrailingSeparatorError,
    InvalidSeparator: InvalidSeparatorError,
    NegativeNumber: NegativeNumberError,
    Multiple: MultipleFaultsError,
}


def error_for_fault(fault: Fault) -> CalculatorError:
    """Return the exception instance matching a fault value."""
    error_type = _ERROR_TYPES.get(type(fault), CalculatorError)
    return error_type(fault)
