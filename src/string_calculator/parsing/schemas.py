"""Typed value objects used by the calculator pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Fault:
    """Base class for every diagnostic the pipeline can report."""

    kind = "fault"

    @property
    def message(self) -> str:
        """Return the human-readable message for this fault."""
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of this fault."""
        return {"kind": self.kind, "message": self.message}

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class TrailingSeparator(Fault):
    """Input ends with an active separator."""

    kind = "trailing_separator"

    @property
    def message(self) -> str:
        return "trailing separator in input"


@dataclass(frozen=True)
class InvalidSeparator(Fault):
    """Payload uses a character other than the active separator.

    Attributes:
        expected: The declared separator, or the first default one.
        actual: The offending character found in the payload.
        position: 1-based offset of `actual` within the payload.
    """

    expected: str
    actual: str
    position: int

    kind = "invalid_separator"

    @property
    def message(self) -> str:
        return f"'{self.expected}' expected, but found '{self.actual}' at position {self.position}"

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update(expected=self.expected, actual=self.actual, position=self.position)
        return payload


@dataclass(frozen=True)
class NegativeNumber(Fault):
    """All negative values found in the input, in order of appearance."""

    numbers: tuple[int, ...]

    kind = "negative_number"

    @property
    def message(self) -> str:
        joined = ", ".join(str(number) for number in self.numbers)
        return f"Negative number(s) are not allowed: {joined}"

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["numbers"] = list(self.numbers)
        return payload


@dataclass(frozen=True)
class Multiple(Fault):
    """Two or more faults detected in one evaluation, in detection order."""

    faults: tuple[Fault, ...]

    kind = "multiple"

    def __post_init__(self) -> None:
        if len(self.faults) < 2:
            raise ValueError(f"Multiple requires at least two faults, got {len(self.faults)}.")
        if any(isinstance(fault, Multiple) for fault in self.faults):
            raise ValueError("Multiple faults cannot be nested.")

    @property
    def message(self) -> str:
        return "multiple errors"

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["faults"] = [fault.to_dict() for fault in self.faults]
        return payload


CalculationResult = int | Fault


@dataclass(frozen=True)
class ResolvedInput:
    """Separator resolution output for one input string."""

    payload: str
    separators: tuple[str, ...]
    custom: bool = False


@dataclass(frozen=True)
class NumberScan:
    """Number parser output consumed by the fault aggregator."""

    total: int
    negative_numbers: tuple[int, ...] = field(default_factory=tuple)
    separator_fault: InvalidSeparator | None = None
