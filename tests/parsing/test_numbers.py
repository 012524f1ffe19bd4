"""Tests for number parsing and fault aggregation."""

from __future__ import annotations

import pytest

from string_calculator.parsing.aggregator import aggregate
from string_calculator.parsing.numbers import INT32_MIN, parse_token, scan_numbers
from string_calculator.parsing.schemas import InvalidSeparator, Multiple, NegativeNumber, NumberScan
from string_calculator.parsing.separators import DEFAULT_SEPARATORS


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("42", 42),
        ("-7", -7),
        ("+3", 3),
        ("-2147483648", INT32_MIN),
        ("", None),
        ("-", None),
        (" 1", None),
        ("1_000", None),
        ("1.5", None),
        ("2147483648", None),
        ("٣", None),
    ],
)
def test_parse_token(token: str, expected: int | None) -> None:
    """Only ASCII signed integers within 32 bits parse."""
    assert parse_token(token) == expected


def test_scan_numbers_splits_totals_and_negatives() -> None:
    """Non-negatives are summed and negatives collected in order."""
    scan = scan_numbers("1,-2,3,-4", DEFAULT_SEPARATORS)

    assert scan == NumberScan(total=4, negative_numbers=(-2, -4))


def test_scan_numbers_rescans_negatives_on_default_separators() -> None:
    """A wrong custom separator still lets negatives be found via defaults."""
    scan = scan_numbers("1|2,-3", ("|",))

    assert scan.negative_numbers == (-3,)
    assert scan.separator_fault == InvalidSeparator(expected="|", actual=",", position=4)


def test_scan_numbers_merges_rescanned_negatives_in_input_order() -> None:
    """Rescanned negatives are placed where their failing token sits."""
    scan = scan_numbers("-1|2,-3|-4", ("|",))

    assert scan.negative_numbers == (-1, -3, -4)
    assert scan.total == 0


def test_scan_numbers_treats_token_sign_as_numeric() -> None:
    """A sign opening a token is not reported as the offending character."""
    scan = scan_numbers("-1;2", DEFAULT_SEPARATORS)

    assert scan.separator_fault == InvalidSeparator(expected=",", actual=";", position=3)


def test_scan_numbers_reports_interior_sign() -> None:
    """A sign in the middle of a token is the offending character."""
    scan = scan_numbers("5-3", DEFAULT_SEPARATORS)

    assert scan.separator_fault == InvalidSeparator(expected=",", actual="-", position=2)


def test_scan_numbers_points_at_leading_empty_token() -> None:
    """A leading empty token points at the first separator."""
    scan = scan_numbers(",1", DEFAULT_SEPARATORS)

    assert scan.separator_fault == InvalidSeparator(expected=",", actual=",", position=1)


def test_aggregate_returns_total_without_faults() -> None:
    """No faults yields the total."""
    assert aggregate(NumberScan(total=9)) == 9


def test_aggregate_unwraps_single_fault() -> None:
    """A single fault is returned as-is."""
    assert aggregate(NumberScan(total=0, negative_numbers=(-1,))) == NegativeNumber(numbers=(-1,))


def test_aggregate_orders_multiple_faults() -> None:
    """Invalid separator is listed before negative numbers."""
    separator_fault = InvalidSeparator(expected=",", actual="x", position=2)

    result = aggregate(NumberScan(total=0, negative_numbers=(-5,), separator_fault=separator_fault))

    assert isinstance(result, Multiple)
    assert result.faults == (separator_fault, NegativeNumber(numbers=(-5,)))
