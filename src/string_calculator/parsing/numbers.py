"""Number parsing, negative collection and invalid-separator diagnostics."""

from __future__ import annotations

import logging
import re

from .schemas import InvalidSeparator, NumberScan
from .separators import DEFAULT_SEPARATORS
from .tokenizer import iter_tokens

LOGGER = logging.getLogger(__name__)
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_SIGNS = "+-"


def parse_token(token: str) -> int | None:
    """Parse one token as a signed 32-bit integer; return None when it does not parse."""
    if _INTEGER_PATTERN.fullmatch(token) is None:
        return None
    value = int(token)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def scan_numbers(payload: str, separators: tuple[str, ...]) -> NumberScan:
    """Parse every token, summing non-negatives and collecting negatives.

    Unparseable tokens count as zero so that negative detection still covers
    the whole payload. Each unparseable token is rescanned on the default
    separators, since the declared one is presumed wrong, and the negatives
    it hides are kept at that token's place in input order. On any parse
    failure an `InvalidSeparator` fault is attached.
    """
    total = 0
    negative_numbers: list[int] = []
    rescanned_negatives = 0
    first_failure: tuple[int, str] | None = None

    for offset, token in iter_tokens(payload, separators):
        value = parse_token(token)
        if value is None:
            if first_failure is None:
                first_failure = (offset, token)
            hidden_negatives = collect_negative_numbers(token, DEFAULT_SEPARATORS)
            negative_numbers.extend(hidden_negatives)
            rescanned_negatives += len(hidden_negatives)
            continue
        if value < 0:
            negative_numbers.append(value)
        else:
            total += value

    if first_failure is None:
        LOGGER.debug("Parsed payload: total=%d, negatives=%d", total, len(negative_numbers))
        return NumberScan(total=total, negative_numbers=tuple(negative_numbers))

    separator_fault = locate_invalid_separator(payload, separators, first_failure)
    LOGGER.debug(
        "Parse failure in payload: %s (%d negative(s) found on default separators)",
        separator_fault.message,
        rescanned_negatives,
    )
    return NumberScan(
        total=total,
        negative_numbers=tuple(negative_numbers),
        separator_fault=separator_fault,
    )


def collect_negative_numbers(payload: str, separators: tuple[str, ...]) -> list[int]:
    """Return parseable negative values in order, skipping tokens that do not parse."""
    negatives: list[int] = []
    for _, token in iter_tokens(payload, separators):
        value = parse_token(token)
        if value is not None and value < 0:
            negatives.append(value)
    return negatives


def locate_invalid_separator(
    payload: str,
    separators: tuple[str, ...],
    first_failure: tuple[int, str],
) -> InvalidSeparator:
    """Build the fault for the first character that is neither a digit nor a separator.

    A sign that opens a token and is followed by a digit belongs to the
    number. When no such character exists (empty token, out-of-range value),
    the fault points at the first failing token instead.
    """
    # Defaults report their first member, ",".
    expected = separators[0]
    token_start = True
    for index, char in enumerate(payload):
        if char in separators:
            token_start = True
            continue
        if _is_ascii_digit(char):
            token_start = False
            continue
        if token_start and char in _SIGNS and _is_ascii_digit(payload[index + 1 : index + 2]):
            token_start = False
            continue
        return InvalidSeparator(expected=expected, actual=char, position=index + 1)

    offset, token = first_failure
    # An empty token's offset lands on the separator that closes it.
    actual = token[0] if token else payload[offset : offset + 1]
    return InvalidSeparator(expected=expected, actual=actual, position=offset + 1)


def _is_ascii_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"
