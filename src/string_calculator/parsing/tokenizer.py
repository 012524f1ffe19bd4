"""Payload tokenization on active separators."""

from __future__ import annotations

from collections.abc import Iterator


def tokenize(payload: str, separators: tuple[str, ...]) -> list[str]:
    """Split payload on any separator, keeping empty tokens in place."""
    return [token for _, token in iter_tokens(payload, separators)]


def iter_tokens(payload: str, separators: tuple[str, ...]) -> Iterator[tuple[int, str]]:
    """Yield `(start_offset, token)` pairs; offsets are 0-based into payload."""
    start = 0
    for index, char in enumerate(payload):
        if char in separators:
            yield start, payload[start:index]
            start = index + 1
    yield start, payload[start:]


def has_trailing_separator(tokens: list[str]) -> bool:
    """Return True when the last token is empty."""
    return bool(tokens) and tokens[-1] == ""
