"""Separator resolution for calculator input."""

from __future__ import annotations

import logging

from .schemas import ResolvedInput

LOGGER = logging.getLogger(__name__)
DEFAULT_SEPARATORS: tuple[str, ...] = (",", "\n")
CUSTOM_SEPARATOR_PREFIX = "//"
_HEADER_LENGTH = len(CUSTOM_SEPARATOR_PREFIX) + 2


def resolve(text: str) -> ResolvedInput:
    """Resolve the effective separators and the payload left to parse.

    A `//<char>\\n` header replaces the default separators with `<char>`.
    Anything that does not match that exact shape falls back to the defaults
    with `text` kept whole as the payload.
    """
    if _has_custom_header(text):
        separator = text[len(CUSTOM_SEPARATOR_PREFIX)]
        LOGGER.debug("Custom separator %r declared.", separator)
        return ResolvedInput(payload=text[_HEADER_LENGTH:], separators=(separator,), custom=True)

    if text.startswith(CUSTOM_SEPARATOR_PREFIX):
        LOGGER.debug("Malformed separator header in %r; using default separators.", text[:_HEADER_LENGTH])
    return ResolvedInput(payload=text, separators=DEFAULT_SEPARATORS)


def _has_custom_header(text: str) -> bool:
    return (
        len(text) >= _HEADER_LENGTH
        and text.startswith(CUSTOM_SEPARATOR_PREFIX)
        and text[_HEADER_LENGTH - 1] == "\n"
    )
