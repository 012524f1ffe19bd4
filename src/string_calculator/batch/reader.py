"""JSONL reader for batch calculator inputs."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import orjson

from .errors import BatchInputError
from .schemas import BatchInput


def read_batch_inputs(input_file_path: Path) -> list[BatchInput]:
    """Read calculator inputs from a JSONL file.

    Each non-blank line is either a JSON string or an object with a string
    `input` field.

    Raises:
        BatchInputError: On malformed JSON or an unsupported line shape.
    """
    return [
        BatchInput(line_number=line_number, text=_extract_text(value, input_file_path, line_number))
        for line_number, value in _iter_json_values(input_file_path)
    ]


def _iter_json_values(input_file_path: Path) -> Iterator[tuple[int, Any]]:
    """Yield parsed JSON values with line numbers."""
    with input_file_path.open("rb") as handle:
        for line_number, raw_line in enumerate(handle, start=1):
            if not raw_line.strip():
                continue
            try:
                yield line_number, orjson.loads(raw_line)
            except orjson.JSONDecodeError as exc:
                raise BatchInputError(f"Malformed JSON in {input_file_path} at line {line_number}: {exc}.") from exc


def _extract_text(value: Any, input_file_path: Path, line_number: int) -> str:
    """Return the calculator input carried by one JSON value."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        text = value.get("input")
        if isinstance(text, str):
            return text
        raise BatchInputError(
            f"Invalid input field in {input_file_path} at line {line_number}: "
            f"expected str, got {type(text).__name__}."
        )
    raise BatchInputError(
        f"Expected JSON string or object in {input_file_path} at line {line_number}, got {type(value).__name__}."
    )
