"""Batch evaluation of calculator inputs read from JSONL files."""

from .reader import read_batch_inputs
from .render import render_batch_report
from .schemas import BatchCounters, BatchReport
from .service import BatchService

__all__ = ["BatchCounters", "BatchReport", "BatchService", "read_batch_inputs", "render_batch_report"]
