"""Reporting utilities for backpropnet."""

from .artifacts import write_manifest
from .metrics import CsvSink, JsonlSink, ProgressPrinter
from .plots import plot_history

__all__ = ["write_manifest", "JsonlSink", "CsvSink", "ProgressPrinter", "plot_history"]
