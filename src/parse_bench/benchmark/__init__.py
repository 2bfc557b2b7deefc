"""Measurement and aggregation engine for parser benchmarks."""

from .controller import BenchmarkController
from .report import format_preamble, format_report
from .runner import BenchmarkRunner
from .timing import measure

__all__ = [
    "BenchmarkController",
    "BenchmarkRunner",
    "format_preamble",
    "format_report",
    "measure",
]
