"""Data models for corpora, parse outcomes and benchmark reports.

This module provides Pydantic-validated models for:
- Buffer / Corpus / CorpusStats: the in-memory source corpus
- ExecuteOptions: advisory flags passed to every executor
- ParseOutcome: result of a single parse call
- Measurement / AccumulatedStats / Report / RunResult: timing figures
"""

from .corpus import Buffer, Corpus, CorpusStats, ExecuteOptions
from .report import AccumulatedStats, Measurement, ParseOutcome, Report, RunResult

__all__ = [
    "Buffer",
    "Corpus",
    "CorpusStats",
    "ExecuteOptions",
    "ParseOutcome",
    "Measurement",
    "AccumulatedStats",
    "Report",
    "RunResult",
]
