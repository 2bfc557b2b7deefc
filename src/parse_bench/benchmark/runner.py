"""Benchmark runner: drives one executor over the corpus and aggregates timings."""

from typing import Callable

import structlog

from parse_bench.benchmark.timing import measure
from parse_bench.executors.base import BaseExecutor
from parse_bench.models import (
    AccumulatedStats,
    Corpus,
    ExecuteOptions,
    Measurement,
    ParseOutcome,
    Report,
    RunResult,
)

logger = structlog.get_logger()

Probe = Callable[[Callable[[], object]], Measurement]


class BenchmarkRunner:
    """Runs the iteration x corpus loop for one executor at a time."""

    def __init__(self, probe: Probe | None = None):
        """Initialize the benchmark runner.

        Args:
            probe: Timing probe wrapped around every parse call. Defaults to
                :func:`parse_bench.benchmark.timing.measure`.
        """
        self.probe = probe or measure

    def run(
        self,
        executor: BaseExecutor,
        corpus: Corpus,
        options: ExecuteOptions,
        iterations: int,
    ) -> RunResult:
        """Benchmark an executor over the corpus.

        Every buffer is parsed once per iteration, in corpus order. The first
        failed parse stops the run; remaining files and iterations are not
        attempted.

        Args:
            executor: Executor to benchmark.
            corpus: Buffers to parse, with their precomputed totals.
            options: Options passed to every parse call.
            iterations: Number of passes over the corpus.

        Returns:
            RunResult holding either the Report or the failure message.
        """
        stats = AccumulatedStats()
        outcome = ParseOutcome.ok(executor.name)

        def parse_one() -> None:
            nonlocal outcome
            outcome = executor.parse(buffer, options)

        logger.debug(
            "executor_run_started",
            executor=executor.name,
            files=corpus.size,
            iterations=iterations,
        )

        for _ in range(iterations):
            for buffer in corpus.buffers:
                elapsed = self.probe(parse_one)
                if not outcome.success:
                    logger.debug(
                        "executor_run_failed",
                        executor=executor.name,
                        label=buffer.label,
                        parse_calls=stats.parse_calls,
                    )
                    return RunResult(
                        executor_name=executor.name,
                        error=outcome.error or f"{executor.name} failed to parse {buffer.label}",
                    )
                stats.add(elapsed)

        report = Report.from_stats(
            executor.name,
            stats,
            total_bytes=corpus.stats.total_bytes,
            total_lines=corpus.stats.total_lines,
            iterations=iterations,
        )
        logger.debug(
            "executor_run_finished",
            executor=executor.name,
            parse_calls=report.parse_calls,
            cpu_ms=report.cpu_ms,
        )
        return RunResult(executor_name=executor.name, report=report)
