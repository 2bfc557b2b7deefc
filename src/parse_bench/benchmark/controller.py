"""Top-level orchestration of a benchmark run across the selected executors."""

import sys
from typing import TextIO

import structlog

from parse_bench.benchmark.report import format_preamble, format_report
from parse_bench.benchmark.runner import BenchmarkRunner
from parse_bench.config import BenchmarkConfig
from parse_bench.executors import get_executor
from parse_bench.models import Corpus

logger = structlog.get_logger()

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class BenchmarkController:
    """Runs every selected executor over one corpus and streams the reports.

    Executors run in the configured order and each report is written as soon
    as its run finishes. The first failure stops the whole benchmark: an
    ``error: <message>`` line goes to the error stream and later executors
    are not run. Reports already written stay valid.
    """

    def __init__(
        self,
        config: BenchmarkConfig,
        runner: BenchmarkRunner | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ):
        """Initialize the controller.

        Args:
            config: Run configuration.
            runner: Runner used for every executor.
            out: Stream receiving the preamble and reports (default stdout).
            err: Stream receiving failure diagnostics (default stderr).
        """
        self.config = config
        self.runner = runner or BenchmarkRunner()
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def run(self, corpus: Corpus) -> int:
        """Benchmark all selected executors.

        Args:
            corpus: Loaded corpus shared by every executor.

        Returns:
            Process exit status: 0 on success, 1 if an executor failed.
        """
        self._write(self.out, format_preamble(corpus.stats, self.config.iterations))

        for name in self.config.executors:
            executor = get_executor(name)
            if self.config.options.skip_bodies and not executor.supports_skip_bodies:
                logger.warning("skip_bodies_ignored", executor=name)

            result = self.runner.run(
                executor,
                corpus,
                self.config.options,
                self.config.iterations,
            )
            if not result.success:
                logger.info("benchmark_aborted", executor=name, error=result.error)
                self._write(self.err, f"error: {result.error}\n")
                return EXIT_FAILURE

            self._write(self.out, format_report(result.report))

        return EXIT_SUCCESS

    @staticmethod
    def _write(stream: TextIO, text: str) -> None:
        stream.write(text)
        stream.flush()
