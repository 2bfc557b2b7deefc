"""Data models for parse outcomes, measurements and benchmark reports."""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000


class ParseOutcome(BaseModel):
    """Result of a single executor parse call.

    Attributes:
        success: Whether the parse completed.
        error: Human-readable message when the parse failed.
        executor_name: Name of the executor that produced this outcome.
    """

    success: bool = Field(default=True)
    error: str | None = Field(default=None)
    executor_name: str | None = Field(default=None)

    @classmethod
    def ok(cls, executor_name: str | None = None) -> "ParseOutcome":
        """Build a successful outcome."""
        return cls(success=True, executor_name=executor_name)

    @classmethod
    def failure(cls, error: str, executor_name: str | None = None) -> "ParseOutcome":
        """Build a failed outcome carrying ``error``."""
        return cls(success=False, error=error, executor_name=executor_name)


class Measurement(NamedTuple):
    """Wall-clock and CPU durations of one probed call, in nanoseconds."""
    wall_ns: int
    cpu_ns: int


class AccumulatedStats(BaseModel):
    """Running totals for one executor run across files and iterations."""

    wall_ns: int = Field(default=0, ge=0)
    cpu_ns: int = Field(default=0, ge=0)
    parse_calls: int = Field(default=0, ge=0)

    def add(self, measurement: Measurement) -> None:
        """Fold one measurement into the totals.

        Negative durations (a CPU clock with coarse resolution can step
        unevenly) are clamped to zero.
        """
        self.wall_ns += max(measurement.wall_ns, 0)
        self.cpu_ns += max(measurement.cpu_ns, 0)
        self.parse_calls += 1


class Report(BaseModel):
    """Finalized per-executor benchmark figures.

    Throughput is based on CPU time and is ``None`` when no CPU time was
    accumulated, since the ratio is meaningless with a zero denominator.

    Attributes:
        executor_name: Name of the benchmarked executor.
        iterations: Number of passes over the corpus.
        parse_calls: Number of timed parse calls.
        wall_ns: Total wall-clock time.
        cpu_ns: Total CPU time.
        bytes_per_second: Corpus bytes times iterations per CPU second.
        lines_per_second: Corpus lines times iterations per CPU second.
    """

    model_config = ConfigDict(frozen=True)

    executor_name: str
    iterations: int = Field(default=0, ge=0)
    parse_calls: int = Field(default=0, ge=0)
    wall_ns: int = Field(default=0, ge=0)
    cpu_ns: int = Field(default=0, ge=0)
    bytes_per_second: int | None = Field(default=None, ge=0)
    lines_per_second: int | None = Field(default=None, ge=0)

    @computed_field
    @property
    def wall_ms(self) -> int:
        """Total wall-clock time truncated to milliseconds."""
        return self.wall_ns // NANOS_PER_MILLI

    @computed_field
    @property
    def cpu_ms(self) -> int:
        """Total CPU time truncated to milliseconds."""
        return self.cpu_ns // NANOS_PER_MILLI

    @property
    def has_throughput(self) -> bool:
        """Return whether throughput figures are defined."""
        return self.bytes_per_second is not None

    @classmethod
    def from_stats(
        cls,
        executor_name: str,
        stats: AccumulatedStats,
        total_bytes: int,
        total_lines: int,
        iterations: int,
    ) -> "Report":
        """Finalize accumulated totals into a report.

        Args:
            executor_name: Name of the benchmarked executor.
            stats: Totals accumulated over the run.
            total_bytes: Corpus byte count.
            total_lines: Corpus newline count.
            iterations: Number of passes over the corpus.

        Returns:
            Report with throughput defined only when CPU time is nonzero.
        """
        bytes_per_second = None
        lines_per_second = None
        if stats.cpu_ns > 0:
            bytes_per_second = total_bytes * iterations * NANOS_PER_SECOND // stats.cpu_ns
            lines_per_second = total_lines * iterations * NANOS_PER_SECOND // stats.cpu_ns

        return cls(
            executor_name=executor_name,
            iterations=iterations,
            parse_calls=stats.parse_calls,
            wall_ns=stats.wall_ns,
            cpu_ns=stats.cpu_ns,
            bytes_per_second=bytes_per_second,
            lines_per_second=lines_per_second,
        )


class RunResult(BaseModel):
    """Outcome of one executor's benchmark run: a report or an error."""

    executor_name: str
    report: Report | None = Field(default=None)
    error: str | None = Field(default=None)

    @property
    def success(self) -> bool:
        """Return whether the run completed without a parse failure."""
        return self.error is None and self.report is not None
