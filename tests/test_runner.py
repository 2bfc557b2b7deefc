"""Tests for BenchmarkRunner."""

import pytest

from conftest import FailingExecutor, FixedProbe, RecordingExecutor
from parse_bench.benchmark import BenchmarkRunner
from parse_bench.models import Buffer, Corpus, ExecuteOptions, RunResult


@pytest.fixture
def probe():
    """Probe reporting 2 ms wall and 1 ms CPU per call."""
    return FixedProbe(wall_ns=2_000_000, cpu_ns=1_000_000)


@pytest.fixture
def runner(probe):
    """Create a runner with the fixed probe."""
    return BenchmarkRunner(probe=probe)


class TestRunLoop:
    """Tests for the iteration x corpus loop."""

    def test_returns_run_result(self, runner, corpus, options):
        """Test run returns a RunResult."""
        result = runner.run(RecordingExecutor(), corpus, options, 1)
        assert isinstance(result, RunResult)
        assert result.success
        assert result.executor_name == "recording"

    @pytest.mark.parametrize("iterations", [1, 3, 7])
    def test_call_count(self, runner, probe, corpus, options, iterations):
        """Test exactly iterations x corpus size timed calls are made."""
        executor = RecordingExecutor()
        result = runner.run(executor, corpus, options, iterations)

        assert len(executor.calls) == iterations * corpus.size
        assert probe.invocations == iterations * corpus.size
        assert result.report.parse_calls == iterations * corpus.size

    def test_corpus_order_each_iteration(self, runner, corpus, options):
        """Test buffers are parsed in corpus order on every pass."""
        executor = RecordingExecutor()
        runner.run(executor, corpus, options, 2)
        assert executor.calls == ["a.py", "b.py", "a.py", "b.py"]

    def test_options_passed_through(self, runner, corpus):
        """Test the same options reach every parse call."""
        executor = RecordingExecutor()
        opts = ExecuteOptions(skip_bodies=True)
        runner.run(executor, corpus, opts, 2)
        assert all(seen is opts for seen in executor.options_seen)

    def test_durations_accumulated(self, runner, corpus, options):
        """Test wall and CPU time are summed over all calls."""
        result = runner.run(RecordingExecutor(), corpus, options, 3)
        assert result.report.wall_ns == 6 * 2_000_000
        assert result.report.cpu_ns == 6 * 1_000_000
        assert result.report.wall_ms == 12
        assert result.report.cpu_ms == 6


class TestThroughput:
    """Tests for CPU-based throughput."""

    def test_throughput_values(self, runner, corpus, options):
        """Test throughput equals total * iterations / cpu seconds."""
        result = runner.run(RecordingExecutor(), corpus, options, 3)
        # 6 calls x 1 ms CPU = 6 ms; 300 bytes and 6 lines per pass
        assert result.report.bytes_per_second == 300 * 3 * 1000 // 6
        assert result.report.lines_per_second == 6 * 3 * 1000 // 6

    def test_zero_cpu_omits_throughput(self, corpus, options):
        """Test throughput is undefined when no CPU time accumulated."""
        runner = BenchmarkRunner(probe=FixedProbe(wall_ns=500, cpu_ns=0))
        result = runner.run(RecordingExecutor(), corpus, options, 2)
        assert result.success
        assert result.report.cpu_ms == 0
        assert result.report.bytes_per_second is None
        assert result.report.lines_per_second is None


class TestEdgeCases:
    """Tests for empty runs."""

    def test_empty_corpus(self, runner, probe, options):
        """Test an empty corpus gives a zero report, not a failure."""
        result = runner.run(RecordingExecutor(), Corpus(), options, 5)
        assert result.success
        assert result.report.wall_ns == 0
        assert result.report.cpu_ns == 0
        assert result.report.parse_calls == 0
        assert not result.report.has_throughput
        assert probe.invocations == 0

    def test_zero_iterations(self, runner, corpus, options):
        """Test zero iterations gives a zero report, not a failure."""
        executor = RecordingExecutor()
        result = runner.run(executor, corpus, options, 0)
        assert result.success
        assert result.report.parse_calls == 0
        assert not result.report.has_throughput
        assert executor.calls == []


class TestFailures:
    """Tests for parse failures."""

    def test_failure_stops_run(self, runner, corpus, options):
        """Test the first failure aborts remaining files and iterations."""
        executor = FailingExecutor(fail_on="b.py")
        result = runner.run(executor, corpus, options, 5)

        assert not result.success
        assert result.report is None
        assert result.error == "cannot parse b.py"
        assert executor.calls == ["a.py", "b.py"]

    def test_failure_on_first_call(self, runner, probe, corpus, options):
        """Test a failing first call is probed once and nothing else runs."""
        executor = FailingExecutor()
        result = runner.run(executor, corpus, options, 3)

        assert not result.success
        assert executor.calls == ["a.py"]
        assert probe.invocations == 1


class TestDefaultProbe:
    """Tests using the real timing probe."""

    def test_real_clock_report(self, options):
        """Test a real run with an instant executor gives a consistent report."""
        content = (b"x" * 19 + b"\n") * 5
        corpus = Corpus(buffers=(Buffer(label="one.py", content=content),))
        assert corpus.stats.total_bytes == 100
        assert corpus.stats.total_lines == 5

        result = BenchmarkRunner().run(RecordingExecutor(), corpus, options, 1)
        report = result.report

        assert result.success
        assert report.wall_ms >= 0
        assert report.cpu_ms >= 0
        if report.cpu_ns == 0:
            assert report.bytes_per_second is None
        else:
            assert report.bytes_per_second == 100 * 1_000_000_000 // report.cpu_ns
            assert report.lines_per_second == 5 * 1_000_000_000 // report.cpu_ns

    def test_same_shape_across_runs(self, corpus, options):
        """Test repeated runs produce reports with the same fields present."""
        runner = BenchmarkRunner(probe=FixedProbe())
        first = runner.run(RecordingExecutor(), corpus, options, 2).report
        second = runner.run(RecordingExecutor(), corpus, options, 2).report

        def shape(report):
            return {k for k, v in report.model_dump().items() if v is not None}

        assert shape(first) == shape(second)
