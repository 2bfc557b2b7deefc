"""Shared fixtures and stub executors for parse-bench tests."""

import pytest
import structlog

from parse_bench.config import get_settings
from parse_bench.executors import EXECUTORS, BaseExecutor
from parse_bench.executors.treesitter import get_language
from parse_bench.models import Buffer, Corpus, ExecuteOptions, Measurement


class RecordingExecutor(BaseExecutor):
    """Executor that always succeeds and records the labels it parsed."""

    def __init__(self):
        self.calls: list[str] = []
        self.options_seen: list[ExecuteOptions] = []

    @property
    def name(self) -> str:
        return "recording"

    def _perform_parse(self, buffer, options) -> None:
        self.calls.append(buffer.label)
        self.options_seen.append(options)


class FailingExecutor(BaseExecutor):
    """Executor that fails on the buffer whose label is ``fail_on``."""

    fail_on: str | None = None

    def __init__(self, fail_on: str | None = None):
        self.fail_on = fail_on
        self.calls: list[str] = []

    @property
    def name(self) -> str:
        return "failing"

    def _perform_parse(self, buffer, options) -> None:
        self.calls.append(buffer.label)
        if self.fail_on is None or buffer.label == self.fail_on:
            raise RuntimeError(f"cannot parse {buffer.label}")


class FixedProbe:
    """Probe that runs the operation and reports fixed durations."""

    def __init__(self, wall_ns: int = 2_000_000, cpu_ns: int = 1_000_000):
        self.wall_ns = wall_ns
        self.cpu_ns = cpu_ns
        self.invocations = 0

    def __call__(self, op) -> Measurement:
        self.invocations += 1
        op()
        return Measurement(wall_ns=self.wall_ns, cpu_ns=self.cpu_ns)


@pytest.fixture
def corpus():
    """Two-file corpus: 300 bytes, 6 lines."""
    return Corpus(buffers=(
        Buffer(label="a.py", content=b"x" * 99 + b"\n" + b"y" * 99 + b"\n"),
        Buffer(label="b.py", content=(b"z" * 24 + b"\n") * 4),
    ))


@pytest.fixture
def options():
    """Default execute options."""
    return ExecuteOptions()


@pytest.fixture
def stub_executors(monkeypatch):
    """Register stub executors in the executor registry for one test."""
    monkeypatch.setitem(EXECUTORS, "recording", RecordingExecutor)
    monkeypatch.setitem(EXECUTORS, "failing", FailingExecutor)
    return EXECUTORS


@pytest.fixture(autouse=True)
def reset_ambient_state():
    """Restore default logging and reload cached settings and grammar around every test."""
    get_settings.cache_clear()
    get_language.cache_clear()
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()
    get_language.cache_clear()
