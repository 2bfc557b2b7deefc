"""Exception types raised inside executors.

Executors convert these into failed ``ParseOutcome`` values; nothing above
the executor layer sees them as exceptions.
"""


class ParseBenchError(Exception):
    """Base class for harness errors."""


class ExecutorUnavailableError(ParseBenchError):
    """The executor's backend is not installed or could not be constructed."""

    def __init__(self, executor_name: str, reason: str):
        self.executor_name = executor_name
        self.reason = reason
        super().__init__(f"{executor_name} is not supported: {reason}")
