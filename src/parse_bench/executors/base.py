"""Abstract base class for all parser executors."""

from abc import ABC, abstractmethod

from parse_bench.models import Buffer, ExecuteOptions, ParseOutcome


class BaseExecutor(ABC):
    """Abstract base class that all executors must inherit from.

    An executor wraps one parser backend behind a single ``parse`` call.
    Executors hold no state between calls: every call builds whatever the
    backend needs and drops the resulting tree before returning.

    Example:
        class MyExecutor(BaseExecutor):
            @property
            def name(self) -> str:
                return "my-parser"

            def _perform_parse(self, buffer, options) -> None:
                my_backend.parse(buffer.content)
    """

    #: Whether the backend can honour ``ExecuteOptions.skip_bodies``.
    supports_skip_bodies: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this executor.

        Used for selection on the command line and in reports.
        """
        pass

    def parse(self, buffer: Buffer, options: ExecuteOptions) -> ParseOutcome:
        """Parse one buffer.

        Args:
            buffer: Source buffer to parse.
            options: Advisory options; unsupported ones are ignored.

        Returns:
            ParseOutcome, failed with a message if the backend raised.
        """
        try:
            self._perform_parse(buffer, options)
        except Exception as e:
            return ParseOutcome.failure(str(e), executor_name=self.name)
        return ParseOutcome.ok(executor_name=self.name)

    @abstractmethod
    def _perform_parse(self, buffer: Buffer, options: ExecuteOptions) -> None:
        """Run the backend parser over ``buffer``.

        Raises:
            ExecutorUnavailableError: If the backend is not available.
            Exception: Any backend error, reported as a parse failure.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
