"""Data models for the in-memory source corpus.

This module provides Pydantic models for:
- Buffer: one source file's bytes plus its identifying label
- CorpusStats: aggregate byte and line counts shared by every executor
- Corpus: the ordered collection of buffers for one benchmark run
- ExecuteOptions: advisory flags passed into every parse call
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Buffer(BaseModel):
    """An immutable named byte sequence, typically the contents of one file.

    Attributes:
        label: Identifier of the buffer, usually the file path.
        content: Raw source bytes.

    Example:
        >>> buf = Buffer(label="a.py", content=b"x = 1\\n")
        >>> buf.size, buf.line_count
        (6, 1)
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Identifying label, usually a file path")
    content: bytes = Field(default=b"", description="Raw source bytes")

    @property
    def size(self) -> int:
        """Return the number of bytes in the buffer."""
        return len(self.content)

    @property
    def line_count(self) -> int:
        """Return the number of newline characters in the buffer."""
        return self.content.count(b"\n")


class CorpusStats(BaseModel):
    """Totals computed once per run so throughput figures are comparable."""

    model_config = ConfigDict(frozen=True)

    file_count: int = Field(default=0, ge=0)
    total_bytes: int = Field(default=0, ge=0)
    total_lines: int = Field(default=0, ge=0)

    @classmethod
    def from_buffers(cls, buffers: tuple[Buffer, ...] | list[Buffer]) -> "CorpusStats":
        """Compute the totals for a sequence of buffers.

        Args:
            buffers: Buffers to count.

        Returns:
            CorpusStats with file, byte and newline totals.
        """
        return cls(
            file_count=len(buffers),
            total_bytes=sum(buf.size for buf in buffers),
            total_lines=sum(buf.line_count for buf in buffers),
        )


class Corpus(BaseModel):
    """Ordered, read-only collection of buffers for one benchmark run.

    The buffer order is the load order and is used unchanged for every
    executor and every iteration. ``stats`` is derived from ``buffers`` when
    the corpus is built.
    """

    model_config = ConfigDict(frozen=True)

    buffers: tuple[Buffer, ...] = Field(default_factory=tuple)
    stats: CorpusStats = Field(default_factory=CorpusStats)

    @model_validator(mode="after")
    def compute_stats(self) -> Self:
        """Derive the corpus totals from the buffers."""
        # frozen model: bypass __setattr__ for the derived field
        object.__setattr__(self, "stats", CorpusStats.from_buffers(self.buffers))
        return self

    @property
    def size(self) -> int:
        """Return the number of buffers in the corpus."""
        return len(self.buffers)


class ExecuteOptions(BaseModel):
    """Advisory capabilities requested from every executor.

    Attributes:
        skip_bodies: Skip function bodies and type members where the
            executor supports it. Executors that cannot honour the hint
            ignore it.
    """

    model_config = ConfigDict(frozen=True)

    skip_bodies: bool = Field(
        default=False,
        description="Skip function bodies and type members if possible",
    )
