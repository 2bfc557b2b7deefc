"""
Configuration for parse-bench.

``BenchmarkConfig`` is the immutable run configuration handed to the
controller. ``Settings`` loads ambient defaults from ``PARSE_BENCH_``-prefixed
environment variables and an optional ``.env`` file via pydantic-settings.
"""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from parse_bench.executors import list_executors
from parse_bench.models import ExecuteOptions

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BenchmarkConfig(BaseModel):
    """Immutable configuration for one benchmark run.

    Attributes:
        executors: Executor names in the order they are run and reported.
        iterations: Number of passes over the corpus per executor.
        options: Advisory options passed to every parse call.
    """

    model_config = ConfigDict(frozen=True)

    executors: tuple[str, ...] = Field(default_factory=tuple)
    iterations: int = Field(default=1, ge=0)
    options: ExecuteOptions = Field(default_factory=ExecuteOptions)

    @field_validator("executors")
    @classmethod
    def validate_executor_names(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject names that are not in the executor registry."""
        available = list_executors()
        for name in v:
            if name not in available:
                raise ValueError(f"Unknown executor '{name}'. Available: {available}")
        return v


class Settings(BaseSettings):
    """Ambient settings loaded from ``PARSE_BENCH_``-prefixed environment variables.

    Attributes:
        log_level: Logging level for diagnostics on stderr.
        log_json: Render log lines as JSON instead of console text.
        source_suffixes: File name suffixes eligible for the corpus.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARSE_BENCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Logging level.")
    log_json: bool = Field(default=False, description="Emit JSON log lines.")
    source_suffixes: tuple[str, ...] = Field(
        default=(".py",),
        description="File name suffixes loaded into the corpus.",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings singleton."""
    return Settings()
