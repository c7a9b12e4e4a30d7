"""Application settings using pydantic-settings.

Settings can be overridden via environment variables.

Environment Variables:
    PROBLEM_BENCH_BENCHMARK_DIRECTORY: Default benchmark output directory
    PROBLEM_BENCH_VERBOSE: Enable debug logging
    PROBLEM_BENCH_JSON_LOGS: Render logs as JSON
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from problem_bench.config.defaults import DEFAULT_BENCHMARK_DIRECTORY

__all__ = ["Settings", "get_settings"]


class Settings(BaseSettings):
    """Root settings for problem-bench.

    Attributes:
        benchmark_directory: Directory used when a planner benchmark config
            does not declare one.
        verbose: Enable debug logging.
        json_logs: Render logs as JSON instead of console output.

    """

    model_config = SettingsConfigDict(
        env_prefix="PROBLEM_BENCH_",
        extra="ignore",
    )

    benchmark_directory: Path = Field(
        default=DEFAULT_BENCHMARK_DIRECTORY,
        description="Default benchmark output directory",
    )
    verbose: bool = Field(default=False, description="Enable debug logging")
    json_logs: bool = Field(default=False, description="Render logs as JSON")


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance.

    Returns:
        Settings built from the environment on first call.

    """
    return Settings()
