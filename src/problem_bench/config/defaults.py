"""Default values shared by settings, models and loaders."""

from pathlib import Path

__all__ = [
    "DEFAULT_BENCHMARK_DIRECTORY",
    "DEFAULT_PLANNER_BENCHMARK_NAME",
    "DEFAULT_WRITE_OUTPUT_SOLUTION_ENABLED",
    "SOLVER_BENCHMARK_NAME_PREFIX",
]

DEFAULT_BENCHMARK_DIRECTORY = Path("local/benchmarks")
DEFAULT_PLANNER_BENCHMARK_NAME = "benchmark"

DEFAULT_WRITE_OUTPUT_SOLUTION_ENABLED = False

# Unnamed solver benchmarks are named <prefix><index>
SOLVER_BENCHMARK_NAME_PREFIX = "Config_"
