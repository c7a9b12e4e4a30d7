"""Configuration module for planner benchmark definitions.

This module provides the configuration models, their inheritance rules,
the YAML loader and centralized settings via pydantic-settings.
"""

from problem_bench.config.exceptions import (
    ConfigConflictError,
    ConfigurationError,
    InputNotFoundError,
    MissingInputError,
)
from problem_bench.config.loaders import load_planner_benchmark, parse_planner_benchmark
from problem_bench.config.models import (
    PlannerBenchmarkConfig,
    ProblemBenchmarksConfig,
    SolverBenchmarkConfig,
)
from problem_bench.config.settings import Settings, get_settings

__all__ = [
    "ConfigConflictError",
    "ConfigurationError",
    "InputNotFoundError",
    "MissingInputError",
    "PlannerBenchmarkConfig",
    "ProblemBenchmarksConfig",
    "Settings",
    "SolverBenchmarkConfig",
    "get_settings",
    "load_planner_benchmark",
    "parse_planner_benchmark",
]
