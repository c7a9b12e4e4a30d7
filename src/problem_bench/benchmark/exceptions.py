"""Domain-specific exceptions for benchmark run assembly."""

from problem_bench.config.exceptions import ConfigurationError

__all__ = ["BenchmarkError", "DuplicateSolverBenchmarkError"]


class BenchmarkError(ConfigurationError):
    """Exception for planner benchmark assembly errors."""

    pass


class DuplicateSolverBenchmarkError(BenchmarkError):
    """Two solver benchmarks of one run share a name."""

    pass
