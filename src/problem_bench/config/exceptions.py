"""Exceptions for config module.

This module defines exceptions related to configuration loading,
validation and benchmark setup. Every one of them is fatal: the run
setup is aborted rather than skipping the offending entry.
"""

from problem_bench.exceptions import ProblemBenchError

__all__ = [
    "ConfigConflictError",
    "ConfigurationError",
    "InputNotFoundError",
    "MissingInputError",
]


class ConfigurationError(ProblemBenchError):
    """Base exception for configuration-related errors."""

    pass


class ConfigConflictError(ConfigurationError):
    """Two mutually exclusive options are both configured."""

    pass


class MissingInputError(ConfigurationError):
    """No input solution file is configured for a solver benchmark."""

    def __init__(self, solver_benchmark_name: str) -> None:
        self.solver_benchmark_name = solver_benchmark_name
        super().__init__(
            f"Configure at least 1 input solution file for the solver benchmark "
            f"({solver_benchmark_name}) directly or indirectly by inheriting it."
        )


class InputNotFoundError(ConfigurationError):
    """A configured input solution file does not exist or cannot be read."""

    def __init__(self, input_solution_file: object) -> None:
        self.input_solution_file = input_solution_file
        super().__init__(
            f"The input solution file ({input_solution_file}) does not exist."
        )
