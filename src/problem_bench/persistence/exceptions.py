"""Exceptions for the persistence module."""

from problem_bench.exceptions import ProblemBenchError

__all__ = ["ProblemIOError"]


class ProblemIOError(ProblemBenchError):
    """Exception for failures while reading or writing a solution file."""

    pass
