"""Exceptions for the statistic module."""

from problem_bench.exceptions import ProblemBenchError

__all__ = ["StatisticError"]


class StatisticError(ProblemBenchError):
    """Exception for statistic registration and lookup errors."""

    pass
