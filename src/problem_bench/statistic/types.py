"""Statistic kinds that can be requested per problem benchmark."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from problem_bench.results.problem import ProblemBenchmarkResult
    from problem_bench.statistic.base import ProblemStatistic

__all__ = ["ProblemStatisticType"]


class ProblemStatisticType(str, Enum):
    """Kind of statistic collected for every single benchmark of a problem.

    Attributes:
        BEST_SCORE: Best score over time.
        STEP_SCORE: Score of every step over time.
        CALCULATE_COUNT_PER_SECOND: Score calculation speed over time.
        BEST_SOLUTION_MUTATION: Planning variables changed per new best solution.
        MOVE_COUNT_PER_STEP: Accepted and selected moves per step.
        MEMORY_USE: Used and max memory over time.
    """

    BEST_SCORE = "BEST_SCORE"
    STEP_SCORE = "STEP_SCORE"
    CALCULATE_COUNT_PER_SECOND = "CALCULATE_COUNT_PER_SECOND"
    BEST_SOLUTION_MUTATION = "BEST_SOLUTION_MUTATION"
    MOVE_COUNT_PER_STEP = "MOVE_COUNT_PER_STEP"
    MEMORY_USE = "MEMORY_USE"

    def create(self, problem_benchmark_result: ProblemBenchmarkResult) -> ProblemStatistic:
        """Create the problem statistic of this kind bound to a problem benchmark.

        Args:
            problem_benchmark_result: Problem benchmark owning the statistic.

        Returns:
            A new ProblemStatistic instance.

        """
        from problem_bench.statistic.registry import get_problem_statistic_class

        return get_problem_statistic_class(self)(problem_benchmark_result)
