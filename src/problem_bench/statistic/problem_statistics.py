"""Built-in problem statistics, one per ProblemStatisticType."""

from problem_bench.statistic.base import ProblemStatistic, SingleStatistic
from problem_bench.statistic.registry import register_problem_statistic
from problem_bench.statistic.types import ProblemStatisticType

__all__ = [
    "BestScoreProblemStatistic",
    "BestSolutionMutationProblemStatistic",
    "CalculateCountProblemStatistic",
    "MemoryUseProblemStatistic",
    "MemoryUseSingleStatistic",
    "MoveCountPerStepProblemStatistic",
    "StepScoreProblemStatistic",
]


@register_problem_statistic(ProblemStatisticType.BEST_SCORE)
class BestScoreProblemStatistic(ProblemStatistic):
    """Best score over time."""


@register_problem_statistic(ProblemStatisticType.STEP_SCORE)
class StepScoreProblemStatistic(ProblemStatistic):
    """Step score over time."""


@register_problem_statistic(ProblemStatisticType.CALCULATE_COUNT_PER_SECOND)
class CalculateCountProblemStatistic(ProblemStatistic):
    """Score calculation count per second."""


@register_problem_statistic(ProblemStatisticType.BEST_SOLUTION_MUTATION)
class BestSolutionMutationProblemStatistic(ProblemStatistic):
    """Mutation count between consecutive best solutions."""


@register_problem_statistic(ProblemStatisticType.MOVE_COUNT_PER_STEP)
class MoveCountPerStepProblemStatistic(ProblemStatistic):
    """Accepted and selected move count per step."""


class MemoryUseSingleStatistic(SingleStatistic):
    """Memory samples, stored as (used_bytes, max_bytes) pairs."""

    def add_point(self, point: tuple[int, int]) -> None:
        used, maximum = point
        if used < 0 or maximum < 0:
            raise ValueError(f"Memory sample must be non-negative, got {point}")
        super().add_point((used, maximum))


@register_problem_statistic(ProblemStatisticType.MEMORY_USE)
class MemoryUseProblemStatistic(ProblemStatistic):
    """Used and max memory over time."""

    single_statistic_class = MemoryUseSingleStatistic
