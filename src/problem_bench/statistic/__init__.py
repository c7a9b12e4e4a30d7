"""Problem and single statistics.

Statistic kinds map to ProblemStatistic classes through a registry so new
kinds can be plugged in without touching the benchmark builder.
"""

from problem_bench.statistic.base import ProblemStatistic, SingleStatistic
from problem_bench.statistic.exceptions import StatisticError
from problem_bench.statistic.registry import (
    get_problem_statistic_class,
    register_problem_statistic,
    registered_statistic_types,
)
from problem_bench.statistic.types import ProblemStatisticType

__all__ = [
    "ProblemStatistic",
    "ProblemStatisticType",
    "SingleStatistic",
    "StatisticError",
    "get_problem_statistic_class",
    "register_problem_statistic",
    "registered_statistic_types",
]
