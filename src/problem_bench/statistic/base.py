"""Base classes for problem and single statistics.

A ProblemStatistic belongs to one problem benchmark and aggregates, for
report generation, the SingleStatistic of every single benchmark run on
that problem. Collecting the actual data points is the solver's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from problem_bench.statistic.types import ProblemStatisticType

if TYPE_CHECKING:
    from problem_bench.results.problem import ProblemBenchmarkResult
    from problem_bench.results.single import SingleBenchmarkResult

__all__ = ["ProblemStatistic", "SingleStatistic"]


class SingleStatistic:
    """Statistic storage for one single benchmark.

    Attributes:
        statistic_type: Kind of statistic stored.
        single_benchmark_result: Record owning this storage.
        points: Collected data points, in collection order.

    """

    def __init__(
        self,
        statistic_type: ProblemStatisticType,
        single_benchmark_result: SingleBenchmarkResult,
    ) -> None:
        self.statistic_type = statistic_type
        self.single_benchmark_result = single_benchmark_result
        self.points: list[Any] = []

    def add_point(self, point: Any) -> None:
        """Append a collected data point."""
        self.points.append(point)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.statistic_type.value}, points={len(self.points)})"


class ProblemStatistic:
    """Statistic of one kind attached to a problem benchmark.

    Subclasses are registered per kind with ``register_problem_statistic``.

    Attributes:
        statistic_type: Kind implemented by the class.
        problem_benchmark_result: Problem benchmark owning the statistic.

    """

    statistic_type: ClassVar[ProblemStatisticType]
    single_statistic_class: ClassVar[type[SingleStatistic]] = SingleStatistic

    def __init__(self, problem_benchmark_result: ProblemBenchmarkResult) -> None:
        self.problem_benchmark_result = problem_benchmark_result

    def create_single_statistic(
        self, single_benchmark_result: SingleBenchmarkResult
    ) -> SingleStatistic:
        """Create the per-record storage for a single benchmark of this problem."""
        return self.single_statistic_class(self.statistic_type, single_benchmark_result)

    @property
    def single_statistics(self) -> list[SingleStatistic]:
        """Single statistics of this kind across the problem's single benchmarks."""
        return [
            single.single_statistic_map[self.statistic_type]
            for single in self.problem_benchmark_result.single_benchmark_results
            if self.statistic_type in single.single_statistic_map
        ]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(problem={self.problem_benchmark_result.name!r})"
        )
