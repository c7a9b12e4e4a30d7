"""Single benchmark: one solver benchmark run on one problem benchmark."""

from __future__ import annotations

from typing import TYPE_CHECKING

from problem_bench.statistic.base import SingleStatistic
from problem_bench.statistic.types import ProblemStatisticType

if TYPE_CHECKING:
    from problem_bench.results.problem import ProblemBenchmarkResult
    from problem_bench.results.solver import SolverBenchmarkResult

__all__ = ["SingleBenchmarkResult"]


class SingleBenchmarkResult:
    """One (solver benchmark, problem benchmark) execution unit.

    Equality is identity: the same pairing may be benchmarked more than once,
    and every record is an independent run.

    Attributes:
        solver_benchmark_result: Solver side of the pairing.
        problem_benchmark_result: Problem side of the pairing.
        single_statistic_map: Per-record statistic storage by kind.

    """

    def __init__(
        self,
        solver_benchmark_result: SolverBenchmarkResult,
        problem_benchmark_result: ProblemBenchmarkResult,
    ) -> None:
        self.solver_benchmark_result = solver_benchmark_result
        self.problem_benchmark_result = problem_benchmark_result
        self.single_statistic_map: dict[ProblemStatisticType, SingleStatistic] = {}

    @property
    def name(self) -> str:
        return f"{self.problem_benchmark_result.name}_{self.solver_benchmark_result.name}"

    def init_single_statistic_map(self) -> None:
        """Create one single statistic per statistic of the problem benchmark."""
        self.single_statistic_map = {
            problem_statistic.statistic_type: problem_statistic.create_single_statistic(self)
            for problem_statistic in self.problem_benchmark_result.problem_statistics
        }

    def __repr__(self) -> str:
        return f"SingleBenchmarkResult({self.name!r})"
