"""Solver benchmark result."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from problem_bench.results.planner import PlannerBenchmarkResult
    from problem_bench.results.single import SingleBenchmarkResult

__all__ = ["SolverBenchmarkResult"]


class SolverBenchmarkResult:
    """Results of one solver configuration across its problems.

    Attributes:
        planner_benchmark_result: Owning run.
        name: Solver benchmark name, unique within the run.
        solver: Solver settings handed to the solving engine.
        single_benchmark_results: Linked single benchmarks, in link order.

    """

    def __init__(
        self,
        planner_benchmark_result: PlannerBenchmarkResult,
        name: str,
        solver: dict[str, Any] | None = None,
    ) -> None:
        self.planner_benchmark_result = planner_benchmark_result
        self.name = name
        self.solver: dict[str, Any] = dict(solver or {})
        self.single_benchmark_results: list[SingleBenchmarkResult] = []

    def __repr__(self) -> str:
        return f"SolverBenchmarkResult({self.name!r})"
