"""Planner benchmark result: the top-level run."""

from __future__ import annotations

import threading
from datetime import datetime
from pathlib import Path

from problem_bench.logging_config import get_logger
from problem_bench.results.problem import ProblemBenchmarkKey, ProblemBenchmarkResult
from problem_bench.results.solver import SolverBenchmarkResult

__all__ = ["PlannerBenchmarkResult"]

logger = get_logger(__name__)


class PlannerBenchmarkResult:
    """A benchmark run comparing solver benchmarks over shared problems.

    The unified problem benchmark list holds every problem benchmark of the
    run exactly once, in first-encounter order.

    Attributes:
        name: Run name.
        benchmark_directory: Output directory of the run.
        starting_timestamp: When the run was assembled.
        solver_benchmark_results: Solver benchmarks, in declared order.

    """

    def __init__(self, name: str, benchmark_directory: Path) -> None:
        self.name = name
        self.benchmark_directory = Path(benchmark_directory)
        self.starting_timestamp = datetime.now()
        self.solver_benchmark_results: list[SolverBenchmarkResult] = []
        self._unified_problem_benchmarks: dict[ProblemBenchmarkKey, ProblemBenchmarkResult] = {}
        self._lock = threading.Lock()

    @property
    def unified_problem_benchmark_results(self) -> list[ProblemBenchmarkResult]:
        """Snapshot of the unified problem benchmark list."""
        with self._lock:
            return list(self._unified_problem_benchmarks.values())

    def register_problem_benchmark(
        self, candidate: ProblemBenchmarkResult
    ) -> ProblemBenchmarkResult:
        """Return the equal problem benchmark of this run, storing the candidate if new.

        Args:
            candidate: Freshly built problem benchmark owned by this run.

        Returns:
            The existing equal entry, or the candidate once stored.

        Raises:
            ValueError: If the candidate belongs to another run.

        """
        if candidate.planner_benchmark_result is not self:
            raise ValueError(
                f"Problem benchmark ({candidate.name}) belongs to another planner benchmark"
            )
        key = candidate.key
        with self._lock:
            existing = self._unified_problem_benchmarks.get(key)
            if existing is not None:
                logger.debug("problem_benchmark_reused", problem=existing.name)
                return existing
            self._unified_problem_benchmarks[key] = candidate
        logger.debug(
            "problem_benchmark_created",
            problem=candidate.name,
            input_solution_file=str(candidate.input_solution_file),
        )
        return candidate

    @property
    def single_benchmark_count(self) -> int:
        return sum(len(s.single_benchmark_results) for s in self.solver_benchmark_results)

    def get_solver_benchmark_result(self, name: str) -> SolverBenchmarkResult:
        """Look up a solver benchmark by name.

        Raises:
            KeyError: If no solver benchmark has that name.

        """
        for solver_benchmark_result in self.solver_benchmark_results:
            if solver_benchmark_result.name == name:
                return solver_benchmark_result
        raise KeyError(name)

    def __repr__(self) -> str:
        return f"PlannerBenchmarkResult({self.name!r})"
