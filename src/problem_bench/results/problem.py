"""Problem benchmark result.

A problem benchmark is shared by every solver benchmark of a run that
declares the same input file. Equality and hashing are structural so a
freshly built candidate can be matched against the run's unified list.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from problem_bench.persistence.base import ProblemIO

if TYPE_CHECKING:
    from problem_bench.results.planner import PlannerBenchmarkResult
    from problem_bench.results.single import SingleBenchmarkResult
    from problem_bench.statistic.base import ProblemStatistic

__all__ = ["ProblemBenchmarkKey", "ProblemBenchmarkResult"]

# (name, resolved input file)
ProblemBenchmarkKey = tuple[str, Path]


class ProblemBenchmarkResult:
    """One unique input problem under benchmark.

    Attributes:
        planner_benchmark_result: Owning run.
        name: Input file base name without extension.
        problem_io: Codec used to read the input and write outputs.
        write_output_solution_enabled: Write the best solution per single run.
        input_solution_file: Input problem file.
        problem_statistics: Statistics requested for this problem.
        single_benchmark_results: Linked single benchmarks, in link order.

    """

    def __init__(
        self,
        planner_benchmark_result: PlannerBenchmarkResult,
        name: str,
        input_solution_file: Path,
        problem_io: ProblemIO,
        write_output_solution_enabled: bool = False,
    ) -> None:
        self.planner_benchmark_result = planner_benchmark_result
        self.name = name
        self.input_solution_file = Path(input_solution_file)
        self.problem_io = problem_io
        self.write_output_solution_enabled = write_output_solution_enabled
        self.problem_statistics: list[ProblemStatistic] = []
        self.single_benchmark_results: list[SingleBenchmarkResult] = []

    @property
    def key(self) -> ProblemBenchmarkKey:
        """Canonical identity within the owning run."""
        return (self.name, self.input_solution_file.resolve())

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ProblemBenchmarkResult):
            return NotImplemented
        return (
            self.planner_benchmark_result is other.planner_benchmark_result
            and self.key == other.key
        )

    def __hash__(self) -> int:
        return hash((id(self.planner_benchmark_result), self.key))

    def __repr__(self) -> str:
        return f"ProblemBenchmarkResult({self.name!r}, {str(self.input_solution_file)!r})"
