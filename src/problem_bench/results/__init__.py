"""Result object graph of a planner benchmark run."""

from problem_bench.results.planner import PlannerBenchmarkResult
from problem_bench.results.problem import ProblemBenchmarkResult
from problem_bench.results.single import SingleBenchmarkResult
from problem_bench.results.solver import SolverBenchmarkResult

__all__ = [
    "PlannerBenchmarkResult",
    "ProblemBenchmarkResult",
    "SingleBenchmarkResult",
    "SolverBenchmarkResult",
]
