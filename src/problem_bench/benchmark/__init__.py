"""Benchmark run assembly.

Builds the shared problem benchmarks of every solver benchmark and links
each solver/problem pairing into a single benchmark.
"""

from problem_bench.benchmark.exceptions import BenchmarkError, DuplicateSolverBenchmarkError
from problem_bench.benchmark.planner_builder import (
    build_planner_benchmark,
    resolve_solver_benchmark_configs,
)
from problem_bench.benchmark.problem_builder import (
    build_problem_benchmark_list,
    link_single_benchmark,
)
from problem_bench.benchmark.utils import get_base_name

__all__ = [
    "BenchmarkError",
    "DuplicateSolverBenchmarkError",
    "build_planner_benchmark",
    "build_problem_benchmark_list",
    "get_base_name",
    "link_single_benchmark",
    "resolve_solver_benchmark_configs",
]
