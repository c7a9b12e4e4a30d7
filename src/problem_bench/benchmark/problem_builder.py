"""Build the problem benchmarks of a solver benchmark.

Two solver benchmarks that declare the same input file share one
ProblemBenchmarkResult instance: candidates are registered on the owning
run, which hands back the existing entry when there is one.
"""

from __future__ import annotations

from pathlib import Path

from problem_bench.benchmark.utils import get_base_name, is_readable_input
from problem_bench.config.defaults import DEFAULT_WRITE_OUTPUT_SOLUTION_ENABLED
from problem_bench.config.exceptions import InputNotFoundError, MissingInputError
from problem_bench.config.models import ProblemBenchmarksConfig
from problem_bench.logging_config import get_logger
from problem_bench.persistence.base import ProblemIO
from problem_bench.persistence.resolver import resolve_problem_io
from problem_bench.results.planner import PlannerBenchmarkResult
from problem_bench.results.problem import ProblemBenchmarkResult
from problem_bench.results.single import SingleBenchmarkResult
from problem_bench.results.solver import SolverBenchmarkResult

__all__ = ["build_problem_benchmark_list", "link_single_benchmark"]

logger = get_logger(__name__)


def build_problem_benchmark_list(
    config: ProblemBenchmarksConfig,
    planner_benchmark_result: PlannerBenchmarkResult,
    solver_benchmark_result: SolverBenchmarkResult,
) -> list[ProblemBenchmarkResult]:
    """Build or reuse a problem benchmark per input and link it to the solver.

    Args:
        config: Fully inherited problem benchmarks config of the solver.
        planner_benchmark_result: Run owning the unified problem list.
        solver_benchmark_result: Solver benchmark to link every problem to.

    Returns:
        One problem benchmark per declared input, in declared order.

    Raises:
        MissingInputError: If no input solution file is configured.
        ConfigConflictError: If problem_io and annotated_classes are both set.
        InputNotFoundError: If an input solution file does not exist.

    """
    _validate(config, solver_benchmark_result)
    problem_io = resolve_problem_io(config)
    problem_benchmark_results: list[ProblemBenchmarkResult] = []
    for input_solution_file in config.input_solution_files:
        if not is_readable_input(input_solution_file):
            raise InputNotFoundError(input_solution_file)
        candidate = _build_problem_benchmark(
            config, planner_benchmark_result, problem_io, input_solution_file
        )
        problem_benchmark_result = planner_benchmark_result.register_problem_benchmark(
            candidate
        )
        link_single_benchmark(solver_benchmark_result, problem_benchmark_result)
        problem_benchmark_results.append(problem_benchmark_result)

    logger.info(
        "problem_benchmarks_built",
        solver=solver_benchmark_result.name,
        problems=[p.name for p in problem_benchmark_results],
    )
    return problem_benchmark_results


def _validate(
    config: ProblemBenchmarksConfig, solver_benchmark_result: SolverBenchmarkResult
) -> None:
    if not config.input_solution_files:
        raise MissingInputError(solver_benchmark_result.name)


def _build_problem_benchmark(
    config: ProblemBenchmarksConfig,
    planner_benchmark_result: PlannerBenchmarkResult,
    problem_io: ProblemIO,
    input_solution_file: Path,
) -> ProblemBenchmarkResult:
    write_output_solution_enabled = config.write_output_solution_enabled
    if write_output_solution_enabled is None:
        write_output_solution_enabled = DEFAULT_WRITE_OUTPUT_SOLUTION_ENABLED
    problem_benchmark_result = ProblemBenchmarkResult(
        planner_benchmark_result,
        name=get_base_name(input_solution_file),
        input_solution_file=input_solution_file,
        problem_io=problem_io,
        write_output_solution_enabled=write_output_solution_enabled,
    )
    problem_benchmark_result.problem_statistics = [
        statistic_type.create(problem_benchmark_result)
        for statistic_type in config.problem_statistic_types or []
    ]
    return problem_benchmark_result


def link_single_benchmark(
    solver_benchmark_result: SolverBenchmarkResult,
    problem_benchmark_result: ProblemBenchmarkResult,
) -> SingleBenchmarkResult:
    """Create a single benchmark for a solver/problem pairing.

    Never deduplicates: linking the same pairing twice yields two records,
    each one an independent run.

    Args:
        solver_benchmark_result: Solver side of the pairing.
        problem_benchmark_result: Problem side of the pairing.

    Returns:
        The new single benchmark, appended to both owners.

    """
    single_benchmark_result = SingleBenchmarkResult(
        solver_benchmark_result, problem_benchmark_result
    )
    single_benchmark_result.init_single_statistic_map()
    solver_benchmark_result.single_benchmark_results.append(single_benchmark_result)
    problem_benchmark_result.single_benchmark_results.append(single_benchmark_result)
    return single_benchmark_result
