"""Assemble a planner benchmark run from its configuration."""

from __future__ import annotations

from problem_bench.benchmark.exceptions import DuplicateSolverBenchmarkError
from problem_bench.benchmark.problem_builder import build_problem_benchmark_list
from problem_bench.config.defaults import SOLVER_BENCHMARK_NAME_PREFIX
from problem_bench.config.exceptions import MissingInputError
from problem_bench.config.models import PlannerBenchmarkConfig, SolverBenchmarkConfig
from problem_bench.config.settings import get_settings
from problem_bench.logging_config import get_logger
from problem_bench.results.planner import PlannerBenchmarkResult
from problem_bench.results.solver import SolverBenchmarkResult

__all__ = ["build_planner_benchmark", "resolve_solver_benchmark_configs"]

logger = get_logger(__name__)


def resolve_solver_benchmark_configs(
    config: PlannerBenchmarkConfig,
) -> list[SolverBenchmarkConfig]:
    """Apply inheritance and naming to every solver benchmark config.

    Args:
        config: The planner benchmark config.

    Returns:
        Fully inherited, named solver benchmark configs in declared order.

    Raises:
        DuplicateSolverBenchmarkError: If two solver benchmarks share a name.

    """
    resolved: list[SolverBenchmarkConfig] = []
    seen_names: set[str] = set()
    for index, solver_config in enumerate(config.solver_benchmarks):
        if config.inherited_solver_benchmark is not None:
            solver_config = solver_config.inherit(config.inherited_solver_benchmark)
        if solver_config.name is None:
            solver_config = solver_config.model_copy(
                update={"name": f"{SOLVER_BENCHMARK_NAME_PREFIX}{index}"}
            )
        if solver_config.name in seen_names:
            raise DuplicateSolverBenchmarkError(
                f"The solver benchmark name ({solver_config.name}) is used in more "
                f"than 1 solver benchmark."
            )
        seen_names.add(solver_config.name)
        resolved.append(solver_config)
    return resolved


def build_planner_benchmark(config: PlannerBenchmarkConfig) -> PlannerBenchmarkResult:
    """Build the result graph of a planner benchmark run.

    Any failure aborts the whole setup: a missing problem invalidates the
    comparison between solver benchmarks.

    Args:
        config: The planner benchmark config.

    Returns:
        The assembled run with its unified problem benchmark list.

    Raises:
        ConfigurationError: On any invalid or incomplete configuration.

    """
    benchmark_directory = config.benchmark_directory or get_settings().benchmark_directory
    planner_benchmark_result = PlannerBenchmarkResult(config.name, benchmark_directory)
    log = logger.bind(planner_benchmark=config.name)

    for solver_config in resolve_solver_benchmark_configs(config):
        solver_benchmark_result = SolverBenchmarkResult(
            planner_benchmark_result, solver_config.name, solver_config.solver
        )
        if solver_config.problem_benchmarks is None:
            raise MissingInputError(solver_benchmark_result.name)
        build_problem_benchmark_list(
            solver_config.problem_benchmarks,
            planner_benchmark_result,
            solver_benchmark_result,
        )
        planner_benchmark_result.solver_benchmark_results.append(solver_benchmark_result)

    log.info(
        "planner_benchmark_built",
        solver_benchmarks=len(planner_benchmark_result.solver_benchmark_results),
        problem_benchmarks=len(planner_benchmark_result.unified_problem_benchmark_results),
        single_benchmarks=planner_benchmark_result.single_benchmark_count,
    )
    return planner_benchmark_result
