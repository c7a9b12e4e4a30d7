"""Planner benchmark configuration loader.

This module loads planner benchmark configurations from YAML files into
the configuration models. Relative input solution files are resolved
against the directory of the YAML file.

Example YAML:

    name: nqueens
    inherited_solver_benchmark:
      problem_benchmarks:
        input_solution_files: [data/4queens.yaml, data/8queens.yaml]
        problem_statistic_types: [BEST_SCORE]
    solver_benchmarks:
      - name: tabu-search
        solver: {acceptor: tabu, tabu_size: 7}
      - name: late-acceptance
        solver: {acceptor: late_acceptance}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from problem_bench.config.defaults import DEFAULT_PLANNER_BENCHMARK_NAME
from problem_bench.config.exceptions import ConfigurationError
from problem_bench.config.loaders._common import load_yaml_file
from problem_bench.config.models import (
    PlannerBenchmarkConfig,
    ProblemBenchmarksConfig,
    SolverBenchmarkConfig,
)
from problem_bench.config.validators import FieldValidator
from problem_bench.statistic.types import ProblemStatisticType

__all__ = ["load_planner_benchmark", "parse_planner_benchmark"]


def load_planner_benchmark(path: Path | str) -> PlannerBenchmarkConfig:
    """Load and validate a planner benchmark configuration from a YAML file.

    Args:
        path: Path to the YAML file to load.

    Returns:
        PlannerBenchmarkConfig: The parsed configuration.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If fields are missing or invalid.

    Example:
        >>> config = load_planner_benchmark("benchmarks/nqueens.yaml")
        >>> config.name
        'nqueens'

    """
    path = Path(path)
    data = load_yaml_file(path, label="Benchmark file")
    return parse_planner_benchmark(data, base_directory=path.parent, source=str(path))


def parse_planner_benchmark(
    data: dict[str, Any],
    base_directory: Path | None = None,
    source: str = "<mapping>",
) -> PlannerBenchmarkConfig:
    """Parse a dictionary into a PlannerBenchmarkConfig.

    Args:
        data: The raw dictionary from YAML parsing.
        base_directory: Directory relative input files are resolved against.
        source: Description of the data origin for error messages.

    Returns:
        PlannerBenchmarkConfig: The parsed configuration.

    Raises:
        ConfigurationError: If fields are missing or invalid.

    """
    context = f"benchmark: {source}"
    v = FieldValidator(data, context)
    v.require_mapping()

    inherited = None
    inherited_data = v.optional_mapping("inherited_solver_benchmark")
    if inherited_data is not None:
        inherited = _parse_solver_benchmark(
            inherited_data, f"inherited_solver_benchmark in {context}", base_directory
        )

    solver_benchmarks = [
        _parse_solver_benchmark(
            solver_data, f"solver_benchmarks[{index}] in {context}", base_directory
        )
        for index, solver_data in enumerate(v.require_list("solver_benchmarks"))
    ]

    benchmark_directory = v.optional("benchmark_directory", str)
    try:
        return PlannerBenchmarkConfig(
            name=v.optional(
                "name", str, default=DEFAULT_PLANNER_BENCHMARK_NAME, transform=str.strip
            ),
            benchmark_directory=Path(benchmark_directory) if benchmark_directory else None,
            inherited_solver_benchmark=inherited,
            solver_benchmarks=solver_benchmarks,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid planner benchmark in {context}: {e}") from e


def _parse_solver_benchmark(
    data: Any, context: str, base_directory: Path | None
) -> SolverBenchmarkConfig:
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid solver benchmark: expected mapping in {context}")
    v = FieldValidator(data, context)

    problem_benchmarks = None
    problem_data = v.optional_mapping("problem_benchmarks")
    if problem_data is not None:
        problem_benchmarks = _parse_problem_benchmarks(
            problem_data, f"problem_benchmarks in {context}", base_directory
        )

    try:
        return SolverBenchmarkConfig(
            name=v.optional("name", str),
            solver=v.optional_mapping("solver"),
            problem_benchmarks=problem_benchmarks,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid solver benchmark in {context}: {e}") from e


def _parse_problem_benchmarks(
    data: dict[str, Any], context: str, base_directory: Path | None
) -> ProblemBenchmarksConfig:
    v = FieldValidator(data, context)

    input_files = v.optional_list("input_solution_files", str)
    input_solution_files = None
    if input_files is not None:
        input_solution_files = [_resolve_input(f, base_directory) for f in input_files]

    statistic_names = v.optional_list("problem_statistic_types", str)
    problem_statistic_types = None
    if statistic_names is not None:
        problem_statistic_types = [
            _parse_statistic_type(name, context) for name in statistic_names
        ]

    return ProblemBenchmarksConfig(
        problem_io=v.optional("problem_io", str, transform=str.strip),
        annotated_classes=v.optional_list("annotated_classes", str),
        write_output_solution_enabled=v.optional("write_output_solution_enabled", bool),
        input_solution_files=input_solution_files,
        problem_statistic_types=problem_statistic_types,
    )


def _resolve_input(value: str, base_directory: Path | None) -> Path:
    path = Path(value).expanduser()
    if base_directory is not None and not path.is_absolute():
        path = base_directory / path
    return path


def _parse_statistic_type(name: str, context: str) -> ProblemStatisticType:
    try:
        return ProblemStatisticType(name.strip().upper())
    except ValueError:
        valid_types = [t.value for t in ProblemStatisticType]
        raise ConfigurationError(
            f"Invalid problem statistic type '{name}' in {context}. "
            f"Valid values are: {', '.join(valid_types)}"
        ) from None
