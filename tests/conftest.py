"""Pytest configuration and shared fixtures for the problem-bench test suite.

Provides input solution files on disk and empty run/solver results to
build problem benchmarks against.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest

from problem_bench.config.settings import get_settings
from problem_bench.results.planner import PlannerBenchmarkResult
from problem_bench.results.solver import SolverBenchmarkResult


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Drop cached settings so environment changes apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Provide a directory holding input solution files.

    Returns:
        Directory with dataA.yaml, dataB.yaml and dataC.json.
    """
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "dataA.yaml").write_text("queens: 4\n", encoding="utf-8")
    (directory / "dataB.yaml").write_text("queens: 8\n", encoding="utf-8")
    (directory / "dataC.json").write_text('{"queens": 16}', encoding="utf-8")
    return directory


@pytest.fixture
def planner_benchmark_result(tmp_path: Path) -> PlannerBenchmarkResult:
    """Provide an empty run."""
    return PlannerBenchmarkResult("test-benchmark", tmp_path / "benchmarks")


@pytest.fixture
def solver_benchmark_result(
    planner_benchmark_result: PlannerBenchmarkResult,
) -> SolverBenchmarkResult:
    """Provide a solver benchmark registered on the run."""
    solver = SolverBenchmarkResult(planner_benchmark_result, "tabu-search")
    planner_benchmark_result.solver_benchmark_results.append(solver)
    return solver
