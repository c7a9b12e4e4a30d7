"""Unit tests for building problem benchmarks of a solver benchmark.

Tests validation, problem I/O resolution, deduplication across solver
benchmarks and single benchmark linking.
"""

import os
from pathlib import Path

import pytest

from problem_bench.benchmark.problem_builder import (
    build_problem_benchmark_list,
    link_single_benchmark,
)
from problem_bench.config.exceptions import (
    ConfigConflictError,
    InputNotFoundError,
    MissingInputError,
)
from problem_bench.config.models import ProblemBenchmarksConfig
from problem_bench.persistence.codecs import JsonProblemIO, YamlProblemIO
from problem_bench.results.planner import PlannerBenchmarkResult
from problem_bench.results.solver import SolverBenchmarkResult
from problem_bench.statistic.problem_statistics import (
    BestScoreProblemStatistic,
    MemoryUseProblemStatistic,
)
from problem_bench.statistic.types import ProblemStatisticType


def _add_solver(planner: PlannerBenchmarkResult, name: str) -> SolverBenchmarkResult:
    solver = SolverBenchmarkResult(planner, name)
    planner.solver_benchmark_results.append(solver)
    return solver


class TestValidation:
    """Tests for configuration validation before building."""

    def test_unset_input_files_raises(
        self,
        planner_benchmark_result: PlannerBenchmarkResult,
        solver_benchmark_result: SolverBenchmarkResult,
    ) -> None:
        """Test that an unset input list fails and names the solver."""
        with pytest.raises(MissingInputError, match="tabu-search"):
            build_problem_benchmark_list(
                ProblemBenchmarksConfig(),
                planner_benchmark_result,
                solver_benchmark_result,
            )

    def test_empty_input_files_raises(
        self,
        planner_benchmark_result: PlannerBenchmarkResult,
        solver_benchmark_result: SolverBenchmarkResult,
    ) -> None:
        """Test that an empty input list fails like an unset one."""
        with pytest.raises(MissingInputError) as exc_info:
            build_problem_benchmark_list(
                ProblemBenchmarksConfig(input_solution_files=[]),
                planner_benchmark_result,
                solver_benchmark_result,
            )
        assert exc_info.value.solver_benchmark_name == "tabu-search"

    def test_missing_input_file_raises(
        self,
        data_dir: Path,
        planner_benchmark_result: PlannerBenchmarkResult,
        solver_benchmark_result: SolverBenchmarkResult,
    ) -> None:
        """Test that a nonexistent input file fails and names the file."""
        missing = data_dir / "missing.yaml"
        config = ProblemBenchmarksConfig(
            input_solution_files=[data_dir / "dataA.yaml", missing]
        )
        with pytest.raises(InputNotFoundError, match="missing.yaml") as exc_info:
            build_problem_benchmark_list(
                config, planner_benchmark_result, solver_benchmark_result
            )
        assert exc_info.value.input_solution_file == missing

    def test_unreadable_input_file_raises(
        self,
        data_dir: Path,
        planner_benchmark_result: PlannerBenchmarkResult,
        solver_benchmark_result: SolverBenchmarkResult,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that an existing input without read permission fails."""
        unreadable = data_dir / "dataB.yaml"
        real_access = os.access
        monkeypatch.setattr(
            os,
            "access",
            lambda path, mode: Path(path) != unreadable and real_access(path, mode),
        )
        config = ProblemBenchmarksConfig(
            input_solution_files=[data_dir / "dataA.yaml", unreadable]
        )
        with pytest.raises(InputNotFoundError, match="dataB.yaml") as exc_info:
            build_problem_benchmark_list(
                config, planner_benchmark_result, solver_benchmark_result
            )
        assert exc_info.value.input_solution_file == unreadable

    def test_conflicting_problem_io_raises(
        self,
        data_dir: Path,
        planner_benchmark_result: PlannerBenchmarkResult,
        solver_benchmark_result: SolverBenchmarkResult,
    ) -> None:
        """Test that problem I/O conflicts propagate before any input is built."""
        config = ProblemBenchmarksConfig(
            problem_io="json",
            annotated_classes=[],
            input_solution_files=[data_dir / "dataA.yaml"],
        )
        with pytest.raises(ConfigConflictError):
            build_problem_benchmark_list(
                config, planner_benchmark_result, solver_benchmark_result
            )
        assert planner_benchmark_result.unified_problem_benchmark_results == []
        assert solver_benchmark_result.single_benchmark_results == []


class TestBuildProblemBenchmarkList:
    """Tests for the built problem benchmarks."""

    def test_two_inputs_with_best_score(
        self,
        data_dir: Path,
        planner_benchmark_result: PlannerBenchmarkResult,
        solver_benchmark_result: SolverBenchmarkResult,
    ) -> None:
        """Test the dataA/dataB example with one BEST_SCORE statistic."""
        config = ProblemBenchmarksConfig(
            input_solution_files=[data_dir / "dataA.yaml", data_dir / "dataB.yaml"],
            problem_statistic_types=[ProblemStatisticType.BEST_SCORE],
        )

        problems = build_problem_benchmark_list(
            config, planner_benchmark_result, solver_benchmark_result
        )

        assert [p.name for p in problems] == ["dataA", "dataB"]
        for problem in problems:
            assert problem.write_output_solution_enabled is False
            assert isinstance(problem.problem_io, YamlProblemIO)
            assert len(problem.problem_statistics) == 1
            statistic = problem.problem_statistics[0]
            assert isinstance(statistic, BestScoreProblemStatistic)
            assert statistic.problem_benchmark_result is problem
            assert problem.planner_benchmark_result is planner_benchmark_result

    def test_problem_io_resolved_once(
        self,
        data_dir: Path,
        planner_benchmark_result: PlannerBenchmarkResult,
        solver_benchmark_result: SolverBenchmarkResult,
    ) -> None:
        """Test that every problem of one build shares the resolved codec."""
        config = ProblemBenchmarksConfig(
            problem_io="json",
            input_solution_files=[data_dir / "dataA.yaml", data_dir / "dataC.json"],
        )

        problems = build_problem_benchmark_list(
            config, planner_benchmark_result, solver_benchmark_result
        )

        assert isinstance(problems[0].problem_io, JsonProblemIO)
        assert problems[0].problem_io is problems[1].problem_io

    def test_no_statistics_requested(
        self,
        data_dir: Path,
        planner_benchmark_result: PlannerBenchmarkResult,
        solver_benchmark_result: SolverBenchmarkResult,
    ) -> None:
        """Test that problems get an empty statistic list by default."""
        config = ProblemBenchmarksConfig(input_solution_files=[data_dir / "dataA.yaml"])

        problems = build_problem_benchmark_list(
            config, planner_benchmark_result, solver_benchmark_result
        )

        assert problems[0].problem_statistics == []
        assert problems[0].single_benchmark_results[0].single_statistic_map == {}

    def test_write_output_flag_is_copied(
        self,
        data_dir: Path,
        planner_benchmark_result: PlannerBenchmarkResult,
        solver_benchmark_result: SolverBenchmarkResult,
    ) -> None:
        """Test that an explicit write-output flag reaches the problem."""
        config = ProblemBenchmarksConfig(
            write_output_solution_enabled=True,
            input_solution_files=[data_dir / "dataA.yaml"],
        )

        problems = build_problem_benchmark_list(
            config, planner_benchmark_result, solver_benchmark_result
        )

        assert problems[0].write_output_solution_enabled is True

    def test_same_input_twice_in_one_config(
        self,
        data_dir: Path,
        planner_benchmark_result: PlannerBenchmarkResult,
        solver_benchmark_result: SolverBenchmarkResult,
    ) -> None:
        """Test that a repeated input is kept positionally and shared."""
        input_file = data_dir / "dataA.yaml"
        config = ProblemBenchmarksConfig(input_solution_files=[input_file, input_file])

        problems = build_problem_benchmark_list(
            config, planner_benchmark_result, solver_benchmark_result
        )

        assert len(problems) == 2
        assert problems[0] is problems[1]
        assert len(planner_benchmark_result.unified_problem_benchmark_results) == 1
        assert len(solver_benchmark_result.single_benchmark_results) == 2


class TestDeduplication:
    """Tests for sharing problem benchmarks across solver benchmarks."""

    def test_identical_inputs_share_one_instance(
        self, data_dir: Path, planner_benchmark_result: PlannerBenchmarkResult
    ) -> None:
        """Test that two solvers with the same input share one problem benchmark."""
        config = ProblemBenchmarksConfig(
            input_solution_files=[data_dir / "dataA.yaml"],
            problem_statistic_types=[ProblemStatisticType.BEST_SCORE],
        )
        first = _add_solver(planner_benchmark_result, "first")
        second = _add_solver(planner_benchmark_result, "second")

        first_problems = build_problem_benchmark_list(config, planner_benchmark_result, first)
        second_problems = build_problem_benchmark_list(config, planner_benchmark_result, second)

        assert first_problems[0] is second_problems[0]
        unified = planner_benchmark_result.unified_problem_benchmark_results
        assert unified == [first_problems[0]]
        problem = unified[0]
        assert [s.solver_benchmark_result for s in problem.single_benchmark_results] == [
            first,
            second,
        ]
        # The discarded candidate's statistics never replace the shared ones
        assert len(problem.problem_statistics) == 1

    def test_equivalent_paths_share_one_instance(
        self, data_dir: Path, planner_benchmark_result: PlannerBenchmarkResult
    ) -> None:
        """Test that differently spelled paths to one file are deduplicated."""
        (data_dir / "sub").mkdir()
        first = _add_solver(planner_benchmark_result, "first")
        second = _add_solver(planner_benchmark_result, "second")

        build_problem_benchmark_list(
            ProblemBenchmarksConfig(input_solution_files=[data_dir / "dataA.yaml"]),
            planner_benchmark_result,
            first,
        )
        build_problem_benchmark_list(
            ProblemBenchmarksConfig(
                input_solution_files=[data_dir / "sub" / ".." / "dataA.yaml"]
            ),
            planner_benchmark_result,
            second,
        )

        assert len(planner_benchmark_result.unified_problem_benchmark_results) == 1

    def test_different_inputs_are_not_merged(
        self, data_dir: Path, planner_benchmark_result: PlannerBenchmarkResult
    ) -> None:
        """Test that different inputs produce distinct problem benchmarks."""
        first = _add_solver(planner_benchmark_result, "first")
        second = _add_solver(planner_benchmark_result, "second")

        (problem_a,) = build_problem_benchmark_list(
            ProblemBenchmarksConfig(input_solution_files=[data_dir / "dataA.yaml"]),
            planner_benchmark_result,
            first,
        )
        (problem_b,) = build_problem_benchmark_list(
            ProblemBenchmarksConfig(input_solution_files=[data_dir / "dataB.yaml"]),
            planner_benchmark_result,
            second,
        )

        assert problem_a is not problem_b
        assert problem_a != problem_b
        assert planner_benchmark_result.unified_problem_benchmark_results == [
            problem_a,
            problem_b,
        ]
        assert len(problem_a.single_benchmark_results) == 1
        assert len(problem_b.single_benchmark_results) == 1

    def test_runs_do_not_share_problem_benchmarks(
        self, data_dir: Path, tmp_path: Path
    ) -> None:
        """Test that the same input in two runs yields two problem benchmarks."""
        config = ProblemBenchmarksConfig(input_solution_files=[data_dir / "dataA.yaml"])
        run_one = PlannerBenchmarkResult("one", tmp_path)
        run_two = PlannerBenchmarkResult("two", tmp_path)

        (problem_one,) = build_problem_benchmark_list(
            config, run_one, _add_solver(run_one, "solver")
        )
        (problem_two,) = build_problem_benchmark_list(
            config, run_two, _add_solver(run_two, "solver")
        )

        assert problem_one != problem_two
        assert len(run_one.unified_problem_benchmark_results) == 1
        assert len(run_two.unified_problem_benchmark_results) == 1


class TestSingleBenchmarkLinking:
    """Tests for linking solver benchmarks to problem benchmarks."""

    def test_repeated_build_creates_independent_records(
        self,
        data_dir: Path,
        planner_benchmark_result: PlannerBenchmarkResult,
        solver_benchmark_result: SolverBenchmarkResult,
    ) -> None:
        """Test that building twice for one solver links every input twice."""
        config = ProblemBenchmarksConfig(
            input_solution_files=[data_dir / "dataA.yaml", data_dir / "dataB.yaml"]
        )

        build_problem_benchmark_list(config, planner_benchmark_result, solver_benchmark_result)
        build_problem_benchmark_list(config, planner_benchmark_result, solver_benchmark_result)

        singles = solver_benchmark_result.single_benchmark_results
        assert len(singles) == 4
        assert len({id(single) for single in singles}) == 4
        for problem in planner_benchmark_result.unified_problem_benchmark_results:
            assert len(problem.single_benchmark_results) == 2
            for single in problem.single_benchmark_results:
                assert single in singles

    def test_link_appends_to_both_owners(
        self,
        data_dir: Path,
        planner_benchmark_result: PlannerBenchmarkResult,
        solver_benchmark_result: SolverBenchmarkResult,
    ) -> None:
        """Test that a linked record is appended to the solver and the problem."""
        config = ProblemBenchmarksConfig(
            input_solution_files=[data_dir / "dataA.yaml"],
            problem_statistic_types=[
                ProblemStatisticType.BEST_SCORE,
                ProblemStatisticType.MEMORY_USE,
            ],
        )
        (problem,) = build_problem_benchmark_list(
            config, planner_benchmark_result, solver_benchmark_result
        )

        single = link_single_benchmark(solver_benchmark_result, problem)

        assert solver_benchmark_result.single_benchmark_results[-1] is single
        assert problem.single_benchmark_results[-1] is single
        assert single.solver_benchmark_result is solver_benchmark_result
        assert single.problem_benchmark_result is problem
        assert set(single.single_statistic_map) == {
            ProblemStatisticType.BEST_SCORE,
            ProblemStatisticType.MEMORY_USE,
        }
        memory = problem.problem_statistics[1]
        assert isinstance(memory, MemoryUseProblemStatistic)
        assert len(memory.single_statistics) == 2
