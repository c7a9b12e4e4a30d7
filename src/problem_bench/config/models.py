"""Configuration models for planner benchmark definitions.

Every field of the inheritable configs is optional: ``None`` means the value
is not resolved yet and may be inherited from a base config. Configs are
frozen; ``inherit`` returns a new config instead of mutating the receiver.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ConfigDict, Field, field_validator, model_validator

from problem_bench.config.defaults import DEFAULT_PLANNER_BENCHMARK_NAME
from problem_bench.config.inheritance import (
    inherit_mergeable_list_property,
    inherit_mergeable_mapping_property,
    inherit_overwritable_property,
)
from problem_bench.models.base import BaseSchema
from problem_bench.statistic.types import ProblemStatisticType

__all__ = [
    "PlannerBenchmarkConfig",
    "ProblemBenchmarksConfig",
    "SolverBenchmarkConfig",
]


class ProblemBenchmarksConfig(BaseSchema):
    """Input problems, I/O strategy and statistics of a solver benchmark.

    Attributes:
        problem_io: Name of a registered ProblemIO codec.
        annotated_classes: Names of registered solution classes for the
            default YAML codec. Mutually exclusive with problem_io.
        write_output_solution_enabled: Write the best solution of every
            single benchmark. Defaults to False once resolved.
        input_solution_files: Input problem files, in benchmark order.
        problem_statistic_types: Statistics to collect for every problem.

    """

    model_config = ConfigDict(frozen=True)

    problem_io: str | None = Field(default=None, description="Registered codec name")
    annotated_classes: list[str] | None = Field(
        default=None, description="Registered solution class names"
    )
    write_output_solution_enabled: bool | None = None
    input_solution_files: list[Path] | None = None
    problem_statistic_types: list[ProblemStatisticType] | None = None

    def inherit(self, inherited: ProblemBenchmarksConfig) -> ProblemBenchmarksConfig:
        """Merge this config over an inherited base config.

        Scalar fields keep this config's value when set. List fields keep
        this config's items first and append inherited items not already
        present.

        Args:
            inherited: The base config.

        Returns:
            A new merged config.

        """
        return self.model_copy(
            update={
                "problem_io": inherit_overwritable_property(
                    self.problem_io, inherited.problem_io
                ),
                "annotated_classes": inherit_mergeable_list_property(
                    self.annotated_classes, inherited.annotated_classes
                ),
                "write_output_solution_enabled": inherit_overwritable_property(
                    self.write_output_solution_enabled,
                    inherited.write_output_solution_enabled,
                ),
                "input_solution_files": inherit_mergeable_list_property(
                    self.input_solution_files, inherited.input_solution_files
                ),
                "problem_statistic_types": inherit_mergeable_list_property(
                    self.problem_statistic_types, inherited.problem_statistic_types
                ),
            }
        )


class SolverBenchmarkConfig(BaseSchema):
    """One solver configuration to compare.

    Attributes:
        name: Display name, generated from the position when unset.
        solver: Solver settings, passed through to the solving engine.
        problem_benchmarks: Problems this solver is benchmarked on.

    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    solver: dict[str, Any] | None = None
    problem_benchmarks: ProblemBenchmarksConfig | None = None

    @field_validator("name")
    @classmethod
    def validate_name_not_blank(cls, v: str | None) -> str | None:
        """Reject names that are empty after stripping."""
        if v is not None and not v:
            raise ValueError("Solver benchmark name must not be empty")
        return v

    def inherit(self, inherited: SolverBenchmarkConfig) -> SolverBenchmarkConfig:
        """Merge this config over an inherited base config.

        The name is never inherited: every solver benchmark names itself.

        Args:
            inherited: The base config.

        Returns:
            A new merged config.

        """
        if self.problem_benchmarks is None:
            problem_benchmarks = inherited.problem_benchmarks
        elif inherited.problem_benchmarks is None:
            problem_benchmarks = self.problem_benchmarks
        else:
            problem_benchmarks = self.problem_benchmarks.inherit(
                inherited.problem_benchmarks
            )
        return self.model_copy(
            update={
                "solver": inherit_mergeable_mapping_property(
                    self.solver, inherited.solver
                ),
                "problem_benchmarks": problem_benchmarks,
            }
        )


class PlannerBenchmarkConfig(BaseSchema):
    """Top-level planner benchmark configuration.

    Attributes:
        name: Benchmark run name.
        benchmark_directory: Output directory, taken from settings when unset.
        inherited_solver_benchmark: Base config every solver benchmark inherits.
        solver_benchmarks: Solver configurations to compare.

    """

    name: str = DEFAULT_PLANNER_BENCHMARK_NAME
    benchmark_directory: Path | None = None
    inherited_solver_benchmark: SolverBenchmarkConfig | None = None
    solver_benchmarks: list[SolverBenchmarkConfig]

    @model_validator(mode="after")
    def validate_at_least_one_solver_benchmark(self) -> PlannerBenchmarkConfig:
        """Ensure at least one solver benchmark is defined."""
        if not self.solver_benchmarks:
            raise ValueError("At least one solver benchmark must be defined")
        return self
