"""Configuration loaders for planner benchmark YAML files."""

from problem_bench.config.loaders.planner import (
    load_planner_benchmark,
    parse_planner_benchmark,
)

__all__ = ["load_planner_benchmark", "parse_planner_benchmark"]
