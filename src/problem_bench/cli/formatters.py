"""Output formatting utilities for CLI."""

import json
from typing import Any

from problem_bench.results.planner import PlannerBenchmarkResult

__all__ = ["format_planner_benchmark", "summarize_planner_benchmark"]


def summarize_planner_benchmark(result: PlannerBenchmarkResult) -> dict[str, Any]:
    """Build a JSON-serializable summary of an assembled run."""
    return {
        "name": result.name,
        "benchmark_directory": str(result.benchmark_directory),
        "solver_benchmarks": [
            {
                "name": solver.name,
                "single_benchmarks": [
                    single.problem_benchmark_result.name
                    for single in solver.single_benchmark_results
                ],
            }
            for solver in result.solver_benchmark_results
        ],
        "problem_benchmarks": [
            {
                "name": problem.name,
                "input_solution_file": str(problem.input_solution_file),
                "problem_io": type(problem.problem_io).__name__,
                "write_output_solution_enabled": problem.write_output_solution_enabled,
                "statistics": [s.statistic_type.value for s in problem.problem_statistics],
                "single_benchmark_count": len(problem.single_benchmark_results),
            }
            for problem in result.unified_problem_benchmark_results
        ],
        "single_benchmark_count": result.single_benchmark_count,
    }


def format_planner_benchmark(
    result: PlannerBenchmarkResult, json_output: bool = False
) -> str:
    """Format an assembled run for output.

    Args:
        result: The assembled run.
        json_output: Whether to format as JSON.

    Returns:
        Formatted string output.

    """
    summary = summarize_planner_benchmark(result)
    if json_output:
        return json.dumps(summary, indent=2)

    lines = []
    lines.append("")
    lines.append("=" * 60)
    lines.append(f"Planner Benchmark: {summary['name']}")
    lines.append("=" * 60)
    lines.append(f"Directory: {summary['benchmark_directory']}")

    lines.append("")
    lines.append(f"Problem benchmarks ({len(summary['problem_benchmarks'])}):")
    for problem in summary["problem_benchmarks"]:
        statistics = ", ".join(problem["statistics"]) or "none"
        lines.append(f"  {problem['name']}")
        lines.append(f"    Input: {problem['input_solution_file']}")
        lines.append(f"    I/O: {problem['problem_io']}")
        lines.append(f"    Statistics: {statistics}")
        lines.append(f"    Solvers: {problem['single_benchmark_count']}")

    lines.append("")
    lines.append(f"Solver benchmarks ({len(summary['solver_benchmarks'])}):")
    for solver in summary["solver_benchmarks"]:
        lines.append(f"  {solver['name']}: {', '.join(solver['single_benchmarks'])}")

    lines.append("")
    lines.append(f"Single benchmarks: {summary['single_benchmark_count']}")
    lines.append("=" * 60)
    return "\n".join(lines)
