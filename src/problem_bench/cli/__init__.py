"""Command-line interface for problem-bench."""

from problem_bench.cli.main import main

__all__ = ["main"]
