"""CLI argument parser configuration."""

import argparse

from problem_bench import __version__

__all__ = ["create_parser"]


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        An ArgumentParser configured with all CLI options.

    """
    parser = argparse.ArgumentParser(
        prog="problem-bench",
        description=(
            "Assemble a planner benchmark run from a YAML configuration and "
            "print its solver benchmarks, shared problem benchmarks and "
            "single benchmarks."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the assembled run
  problem-bench benchmarks/nqueens.yaml

  # Machine-readable summary
  problem-bench benchmarks/nqueens.yaml --json

  # Debug logging
  problem-bench benchmarks/nqueens.yaml --verbose
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "config",
        type=str,
        help="Path to the planner benchmark YAML file.",
    )

    parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        default=False,
        help="Print the run summary as JSON.",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=None,
        help="Enable debug logging.",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Render log records as JSON.",
    )

    return parser
