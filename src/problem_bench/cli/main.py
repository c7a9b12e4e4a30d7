"""CLI main entry point."""

import sys

from problem_bench.benchmark.planner_builder import build_planner_benchmark
from problem_bench.cli.formatters import format_planner_benchmark
from problem_bench.cli.parser import create_parser
from problem_bench.config.loaders.planner import load_planner_benchmark
from problem_bench.config.settings import get_settings
from problem_bench.exceptions import ProblemBenchError
from problem_bench.logging_config import configure_logging, get_logger

__all__ = ["main"]

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI application.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, 1 for configuration errors).

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    verbose = settings.verbose if args.verbose is None else args.verbose
    json_logs = settings.json_logs if args.json_logs is None else args.json_logs
    configure_logging(verbose=verbose, json_output=json_logs)

    try:
        config = load_planner_benchmark(args.config)
        result = build_planner_benchmark(config)
    except FileNotFoundError as e:
        logger.error("config_not_found", error=str(e))
        return 1
    except OSError as e:
        logger.error("config_unreadable", error=str(e))
        return 1
    except ProblemBenchError as e:
        logger.error("benchmark_setup_failed", error=str(e), error_type=type(e).__name__)
        return 1

    print(format_planner_benchmark(result, json_output=args.json_output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
