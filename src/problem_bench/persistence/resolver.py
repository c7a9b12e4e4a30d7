"""Resolve the ProblemIO of a problem benchmarks config."""

from __future__ import annotations

from problem_bench.config.exceptions import ConfigConflictError
from problem_bench.config.models import ProblemBenchmarksConfig
from problem_bench.logging_config import get_logger
from problem_bench.persistence.base import ProblemIO
from problem_bench.persistence.codecs import YamlProblemIO
from problem_bench.persistence.registry import get_problem_io_factory, get_solution_class

__all__ = ["resolve_problem_io"]

logger = get_logger(__name__)


def resolve_problem_io(config: ProblemBenchmarksConfig) -> ProblemIO:
    """Build the ProblemIO selected by a problem benchmarks config.

    An explicit ``problem_io`` and an ``annotated_classes`` list are
    mutually exclusive. Without an explicit codec, the default YAML codec is
    built over the annotated classes (none if the list is unset).

    Args:
        config: The problem benchmarks config.

    Returns:
        A new ProblemIO instance.

    Raises:
        ConfigConflictError: If both options are set.
        ConfigurationError: If a codec or class name is not registered.

    """
    if config.problem_io is not None and config.annotated_classes is not None:
        raise ConfigConflictError(
            f"Cannot use problem_io ({config.problem_io}) and annotated_classes "
            f"({config.annotated_classes}) together."
        )
    if config.problem_io is not None:
        problem_io = get_problem_io_factory(config.problem_io)()
    else:
        annotated = tuple(get_solution_class(name) for name in config.annotated_classes or [])
        problem_io = YamlProblemIO(annotated)
    logger.debug("problem_io_resolved", problem_io=repr(problem_io))
    return problem_io
