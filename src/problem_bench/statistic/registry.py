"""Registered factories from statistic kind to problem statistic class."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from problem_bench.statistic.exceptions import StatisticError
from problem_bench.statistic.types import ProblemStatisticType

if TYPE_CHECKING:
    from problem_bench.statistic.base import ProblemStatistic

__all__ = [
    "get_problem_statistic_class",
    "register_problem_statistic",
    "registered_statistic_types",
]

S = TypeVar("S", bound="type[ProblemStatistic]")

_PROBLEM_STATISTIC_CLASSES: dict[ProblemStatisticType, type[ProblemStatistic]] = {}


def register_problem_statistic(
    statistic_type: ProblemStatisticType,
) -> Callable[[S], S]:
    """Class decorator registering a ProblemStatistic for a statistic kind.

    Args:
        statistic_type: Kind the decorated class implements.

    Returns:
        Decorator returning the class unchanged.

    Raises:
        StatisticError: If the kind already has a registered class.

    """

    def decorator(cls: S) -> S:
        existing = _PROBLEM_STATISTIC_CLASSES.get(statistic_type)
        if existing is not None and existing is not cls:
            raise StatisticError(
                f"Statistic type {statistic_type.value} is already registered "
                f"to {existing.__name__}"
            )
        cls.statistic_type = statistic_type
        _PROBLEM_STATISTIC_CLASSES[statistic_type] = cls
        return cls

    return decorator


def get_problem_statistic_class(
    statistic_type: ProblemStatisticType,
) -> type[ProblemStatistic]:
    """Look up the class registered for a statistic kind.

    Raises:
        StatisticError: If no class is registered for the kind.

    """
    # Built-in statistics register themselves on import
    import problem_bench.statistic.problem_statistics  # noqa: F401

    try:
        return _PROBLEM_STATISTIC_CLASSES[statistic_type]
    except KeyError:
        raise StatisticError(
            f"No problem statistic registered for {statistic_type.value}"
        ) from None


def registered_statistic_types() -> list[ProblemStatisticType]:
    """Return the statistic kinds with a registered class, in enum order."""
    import problem_bench.statistic.problem_statistics  # noqa: F401

    return [t for t in ProblemStatisticType if t in _PROBLEM_STATISTIC_CLASSES]
