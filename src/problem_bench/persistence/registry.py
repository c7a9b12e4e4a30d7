"""Name-based registries for problem I/O codecs and solution classes.

Configuration refers to codecs and solution classes by name. Both
registries are filled by decorators at import time.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel

from problem_bench.config.exceptions import ConfigurationError

if TYPE_CHECKING:
    from problem_bench.persistence.base import ProblemIO

__all__ = [
    "get_problem_io_factory",
    "get_solution_class",
    "register_problem_io",
    "register_solution_class",
    "registered_problem_io_names",
]

F = TypeVar("F", bound=Callable[[], "ProblemIO"])
M = TypeVar("M", bound=type[BaseModel])

_PROBLEM_IO_FACTORIES: dict[str, Callable[[], ProblemIO]] = {}
_SOLUTION_CLASSES: dict[str, type[BaseModel]] = {}


def register_problem_io(name: str) -> Callable[[F], F]:
    """Register a zero-argument ProblemIO factory (usually the class) by name.

    Args:
        name: Name used in the ``problem_io`` config field.

    Returns:
        Decorator returning the factory unchanged.

    """

    def decorator(factory: F) -> F:
        _PROBLEM_IO_FACTORIES[name] = factory
        return factory

    return decorator


def register_solution_class(name: str | None = None) -> Callable[[M], M]:
    """Register a pydantic solution model for the default YAML codec.

    Args:
        name: Name used in the ``annotated_classes`` config field. Defaults
            to the class name. Documents are always tagged with the class name.

    Returns:
        Decorator returning the class unchanged.

    """

    def decorator(cls: M) -> M:
        _SOLUTION_CLASSES[name or cls.__name__] = cls
        return cls

    return decorator


def get_problem_io_factory(name: str) -> Callable[[], ProblemIO]:
    """Look up a registered ProblemIO factory.

    Raises:
        ConfigurationError: If no codec is registered under the name.

    """
    # Built-in codecs register themselves on import
    import problem_bench.persistence.codecs  # noqa: F401

    try:
        return _PROBLEM_IO_FACTORIES[name]
    except KeyError:
        known = ", ".join(sorted(_PROBLEM_IO_FACTORIES))
        raise ConfigurationError(
            f"Unknown problem_io '{name}'. Registered codecs are: {known}"
        ) from None


def get_solution_class(name: str) -> type[BaseModel]:
    """Look up a registered solution class.

    Raises:
        ConfigurationError: If no solution class is registered under the name.

    """
    try:
        return _SOLUTION_CLASSES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown annotated class '{name}'. "
            f"Register it with @register_solution_class()."
        ) from None


def registered_problem_io_names() -> list[str]:
    """Return the names of all registered codecs, sorted."""
    import problem_bench.persistence.codecs  # noqa: F401

    return sorted(_PROBLEM_IO_FACTORIES)
