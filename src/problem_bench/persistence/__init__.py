"""Solution file codecs and their resolution from configuration."""

from problem_bench.persistence.base import ProblemIO
from problem_bench.persistence.codecs import JsonProblemIO, YamlProblemIO
from problem_bench.persistence.exceptions import ProblemIOError
from problem_bench.persistence.registry import (
    get_problem_io_factory,
    get_solution_class,
    register_problem_io,
    register_solution_class,
    registered_problem_io_names,
)
from problem_bench.persistence.resolver import resolve_problem_io

__all__ = [
    "JsonProblemIO",
    "ProblemIO",
    "ProblemIOError",
    "YamlProblemIO",
    "get_problem_io_factory",
    "get_solution_class",
    "register_problem_io",
    "register_solution_class",
    "registered_problem_io_names",
    "resolve_problem_io",
]
