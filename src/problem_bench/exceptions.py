"""Base exceptions for problem-bench.

This module defines the root exception hierarchy for the entire
problem-bench package. All domain-specific exceptions should
inherit from ProblemBenchError.
"""

__all__ = ["ProblemBenchError"]


class ProblemBenchError(Exception):
    """Base exception for all problem-bench errors.

    Provides a common exception type for clients to catch framework errors.
    """

    pass
