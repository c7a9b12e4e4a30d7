"""Problem I/O capability.

A ProblemIO reads an input solution file into a solution object and writes
an output solution back to disk. Implementations are selected by name
through the registry in ``problem_bench.persistence.registry``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

__all__ = ["ProblemIO"]


class ProblemIO(ABC):
    """Abstract base class for solution file codecs."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """File extension (without dot) of the files this codec handles."""
        pass

    @abstractmethod
    def read_solution(self, path: Path) -> Any:
        """Read a solution from a file.

        Args:
            path: File to read.

        Returns:
            The decoded solution.

        """
        pass

    @abstractmethod
    def write_solution(self, solution: Any, path: Path) -> None:
        """Write a solution to a file.

        Args:
            solution: Solution to encode.
            path: Destination file, overwritten if present.

        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
