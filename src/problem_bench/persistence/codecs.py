"""Built-in solution codecs.

YamlProblemIO is the default codec. Documents it writes carry the solution
class name under ``type`` so they can be validated back into the registered
pydantic model when read.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from problem_bench.logging_config import get_logger
from problem_bench.persistence.base import ProblemIO
from problem_bench.persistence.exceptions import ProblemIOError
from problem_bench.persistence.registry import register_problem_io

__all__ = ["JsonProblemIO", "YamlProblemIO"]

logger = get_logger(__name__)

TYPE_TAG = "type"


class _TaggedProblemIO(ProblemIO):
    """Shared tagging logic for mapping-based text codecs."""

    def __init__(self, annotated_classes: tuple[type[BaseModel], ...] = ()) -> None:
        self.annotated_classes = tuple(annotated_classes)
        self._classes_by_tag = {cls.__name__: cls for cls in self.annotated_classes}

    def _decode(self, data: Any, path: Path) -> Any:
        if not isinstance(data, dict):
            return data
        tag = data.get(TYPE_TAG)
        solution_class = self._classes_by_tag.get(tag) if isinstance(tag, str) else None
        if solution_class is None:
            return data
        payload = {k: v for k, v in data.items() if k != TYPE_TAG}
        try:
            return solution_class.model_validate(payload)
        except ValidationError as e:
            raise ProblemIOError(
                f"Invalid {tag} solution in {path}: {e}"
            ) from e

    def _encode(self, solution: Any) -> Any:
        if isinstance(solution, BaseModel):
            data = solution.model_dump(mode="json")
            if type(solution) in self.annotated_classes:
                data = {TYPE_TAG: type(solution).__name__, **data}
            return data
        return solution

    def __repr__(self) -> str:
        names = [cls.__name__ for cls in self.annotated_classes]
        return f"{type(self).__name__}(annotated_classes={names})"


@register_problem_io("yaml")
class YamlProblemIO(_TaggedProblemIO):
    """Default codec: YAML documents, optionally tagged with a solution class."""

    @property
    def file_extension(self) -> str:
        return "yaml"

    def read_solution(self, path: Path) -> Any:
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ProblemIOError(f"Failed to parse YAML solution {path}: {e}") from e
        except OSError as e:
            raise ProblemIOError(f"Failed to read solution {path}: {e}") from e
        logger.debug("solution_read", path=str(path), codec="yaml")
        return self._decode(data, path)

    def write_solution(self, solution: Any, path: Path) -> None:
        path = Path(path)
        try:
            with path.open("w", encoding="utf-8") as f:
                yaml.safe_dump(self._encode(solution), f, sort_keys=False)
        except OSError as e:
            raise ProblemIOError(f"Failed to write solution {path}: {e}") from e
        logger.debug("solution_written", path=str(path), codec="yaml")


@register_problem_io("json")
class JsonProblemIO(_TaggedProblemIO):
    """JSON documents, untagged unless annotated classes are given."""

    @property
    def file_extension(self) -> str:
        return "json"

    def read_solution(self, path: Path) -> Any:
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ProblemIOError(f"Failed to parse JSON solution {path}: {e}") from e
        except OSError as e:
            raise ProblemIOError(f"Failed to read solution {path}: {e}") from e
        logger.debug("solution_read", path=str(path), codec="json")
        return self._decode(data, path)

    def write_solution(self, solution: Any, path: Path) -> None:
        path = Path(path)
        try:
            with path.open("w", encoding="utf-8") as f:
                json.dump(self._encode(solution), f, indent=2, default=str)
        except OSError as e:
            raise ProblemIOError(f"Failed to write solution {path}: {e}") from e
        logger.debug("solution_written", path=str(path), codec="json")
