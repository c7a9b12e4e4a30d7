"""Shared Pydantic base model."""

from problem_bench.models.base import BaseSchema

__all__ = ["BaseSchema"]
