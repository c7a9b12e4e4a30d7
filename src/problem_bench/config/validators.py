"""Field validation utilities for YAML configuration parsing.

This module provides a fluent API for validating and extracting fields
from configuration dictionaries with type checking and error handling.
"""

from __future__ import annotations

from typing import Any, TypeVar, overload

from problem_bench.config.exceptions import ConfigurationError

__all__ = ["FieldValidator"]

T = TypeVar("T")


class FieldValidator:
    """Fluent validator for configuration dictionary fields.

    Example:
        v = FieldValidator(data, "solver_benchmarks[0]")
        name = v.optional("name", str, transform=str.strip)
        files = v.optional_list("input_solution_files", str)

    """

    def __init__(self, data: dict[str, Any], context: str) -> None:
        """Initialize the validator with data and context.

        Args:
            data: Dictionary containing fields to validate.
            context: Context string for error messages.

        """
        self._data = data
        self._context = context

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    @property
    def context(self) -> str:
        return self._context

    @overload
    def optional(
        self,
        field: str,
        expected_type: type[T],
        *,
        default: T,
        transform: Any | None = None,
    ) -> T: ...

    @overload
    def optional(
        self,
        field: str,
        expected_type: type[T],
        *,
        default: None = None,
        transform: Any | None = None,
    ) -> T | None: ...

    def optional(
        self,
        field: str,
        expected_type: type[T],
        *,
        default: T | None = None,
        transform: Any | None = None,
    ) -> T | None:
        """Validate and extract an optional field.

        Args:
            field: Name of the field to validate.
            expected_type: Expected type of the field value.
            default: Default value if field is not present.
            transform: Optional callable to transform the value.

        Returns:
            The validated value, or default if not present.

        Raises:
            ConfigurationError: If field is present but has wrong type.

        """
        value = self._data.get(field)

        if value is None:
            return default

        if not isinstance(value, expected_type):
            raise ConfigurationError(
                f"Invalid '{field}': expected {expected_type.__name__}, "
                f"got {type(value).__name__} in {self._context}"
            )

        if transform is not None:
            value = transform(value)

        return value  # type: ignore[return-value]

    def optional_list(
        self,
        field: str,
        item_type: type[T] | None = None,
    ) -> list[T] | None:
        """Validate and extract an optional list field.

        An empty list is returned as an empty list, not None: it still
        counts as set for mutually exclusive options.

        Args:
            field: Name of the field to validate.
            item_type: Expected type of list items (optional).

        Returns:
            The validated list, or None if not present.

        Raises:
            ConfigurationError: If field is present but not a list or contains
                items of wrong type.

        """
        value = self._data.get(field)

        if value is None:
            return None

        if not isinstance(value, list):
            raise ConfigurationError(
                f"Invalid '{field}': expected list in {self._context}"
            )

        if item_type is not None and not all(
            isinstance(item, item_type) for item in value
        ):
            raise ConfigurationError(
                f"Invalid '{field}': all items must be {item_type.__name__} in {self._context}"
            )

        return value

    def require_list(self, field: str, *, non_empty: bool = True) -> list[Any]:
        """Validate and extract a required list field.

        Raises:
            ConfigurationError: If field is missing, not a list, or empty when
                non_empty is True.

        """
        if field not in self._data:
            raise ConfigurationError(
                f"Missing required field '{field}' in {self._context}"
            )

        value = self._data[field]

        if not isinstance(value, list):
            raise ConfigurationError(
                f"Invalid '{field}': expected list, "
                f"got {type(value).__name__} in {self._context}"
            )

        if non_empty and not value:
            raise ConfigurationError(f"Empty '{field}' list in {self._context}")

        return value

    def optional_mapping(self, field: str) -> dict[str, Any] | None:
        """Validate and extract an optional mapping field.

        Raises:
            ConfigurationError: If field is present but not a mapping.

        """
        value = self._data.get(field)

        if value is None:
            return None

        if not isinstance(value, dict):
            raise ConfigurationError(
                f"Invalid '{field}': expected mapping in {self._context}"
            )

        return value

    def require_mapping(self) -> dict[str, Any]:
        """Validate that the data is a dictionary/mapping.

        Raises:
            ConfigurationError: If data is not a dict.

        """
        if not isinstance(self._data, dict):
            raise ConfigurationError(
                f"Invalid structure: expected mapping, "
                f"got {type(self._data).__name__} in {self._context}"
            )
        return self._data
