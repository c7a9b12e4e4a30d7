"""Per-field inheritance rules for configuration models.

A derived config is combined with a base config field by field. Scalar
fields are overwritable: the derived value wins when set. List fields are
mergeable: the derived items keep their positions and the inherited items
not already present are appended after them. ``None`` always means unset.

These functions never mutate their arguments.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

__all__ = [
    "inherit_mergeable_list_property",
    "inherit_mergeable_mapping_property",
    "inherit_overwritable_property",
]

T = TypeVar("T")


def inherit_overwritable_property(original: T | None, inherited: T | None) -> T | None:
    """Return the original value if set, otherwise the inherited one.

    Args:
        original: Value declared on the derived config.
        inherited: Value declared on the base config.

    Returns:
        The effective value, or None if neither side sets it.

    """
    if original is not None:
        return original
    return inherited


def inherit_mergeable_list_property(
    original: Sequence[T] | None, inherited: Sequence[T] | None
) -> list[T] | None:
    """Merge two optional lists, original items first.

    Args:
        original: List declared on the derived config.
        inherited: List declared on the base config.

    Returns:
        A new list holding the original items followed by every inherited
        item not already present, or None if both sides are unset.

    Example:
        >>> inherit_mergeable_list_property(["b", "a"], ["a", "c"])
        ['b', 'a', 'c']

    """
    if original is None:
        return None if inherited is None else list(inherited)
    merged = list(original)
    if inherited is not None:
        for item in inherited:
            if item not in merged:
                merged.append(item)
    return merged


def inherit_mergeable_mapping_property(
    original: Mapping[str, Any] | None, inherited: Mapping[str, Any] | None
) -> dict[str, Any] | None:
    """Merge two optional mappings, original keys win.

    Args:
        original: Mapping declared on the derived config.
        inherited: Mapping declared on the base config.

    Returns:
        A new dict, or None if both sides are unset.

    """
    if original is None and inherited is None:
        return None
    merged = dict(inherited or {})
    merged.update(original or {})
    return merged
