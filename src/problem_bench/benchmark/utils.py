"""Shared utilities for the benchmark system."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["get_base_name", "is_readable_input"]


def get_base_name(path: Path | str) -> str:
    """Return the file name of a path without its last extension.

    A name whose only dot is the leading one, such as ``.hidden``, has no
    extension and is returned whole, so every problem gets a non-empty name.

    Example:
        >>> get_base_name("data/usa_tsp.tar.gz")
        'usa_tsp.tar'

    """
    return Path(path).stem


def is_readable_input(path: Path) -> bool:
    """Check that an input location exists and can be read."""
    return path.exists() and os.access(path, os.R_OK)
