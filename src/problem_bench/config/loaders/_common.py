"""YAML reading shared by the configuration loaders."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from problem_bench.config.exceptions import ConfigurationError

__all__ = ["load_yaml_file"]


def load_yaml_file(path: Path, label: str = "File") -> dict[str, Any]:
    """Read a YAML file whose top level must be a mapping.

    Args:
        path: Path to the YAML file.
        label: Human-readable label for error messages (e.g. "Benchmark file").

    Returns:
        The top-level mapping.

    Raises:
        FileNotFoundError: If nothing exists at the path.
        ConfigurationError: If the path cannot be read (a directory, no
            permission), holds invalid YAML, is empty, or is not a mapping.

    """
    if not path.exists():
        raise FileNotFoundError(f"{label} not found: {path}")
    if not path.is_file():
        raise ConfigurationError(f"{label} is not a regular file: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read {label.lower()} {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse YAML file {path}: {e}") from e

    if data is None:
        raise ConfigurationError(f"Empty YAML file: {path}")
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{label} {path} must hold a mapping at the top level, "
            f"got {type(data).__name__}"
        )
    return data
