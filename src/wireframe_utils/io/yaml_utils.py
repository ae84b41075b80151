"""Define a utility function for importing mappings from YAML files."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from pathlib import Path


def load_yaml_mapping(yaml_path: Path, required_keys: set[str] | None = None) -> dict[str, Any]:
    """Load a YAML file whose top level is a mapping (e.g., a scene description).

    :param yaml_path: Path to the YAML file to be imported
    :param required_keys: Top-level keys that must be present (defaults to None = no check)
    :return: Dictionary of the loaded top-level keys and values
    :raises FileNotFoundError: If the file does not exist
    :raises RuntimeError: If the file is not valid YAML
    :raises KeyError: If the top level isn't a mapping or lacks any required key
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Cannot load data from nonexistent YAML file: {yaml_path}")

    try:
        with yaml_path.open() as yaml_file:
            yaml_data = yaml.safe_load(yaml_file)
    except yaml.YAMLError as error:
        raise RuntimeError(f"Failed to load from YAML file: {yaml_path}") from error

    if not isinstance(yaml_data, dict):
        raise KeyError(f"Expected a mapping at the top level of {yaml_path}")

    missing_keys = (required_keys or set()) - yaml_data.keys()
    if missing_keys:
        raise KeyError(f"Required keys {sorted(missing_keys)} were missing from {yaml_path}")

    return yaml_data
