"""Loading of the adopters directory layout from a YAML file."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from adopters.config.settings import LoaderConfig
from adopters.errors import ConfigurationError


def load_yaml(path: Path) -> dict[str, Any]:
    """
    Read a YAML mapping from a config file.

    An empty file yields an empty mapping.

    Raises:
        ConfigurationError: If the file cannot be decoded or parsed, or
            does not hold a mapping.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        msg = f"Could not parse config file {path}: {e}"
        raise ConfigurationError(msg) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"{path} must contain a YAML mapping"
        raise ConfigurationError(msg)
    return data


def load_config(config_path: Path) -> LoaderConfig:
    """
    Load loader configuration from a YAML file.

    All keys are optional:
        - adopters_dir: records directory relative to the site directory
        - extension: record file extension
        - others_filename: name of the unverified list file

    Args:
        config_path: Path to the configuration file.

    Returns:
        Validated LoaderConfig instance.

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid.
    """
    if not config_path.is_file():
        msg = f"Config file not found: {config_path}"
        raise ConfigurationError(msg)

    data = load_yaml(config_path)
    try:
        return LoaderConfig(**data)
    except ValidationError as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigurationError(msg) from e
