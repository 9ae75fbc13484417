"""Reading network configs from YAML files, strings and stdin."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import ConfigLoadError, ConfigValidationError
from .models import NetworkConfig


def load_yaml(path: str | Path) -> dict:
    """Read a config file into its raw YAML mapping.

    An empty file yields an empty mapping, which validates to the default
    five-city network.

    Raises:
        ConfigLoadError: If the file is missing, unreadable, not UTF-8,
            not valid YAML, or not a mapping at the top level.
    """
    path = Path(path)

    if not path.exists():
        raise ConfigLoadError(f"File not found: {path}", str(path))
    if not path.is_file():
        raise ConfigLoadError(f"Not a file: {path}", str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigLoadError(f"Config is not valid UTF-8: {e}", str(path)) from e
    except OSError as e:
        raise ConfigLoadError(f"Cannot read file: {e}", str(path)) from e

    return _load_mapping(text, str(path))


def parse_config(path: str | Path) -> NetworkConfig:
    """Read and validate a network config file."""
    return _validate(load_yaml(path), str(path))


def parse_config_from_string(yaml_string: str) -> NetworkConfig:
    """Validate a network config given as YAML text, e.g. piped on stdin.

    Raises:
        ConfigLoadError: If the text is not a YAML mapping.
        ConfigValidationError: If the mapping describes an invalid network.
    """
    return _validate(_load_mapping(yaml_string))


def _load_mapping(text: str, source: str | None = None) -> dict:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML: {e}", source) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"A network config must be a YAML mapping, got {type(data).__name__}",
            source,
        )
    return data


def _validate(data: dict, source: str | None = None) -> NetworkConfig:
    try:
        return NetworkConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError.from_pydantic(e, source) from e
