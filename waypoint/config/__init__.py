"""Config layer for parsing and validating YAML network configs."""

from .errors import ConfigError, ConfigLoadError, ConfigValidationError
from .models import EdgeSpec, NetworkConfig
from .loader import load_yaml, parse_config, parse_config_from_string

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "EdgeSpec",
    "NetworkConfig",
    "load_yaml",
    "parse_config",
    "parse_config_from_string",
]
