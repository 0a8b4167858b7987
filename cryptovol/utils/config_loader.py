"""
Configuration loading utilities and exception types.
"""

from pathlib import Path
from typing import Any, Dict

import yaml


# Custom Exception Classes
class ConfigError(Exception):
    """Raised when there are issues with configuration."""
    pass


class ValidationError(Exception):
    """Raised when input validation fails."""
    pass


class InsufficientDataError(ValidationError):
    """Raised when a series has fewer points than an operation requires."""
    pass


class InvalidPriceError(ValidationError):
    """Raised when a price is non-positive or non-finite."""
    pass


class InvalidParameterError(ValidationError):
    """Raised when an estimator parameter or method tag is invalid."""
    pass


def load_config(config_path: str = 'config.yaml') -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file

    Returns:
        Dictionary with configuration

    Raises:
        ConfigError: If config file cannot be loaded
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config file: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to load config: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"Config root must be a mapping, got {type(config).__name__}"
        )
    return config


def validate_config(config: Dict[str, Any], required_keys: list) -> None:
    """
    Validate that config contains required keys.

    Args:
        config: Configuration dictionary
        required_keys: List of required key names

    Raises:
        ConfigError: If required keys are missing
    """
    missing = [key for key in required_keys if key not in config]
    if missing:
        raise ConfigError(f"Missing required config keys: {missing}")
