"""
Utility functions for the cryptovol core.

This module provides helpers for:
- Exception types shared by every component
- Configuration loading
- Logging configuration
- Numeric validation and safe division
"""

import math

from cryptovol.utils.config_loader import (
    ConfigError,
    InsufficientDataError,
    InvalidParameterError,
    InvalidPriceError,
    ValidationError,
    load_config,
    validate_config,
)
from cryptovol.utils.logging import setup_logging, setup_logging_from_config


def validate_open_interval(
    value: float,
    min_val: float,
    max_val: float,
    name: str = "value"
) -> float:
    """
    Validate that a numeric value lies strictly inside (min_val, max_val).

    Args:
        value: Value to validate
        min_val: Exclusive lower bound
        max_val: Exclusive upper bound
        name: Name of the parameter for error messages

    Returns:
        The validated value

    Raises:
        InvalidParameterError: If value is outside the open interval
    """
    if not (min_val < value < max_val):
        raise InvalidParameterError(
            f"{name} must be strictly between {min_val} and {max_val}, got {value}"
        )
    return value


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    Safely divide two numbers, returning default if denominator is zero.

    Args:
        numerator: Numerator
        denominator: Denominator
        default: Value to return if denominator is zero

    Returns:
        Result of division or default
    """
    if denominator == 0 or math.isnan(denominator):
        return default
    return numerator / denominator


def clamp(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    """Clamp value into [lower, upper]."""
    return max(lower, min(upper, value))


__all__ = [
    # Exceptions
    'ConfigError',
    'ValidationError',
    'InsufficientDataError',
    'InvalidPriceError',
    'InvalidParameterError',
    # Config
    'load_config',
    'validate_config',
    # Logging
    'setup_logging',
    'setup_logging_from_config',
    # Numeric helpers
    'validate_open_interval',
    'safe_divide',
    'clamp',
]
