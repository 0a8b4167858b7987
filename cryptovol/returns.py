"""
Return calculation module for volatility estimation.

This module converts a price series into the log returns consumed by
every downstream component.
"""

import numpy as np

from cryptovol.types import PriceSeries, as_price_array
from cryptovol.utils import InsufficientDataError, InvalidPriceError


def validate_prices(prices: np.ndarray, min_points: int = 2) -> None:
    """
    Validate a price array.

    Args:
        prices: Array of prices
        min_points: Minimum number of prices required

    Raises:
        InsufficientDataError: If fewer than min_points prices are given
        InvalidPriceError: If any price is non-finite or not positive
    """
    if len(prices) < min_points:
        raise InsufficientDataError(
            f"Need at least {min_points} price points, got {len(prices)}"
        )

    invalid = ~np.isfinite(prices) | (prices <= 0)
    if invalid.any():
        first_bad = int(np.argmax(invalid))
        raise InvalidPriceError(
            f"All prices must be positive finite numbers; "
            f"{int(invalid.sum())} invalid, first at index {first_bad}: {prices[first_bad]}"
        )


def compute_log_returns(prices: PriceSeries) -> np.ndarray:
    """
    Calculate log returns from a price series.

    Args:
        prices: Price series (see ``as_price_array`` for accepted shapes)

    Returns:
        Array of n - 1 log returns

    Formula:
        r_t = ln(P_t / P_{t-1})
    """
    values = as_price_array(prices)
    validate_prices(values)
    return np.log(values[1:] / values[:-1])
