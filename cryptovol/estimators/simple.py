"""
Simple (rolling-window) DVOL estimator.

Realized volatility is measured over every trailing window of log returns
and the DVOL is the mean of those window volatilities.

Formula:
    σ_k = stdev(r_{k-w+1}, ..., r_k)      for k = w-1 .. n-1
    DVOL = mean(σ_k) * √(annualization_factor) * 100

Confidence:
    Stability of the window volatilities (coefficient of variation).
"""

import numbers
from typing import Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from cryptovol.estimators.base import (
    DEFAULT_ANNUALIZATION_FACTOR,
    BaseDVOLEstimator,
    calculate_stability,
)
from cryptovol.types import DVOLMethod
from cryptovol.utils import InsufficientDataError, InvalidParameterError

DEFAULT_WINDOW_SIZE = 30


def rolling_volatilities(returns: np.ndarray, window_size: int) -> np.ndarray:
    """
    Sample standard deviation of each trailing window of returns.

    Returns:
        Array of len(returns) - window_size + 1 volatilities
    """
    if len(returns) < window_size:
        raise InsufficientDataError(
            f"Insufficient data for window size {window_size}: "
            f"got {len(returns)} returns"
        )
    windows = sliding_window_view(np.asarray(returns, dtype=float), window_size)
    # Use ddof=1 for sample standard deviation (n-1 denominator)
    return windows.std(axis=1, ddof=1)


def _is_whole_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return float(value).is_integer()


class SimpleDVOLEstimator(BaseDVOLEstimator):
    """
    Rolling-window realized volatility estimator.

    O(n * window_size) over the return series.
    """

    method = DVOLMethod.SIMPLE
    min_data_points = 2

    def __init__(
        self,
        window_size: int = DEFAULT_WINDOW_SIZE,
        annualization_factor: float = DEFAULT_ANNUALIZATION_FACTOR
    ):
        """
        Initialize simple estimator.

        Args:
            window_size: Returns per rolling window (default: 30)
            annualization_factor: Periods per year (default: 365)
        """
        super().__init__(annualization_factor)

        if not _is_whole_number(window_size) or window_size < 2:
            raise InvalidParameterError(
                f"Window size must be an integer of at least 2, got {window_size}"
            )
        self.window_size = int(window_size)

    @classmethod
    def from_config(cls, config) -> 'SimpleDVOLEstimator':
        return cls(
            window_size=config.window_size,
            annualization_factor=config.annualization_factor,
        )

    def calculate(self, returns: np.ndarray) -> Tuple[float, float]:
        vols = rolling_volatilities(returns, self.window_size)

        dvol = float(vols.mean()) * float(np.sqrt(self.annualization_factor)) * 100
        confidence = calculate_stability(vols)

        return dvol, confidence
