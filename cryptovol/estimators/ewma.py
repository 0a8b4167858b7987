"""
Exponentially Weighted Moving Average (EWMA) DVOL Estimator.

This estimator gives more weight to recent observations, making it more
responsive to market shocks and volatility clustering.

Formula:
    σ²₀ = r²₀
    σ²ₜ = λσ²ₜ₋₁ + (1-λ)r²ₜ

Where:
    λ (lambda): Decay factor in (0, 1), RiskMetrics standard 0.94

DVOL = √(σ²_last * annualization_factor) * 100

Reference:
    RiskMetrics Technical Document (J.P. Morgan, 1996)
"""

from typing import Tuple

import numpy as np

from cryptovol.estimators.base import (
    DEFAULT_ANNUALIZATION_FACTOR,
    BaseDVOLEstimator,
    calculate_stability,
)
from cryptovol.types import DVOLMethod
from cryptovol.utils import InsufficientDataError, validate_open_interval

DEFAULT_EWMA_LAMBDA = 0.94

# Number of trailing variances used for the convergence score
CONFIDENCE_TAIL = 10


def ewma_variances(returns: np.ndarray, lambda_param: float) -> np.ndarray:
    """
    Run the EWMA variance recursion over a return series.

    Args:
        returns: Array of log returns (at least 2)
        lambda_param: Decay factor in (0, 1)

    Returns:
        Array of variances, one per return
    """
    validate_open_interval(lambda_param, 0.0, 1.0, name="EWMA lambda")
    if len(returns) < 2:
        raise InsufficientDataError(
            f"Need at least 2 returns for EWMA calculation, got {len(returns)}"
        )

    squared_returns = np.asarray(returns, dtype=float) ** 2
    variances = np.empty_like(squared_returns)
    variances[0] = squared_returns[0]

    # EWMA recursion: σ²ₜ = λσ²ₜ₋₁ + (1-λ)r²ₜ
    for i in range(1, len(variances)):
        variances[i] = (
            lambda_param * variances[i - 1] +
            (1 - lambda_param) * squared_returns[i]
        )

    return variances


class EWMADVOLEstimator(BaseDVOLEstimator):
    """
    Exponentially weighted moving average DVOL estimator.

    More responsive to recent shocks than the rolling-window estimator.
    """

    method = DVOLMethod.EWMA
    min_data_points = 5

    def __init__(
        self,
        lambda_param: float = DEFAULT_EWMA_LAMBDA,
        annualization_factor: float = DEFAULT_ANNUALIZATION_FACTOR
    ):
        """
        Initialize EWMA estimator.

        Args:
            lambda_param: Decay factor, strictly between 0 and 1 (default: 0.94)
            annualization_factor: Periods per year (default: 365)
        """
        super().__init__(annualization_factor)

        self.lambda_param = validate_open_interval(
            lambda_param, 0.0, 1.0, name="EWMA lambda"
        )

    @classmethod
    def from_config(cls, config) -> 'EWMADVOLEstimator':
        return cls(
            lambda_param=config.ewma_lambda,
            annualization_factor=config.annualization_factor,
        )

    def calculate(self, returns: np.ndarray) -> Tuple[float, float]:
        variances = ewma_variances(returns, self.lambda_param)

        dvol = self.annualize_variance(variances[-1])

        # Confidence from convergence of the most recent variances
        recent = variances[-min(CONFIDENCE_TAIL, len(variances)):]
        confidence = calculate_stability(recent)

        return dvol, confidence
