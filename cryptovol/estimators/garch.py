"""
GARCH(1,1) DVOL Estimator.

Filters the return series through a GARCH(1,1) conditional variance model
with fixed (not fitted) coefficients.

Formula:
    σ²₀ = sample variance of all returns (unconditional)
    σ²ₜ = ω + α·r²ₜ₋₁ + β·σ²ₜ₋₁
    εₜ = rₜ / σₜ   (standardized residuals)

DVOL = √(σ²_last * annualization_factor) * 100

Confidence:
    Average of a residual quality score (residuals should look N(0, 1))
    and the stability of the conditional variance path.
"""

from typing import Tuple

import numpy as np

from cryptovol.estimators.base import (
    DEFAULT_ANNUALIZATION_FACTOR,
    NEUTRAL_STABILITY,
    BaseDVOLEstimator,
    calculate_stability,
)
from cryptovol.types import DVOLMethod, GARCHParams
from cryptovol.utils import InsufficientDataError
from cryptovol.volatility import (
    calculate_mean,
    calculate_standard_deviation,
    calculate_variance,
)

DEFAULT_GARCH_PARAMS = GARCHParams(omega=1e-6, alpha=0.1, beta=0.85)

MIN_GARCH_RETURNS = 10


def garch_variances(
    returns: np.ndarray,
    params: GARCHParams = DEFAULT_GARCH_PARAMS
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Run the GARCH(1,1) variance filter.

    Args:
        returns: Array of log returns (at least 10)
        params: Validated GARCH coefficients

    Returns:
        Tuple of (conditional variances of length n,
        standardized residuals of length n - 1)
    """
    params.validate()
    returns = np.asarray(returns, dtype=float)
    if len(returns) < MIN_GARCH_RETURNS:
        raise InsufficientDataError(
            f"Need at least {MIN_GARCH_RETURNS} returns for GARCH calculation, "
            f"got {len(returns)}"
        )

    variances = np.empty(len(returns))
    variances[0] = calculate_variance(returns)
    residuals = np.empty(len(returns) - 1)

    for t in range(1, len(returns)):
        variances[t] = (
            params.omega +
            params.alpha * returns[t - 1] ** 2 +
            params.beta * variances[t - 1]
        )
        residuals[t - 1] = returns[t] / np.sqrt(variances[t])

    return variances, residuals


def residual_quality(residuals: np.ndarray) -> float:
    """
    Heuristic closeness of standardized residuals to mean 0, stdev 1.

    quality = max(0, 100 - (|mean| + |std - 1|) * 50)
    """
    if len(residuals) < 2:
        return NEUTRAL_STABILITY

    mean_deviation = abs(calculate_mean(residuals))
    std_deviation = abs(calculate_standard_deviation(residuals) - 1)
    return max(0.0, 100.0 - (mean_deviation + std_deviation) * 50)


class GARCHDVOLEstimator(BaseDVOLEstimator):
    """GARCH(1,1) conditional variance DVOL estimator."""

    method = DVOLMethod.GARCH
    min_data_points = 10

    def __init__(
        self,
        params: GARCHParams = DEFAULT_GARCH_PARAMS,
        annualization_factor: float = DEFAULT_ANNUALIZATION_FACTOR
    ):
        """
        Initialize GARCH estimator.

        Args:
            params: GARCH coefficients (default: ω=1e-6, α=0.1, β=0.85)
            annualization_factor: Periods per year (default: 365)
        """
        super().__init__(annualization_factor)
        self.params = params.validate()

    @classmethod
    def from_config(cls, config) -> 'GARCHDVOLEstimator':
        return cls(
            params=config.garch_params,
            annualization_factor=config.annualization_factor,
        )

    def calculate(self, returns: np.ndarray) -> Tuple[float, float]:
        variances, residuals = garch_variances(returns, self.params)

        dvol = self.annualize_variance(variances[-1])

        quality = residual_quality(residuals)
        stability = calculate_stability(variances)
        confidence = (quality + stability) / 2

        return dvol, confidence
