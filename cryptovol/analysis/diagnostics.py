"""
Descriptive diagnostics over a log return series.

Includes lag autocorrelation, an ARCH-effect proxy (autocorrelation of
squared returns), skewness and excess kurtosis. All statistics run over the
full series with no windowing.
"""

import logging
from typing import Sequence, Union

import numpy as np

from cryptovol.returns import compute_log_returns
from cryptovol.types import DiagnosticsResult, PriceSeries
from cryptovol.utils import safe_divide

logger = logging.getLogger(__name__)

Values = Union[Sequence[float], np.ndarray]

# Relative spread below which a series counts as constant
FLAT_TOLERANCE = 1e-9


def _is_flat(r: np.ndarray) -> bool:
    """True when every value equals the first up to rounding noise."""
    return bool(np.allclose(r, r[0], rtol=FLAT_TOLERANCE, atol=0.0))


def calculate_autocorrelation(returns: Values, lag: int = 1) -> float:
    """
    Lag autocorrelation of a series.

    The numerator sums the n - lag cross products while the denominator
    sums squared deviations over all n values, so the estimate is biased
    toward zero for short series.

    Args:
        returns: Series of returns
        lag: Lag in periods (default: 1)

    Returns:
        Autocorrelation, or 0 when the series is too short or constant
    """
    r = np.asarray(returns, dtype=float)
    if len(r) <= lag or _is_flat(r):
        return 0.0

    deviations = r - r.mean()
    numerator = float(np.dot(deviations[:len(r) - lag], deviations[lag:]))
    denominator = float(np.dot(deviations, deviations))

    return safe_divide(numerator, denominator)


def calculate_heteroskedasticity(returns: Values) -> float:
    """ARCH-effect proxy: lag-1 autocorrelation of squared returns."""
    squared = np.asarray(returns, dtype=float) ** 2
    return calculate_autocorrelation(squared, lag=1)


def _standardized(returns: Values) -> np.ndarray:
    r = np.asarray(returns, dtype=float)
    if len(r) < 2 or _is_flat(r):
        return np.zeros(0)
    std = r.std(ddof=1)
    return (r - r.mean()) / std


def calculate_skewness(returns: Values) -> float:
    """
    Third standardized moment, mean(((r - mean) / std) ** 3).

    Uses the sample standard deviation and divides the sum by n.
    Returns 0 for a constant series.
    """
    z = _standardized(returns)
    if z.size == 0:
        return 0.0
    return float(np.mean(z ** 3))


def calculate_kurtosis(returns: Values) -> float:
    """
    Excess kurtosis, mean(((r - mean) / std) ** 4) - 3.

    Returns 0 for a constant series.
    """
    z = _standardized(returns)
    if z.size == 0:
        return 0.0
    return float(np.mean(z ** 4)) - 3.0


def calculate_diagnostics(series: PriceSeries) -> DiagnosticsResult:
    """
    Compute all diagnostics for a price series.

    Args:
        series: Price series with at least 2 points

    Returns:
        DiagnosticsResult
    """
    returns = compute_log_returns(series)

    result = DiagnosticsResult(
        autocorrelation=calculate_autocorrelation(returns),
        heteroskedasticity=calculate_heteroskedasticity(returns),
        skewness=calculate_skewness(returns),
        kurtosis=calculate_kurtosis(returns),
    )
    logger.debug("Diagnostics over %d returns: %s", len(returns), result)
    return result
