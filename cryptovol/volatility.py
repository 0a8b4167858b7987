"""
Baseline volatility statistics.

Formula:
    σ² = (1/(n-1)) * Σ(rᵢ - r̄)²

Where:
    rᵢ = ln(P_t / P_{t-1}) - log returns
    r̄ = mean return

Annualized: σ_annual = σ_period * √(periods per year)
"""

import logging
from typing import Sequence, Union

import numpy as np

from cryptovol.returns import compute_log_returns
from cryptovol.types import PriceSeries, VolatilityMetrics, as_price_array
from cryptovol.utils import InsufficientDataError, InvalidParameterError

logger = logging.getLogger(__name__)

Values = Union[Sequence[float], np.ndarray]

# Periods per year assumed for each provider period label
HOURLY_PERIODS_PER_YEAR = 365 * 24
DAILY_PERIODS_PER_YEAR = 365
PERIODS_PER_YEAR = {
    '1d': HOURLY_PERIODS_PER_YEAR,  # one day of hourly points
    '30d': DAILY_PERIODS_PER_YEAR,
    '365d': DAILY_PERIODS_PER_YEAR,
}


def calculate_mean(values: Values) -> float:
    """Arithmetic mean; raises InsufficientDataError on an empty input."""
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise InsufficientDataError("Cannot calculate mean of empty series")
    return float(arr.mean())


def calculate_variance(values: Values) -> float:
    """
    Sample variance (divisor n - 1).

    Raises:
        InsufficientDataError: If fewer than 2 values are given
    """
    arr = np.asarray(values, dtype=float)
    if arr.size < 2:
        raise InsufficientDataError(
            f"Need at least 2 values to calculate variance, got {arr.size}"
        )
    return float(arr.var(ddof=1))


def calculate_standard_deviation(values: Values) -> float:
    """Sample standard deviation."""
    return float(np.sqrt(calculate_variance(values)))


def annualize_volatility(volatility: float, periods_per_year: float) -> float:
    """
    Scale a per-period volatility to an annual one.

    Raises:
        InvalidParameterError: If periods_per_year is not positive
    """
    if not periods_per_year > 0:
        raise InvalidParameterError(
            f"Periods per year must be positive, got {periods_per_year}"
        )
    return volatility * float(np.sqrt(periods_per_year))


def get_periods_per_year(period: str, data_points: int) -> int:
    """
    Number of sampling periods per year implied by a period label.

    '1d' series are assumed hourly, '30d' and '365d' daily. Any other label
    falls back to min(365, data_points * 12).
    """
    if period in PERIODS_PER_YEAR:
        return PERIODS_PER_YEAR[period]
    return min(DAILY_PERIODS_PER_YEAR, data_points * 12)


def calculate_metrics(series: PriceSeries, period: str) -> VolatilityMetrics:
    """
    Compute the baseline volatility bundle for a price series.

    Args:
        series: Price series with at least 2 points
        period: Provider period label ('1d', '30d', '365d', ...)

    Returns:
        VolatilityMetrics with volatility in percent, variance in basis
        points squared and annualized volatility in percent
    """
    prices = as_price_array(series)
    if len(prices) < 2:
        raise InsufficientDataError(f"Need at least 2 price points, got {len(prices)}")

    returns = compute_log_returns(prices)
    variance = calculate_variance(returns)
    volatility = float(np.sqrt(variance))

    periods_per_year = get_periods_per_year(period, len(returns))
    annualized = annualize_volatility(volatility, periods_per_year)

    logger.debug(
        "Metrics for %d points (period=%s, periods/year=%d): vol=%.6f",
        len(prices), period, periods_per_year, volatility
    )

    return VolatilityMetrics(
        volatility=volatility * 100,
        variance=variance * 10000,
        annualized_volatility=annualized * 100,
    )
