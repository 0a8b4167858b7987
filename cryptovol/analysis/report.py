"""
Volatility report assembly.

Bundles the baseline metrics and one DVOL estimate for a
(symbol, period) request into a single immutable result.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Union

from cryptovol.estimators import BaseDVOLEstimator, DVOLConfig, calculate_dvol
from cryptovol.types import (
    DVOLMethod,
    PriceSeries,
    VolatilityResult,
    as_price_array,
    method_name,
)
from cryptovol.volatility import calculate_metrics

logger = logging.getLogger(__name__)


def build_volatility_result(
    series: PriceSeries,
    period: str,
    symbol: str,
    provider: str = 'unknown',
    method: Optional[Union[str, DVOLMethod, BaseDVOLEstimator]] = None,
    config: Optional[DVOLConfig] = None
) -> VolatilityResult:
    """
    Compute metrics and DVOL for one price series.

    Args:
        series: Price series handed over by a provider
        period: Period label the series was fetched for ('1d', '30d', '365d')
        symbol: Asset identifier (e.g. 'bitcoin')
        provider: Name of the provider that produced the series
        method: DVOL method (default: config.method)
        config: DVOL parameters

    Returns:
        VolatilityResult
    """
    prices = as_price_array(series)

    metrics = calculate_metrics(prices, period)
    dvol = calculate_dvol(prices, method, config)

    logger.info(
        "%s %s via %s: vol=%.2f%% annualized=%.2f%% dvol=%.2f%% (%s)",
        symbol, period, provider, metrics.volatility,
        metrics.annualized_volatility, dvol.dvol, method_name(dvol.method)
    )

    return VolatilityResult(
        symbol=symbol,
        period=period,
        metrics=metrics,
        dvol=dvol,
        data_points=len(prices),
        calculated_at=datetime.now(timezone.utc),
        provider=provider,
    )
