"""
DVOL entry point.

Resolves the requested method to an estimator and runs the shared
validate-then-compute path. Price data is checked before the estimator's
parameters, so a short or malformed series is reported first.
"""

import logging
from typing import Optional, Union

from cryptovol.estimators.base import BaseDVOLEstimator
from cryptovol.estimators.factory import DVOLConfig, get_estimator_class
from cryptovol.types import DVOLMethod, DVOLResult, PriceSeries, as_price_array

logger = logging.getLogger(__name__)

MethodLike = Union[str, DVOLMethod, BaseDVOLEstimator]


def calculate_dvol(
    series: PriceSeries,
    method: Optional[MethodLike] = None,
    config: Optional[DVOLConfig] = None
) -> DVOLResult:
    """
    Calculate the DVOL of a price series.

    Args:
        series: Price series
        method: Method name or tag, or a configured estimator instance.
            Defaults to ``config.method`` (EWMA unless configured otherwise).
        config: Estimator parameters; ignored when an estimator is passed

    Returns:
        DVOLResult

    Raises:
        InsufficientDataError: Too few points for the method
        InvalidPriceError: Non-positive or non-finite price
        InvalidParameterError: Unknown method or invalid parameters
    """
    if isinstance(method, BaseDVOLEstimator):
        estimator = method
    else:
        config = config or DVOLConfig()
        estimator_class = get_estimator_class(
            method if method is not None else config.method
        )
        estimator_class.validate_inputs(as_price_array(series))
        estimator = estimator_class.from_config(config)

    logger.debug("Calculating DVOL with %r", estimator)
    return estimator.compute(series)
