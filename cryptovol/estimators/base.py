"""
Base estimator class for DVOL estimators.

All DVOL estimators inherit from this abstract base class, which owns the
shared validate-then-compute path, the DVOL index normalization and the
stability score used by the confidence heuristics.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Sequence, Tuple, Union

import numpy as np

from cryptovol.returns import validate_prices
from cryptovol.types import (
    DVOLMethod,
    DVOLResult,
    PriceSeries,
    as_price_array,
    method_name,
)
from cryptovol.utils import (
    InsufficientDataError,
    InvalidParameterError,
    clamp,
    safe_divide,
)
from cryptovol.volatility import calculate_mean, calculate_standard_deviation

if TYPE_CHECKING:
    from cryptovol.estimators.factory import DVOLConfig

logger = logging.getLogger(__name__)

DEFAULT_ANNUALIZATION_FACTOR = 365

# Realistic DVOL range (percent) mapped onto the 0-100 index
DVOL_INDEX_MIN = 10.0
DVOL_INDEX_MAX = 200.0

# Score returned when a series is too short to measure stability
NEUTRAL_STABILITY = 50.0


def calculate_dvol_index(dvol: float) -> float:
    """Map a DVOL percentage onto [0, 100] assuming a 10%-200% range."""
    normalized = (dvol - DVOL_INDEX_MIN) / (DVOL_INDEX_MAX - DVOL_INDEX_MIN) * 100
    return clamp(normalized, 0.0, 100.0)


def calculate_stability(values: Union[Sequence[float], np.ndarray]) -> float:
    """
    Stability score from the coefficient of variation.

    score = clamp(100 - (std / mean) * 100, 0, 100)

    A zero mean resolves the ratio to 0 (score 100). Fewer than two values
    score 50. This is a heuristic, not a statistical test.
    """
    if len(values) < 2:
        return NEUTRAL_STABILITY

    mean = calculate_mean(values)
    std = calculate_standard_deviation(values)
    coefficient_of_variation = safe_divide(std, mean)
    return clamp(100.0 - coefficient_of_variation * 100.0, 0.0, 100.0)


class BaseDVOLEstimator(ABC):
    """
    Abstract base class for DVOL estimators.

    Subclasses set ``method`` and ``min_data_points`` and implement
    calculate(), which maps log returns to (dvol, confidence). Custom
    estimators may use a plain string as their method name.
    """

    method: Union[DVOLMethod, str]
    min_data_points: int = 2

    def __init__(self, annualization_factor: float = DEFAULT_ANNUALIZATION_FACTOR):
        """
        Initialize estimator.

        Args:
            annualization_factor: Periods per year used to annualize (default: 365)
        """
        if not annualization_factor > 0:
            raise InvalidParameterError(
                f"Annualization factor must be positive, got {annualization_factor}"
            )
        self.annualization_factor = annualization_factor

    @classmethod
    def from_config(cls, config: 'DVOLConfig') -> 'BaseDVOLEstimator':
        """Build the estimator from the matching fields of a DVOLConfig."""
        return cls(annualization_factor=config.annualization_factor)

    @abstractmethod
    def calculate(self, returns: np.ndarray) -> Tuple[float, float]:
        """
        Estimate DVOL from log returns.

        Args:
            returns: Array of log returns

        Returns:
            Tuple of (dvol in percent, unclamped confidence)
        """
        pass

    @classmethod
    def validate_inputs(cls, prices: np.ndarray) -> None:
        """
        Validate a price array for this estimator.

        Raises:
            InsufficientDataError: If the series is empty or too short
            InvalidPriceError: If any price is non-finite or not positive
        """
        if len(prices) == 0:
            raise InsufficientDataError("Price data cannot be empty")
        if len(prices) < 2:
            raise InsufficientDataError("Need at least 2 price points for DVOL calculation")
        if len(prices) < cls.min_data_points:
            raise InsufficientDataError(
                f"{method_name(cls.method).upper()} method requires at least "
                f"{cls.min_data_points} data points, got {len(prices)}"
            )
        validate_prices(prices)

    def annualize_variance(self, variance: float) -> float:
        """Convert a per-period variance into an annualized DVOL percentage."""
        return float(np.sqrt(variance * self.annualization_factor)) * 100

    def compute(self, series: PriceSeries) -> DVOLResult:
        """
        Main interface: validate, calculate, normalize.

        Args:
            series: Price series

        Returns:
            DVOLResult with index and confidence clamped to [0, 100]
        """
        prices = as_price_array(series)
        self.validate_inputs(prices)

        returns = np.log(prices[1:] / prices[:-1])
        dvol, confidence = self.calculate(returns)

        result = DVOLResult(
            dvol=dvol,
            dvol_index=calculate_dvol_index(dvol),
            confidence=clamp(confidence, 0.0, 100.0),
            method=self.method,
            data_points=len(prices),
            calculated_at=datetime.now(timezone.utc),
        )
        logger.debug(
            "%s DVOL over %d points: dvol=%.4f index=%.2f confidence=%.2f",
            method_name(self.method), len(prices), result.dvol,
            result.dvol_index, result.confidence
        )
        return result

    def __repr__(self) -> str:
        params = ', '.join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({params})"
