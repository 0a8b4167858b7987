"""
Value types shared by the cryptovol components.

Every result is an immutable dataclass computed fresh per call. Price input
is accepted in several shapes (see ``as_price_array``) so that providers can
hand over whatever they already hold.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from cryptovol.utils import InvalidParameterError, InvalidPriceError


class DVOLMethod(str, Enum):
    """DVOL estimation method tag."""

    SIMPLE = 'simple'
    EWMA = 'ewma'
    GARCH = 'garch'


def method_name(method: Union[str, DVOLMethod]) -> str:
    """Plain string name of a method tag or custom method name."""
    return method.value if isinstance(method, DVOLMethod) else str(method)


@dataclass(frozen=True)
class PricePoint:
    """Single observation handed over by a price provider."""

    timestamp: int  # epoch milliseconds
    price: float


PriceSeries = Union[
    Sequence[PricePoint],
    Sequence[Tuple[int, float]],
    Sequence[Mapping[str, Any]],
    Sequence[float],
    np.ndarray,
    pd.Series,
    pd.DataFrame,
]


def as_price_array(series: PriceSeries) -> np.ndarray:
    """
    Extract the price column of a series as a float array.

    Accepts a sequence of PricePoint, a sequence of (timestamp, price)
    pairs, a sequence of provider records with a 'price' key, a flat
    sequence/array/Series of prices, or a DataFrame with a 'price' (or
    'close') column. Ordering and duplicate timestamps are not checked.

    Raises:
        InvalidPriceError: If prices cannot be read as numbers
    """
    if isinstance(series, pd.DataFrame):
        if 'price' in series.columns:
            column = series['price']
        elif 'close' in series.columns:
            column = series['close']
        else:
            raise InvalidPriceError("Data must contain a 'price' or 'close' column")
        raw: Iterable[Any] = column.to_numpy()
    elif isinstance(series, (pd.Series, np.ndarray)):
        raw = np.asarray(series)
    else:
        raw = [_extract_price(item) for item in series]

    try:
        prices = np.asarray(raw, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidPriceError(f"Prices must be numeric: {e}") from e

    if prices.ndim != 1:
        raise InvalidPriceError(
            f"Prices must form a one-dimensional series, got shape {prices.shape}"
        )
    return prices


def _extract_price(item: Any) -> Any:
    if isinstance(item, PricePoint):
        return item.price
    if isinstance(item, Mapping):
        if 'price' not in item:
            raise InvalidPriceError(f"Price record has no 'price' key: {item!r}")
        return item['price']
    if isinstance(item, (tuple, list)):
        if len(item) != 2:
            raise InvalidPriceError(
                f"Expected (timestamp, price) pairs, got {item!r}"
            )
        return item[1]
    return item


@dataclass(frozen=True)
class GARCHParams:
    """GARCH(1,1) coefficients: σ²ₜ = ω + α·r²ₜ₋₁ + β·σ²ₜ₋₁."""

    omega: float = 1e-6
    alpha: float = 0.1
    beta: float = 0.85

    def validate(self) -> 'GARCHParams':
        """
        Check ω > 0, α ≥ 0, β ≥ 0 and α + β < 1 (covariance stationarity).

        Raises:
            InvalidParameterError: If any constraint is violated
        """
        if not self.omega > 0:
            raise InvalidParameterError(f"GARCH omega must be positive, got {self.omega}")
        if not self.alpha >= 0:
            raise InvalidParameterError(f"GARCH alpha must be non-negative, got {self.alpha}")
        if not self.beta >= 0:
            raise InvalidParameterError(f"GARCH beta must be non-negative, got {self.beta}")
        if not self.alpha + self.beta < 1:
            raise InvalidParameterError(
                f"GARCH alpha + beta must be below 1, got {self.alpha + self.beta}"
            )
        return self


@dataclass(frozen=True)
class VolatilityMetrics:
    volatility: float  # percent
    variance: float  # basis points squared
    annualized_volatility: float  # percent

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class DVOLResult:
    dvol: float  # percent, annualized
    dvol_index: float  # 0-100
    confidence: float  # 0-100
    method: Union[DVOLMethod, str]
    data_points: int
    calculated_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['method'] = method_name(self.method)
        data['calculated_at'] = self.calculated_at.isoformat()
        return data


@dataclass(frozen=True)
class DiagnosticsResult:
    autocorrelation: float
    heteroskedasticity: float
    skewness: float
    kurtosis: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class VolatilityResult:
    """Metrics and DVOL for one (symbol, period) request."""

    symbol: str
    period: str
    metrics: VolatilityMetrics
    dvol: DVOLResult
    data_points: int
    calculated_at: datetime
    provider: str = field(default='unknown')

    def to_dict(self) -> Dict[str, Any]:
        return {
            'symbol': self.symbol,
            'period': self.period,
            'metrics': self.metrics.to_dict(),
            'dvol': self.dvol.to_dict(),
            'data_points': self.data_points,
            'calculated_at': self.calculated_at.isoformat(),
            'provider': self.provider,
        }
