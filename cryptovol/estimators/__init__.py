"""
DVOL estimator modules.

This package contains the three DVOL estimators:
- Simple: Rolling-window realized volatility
- EWMA: Exponentially weighted moving average variance
- GARCH: GARCH(1,1) conditional variance with fixed coefficients
"""

from cryptovol.estimators.base import (
    BaseDVOLEstimator,
    calculate_dvol_index,
    calculate_stability,
)
from cryptovol.estimators.simple import SimpleDVOLEstimator, rolling_volatilities
from cryptovol.estimators.ewma import EWMADVOLEstimator, ewma_variances
from cryptovol.estimators.garch import GARCHDVOLEstimator, garch_variances
from cryptovol.estimators.factory import (
    DEFAULT_CONFIG,
    ESTIMATORS,
    DVOLConfig,
    get_estimator,
    get_estimator_class,
    list_estimators,
    parse_method,
    register_estimator,
)
from cryptovol.estimators.dvol import calculate_dvol

__all__ = [
    'BaseDVOLEstimator',
    'SimpleDVOLEstimator',
    'EWMADVOLEstimator',
    'GARCHDVOLEstimator',
    'DVOLConfig',
    'DEFAULT_CONFIG',
    'ESTIMATORS',
    'calculate_dvol',
    'calculate_dvol_index',
    'calculate_stability',
    'ewma_variances',
    'garch_variances',
    'get_estimator',
    'get_estimator_class',
    'list_estimators',
    'parse_method',
    'register_estimator',
    'rolling_volatilities',
]
