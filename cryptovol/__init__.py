"""
cryptovol: realized volatility and DVOL estimation for price series.

Turns an ordered series of (timestamp, price) points into log returns,
baseline volatility metrics, a DVOL estimate (simple, EWMA or GARCH) and
return diagnostics.
"""

from cryptovol.utils import (
    ConfigError,
    InsufficientDataError,
    InvalidParameterError,
    InvalidPriceError,
    ValidationError,
    load_config,
    setup_logging,
)
from cryptovol.types import (
    DiagnosticsResult,
    DVOLMethod,
    DVOLResult,
    GARCHParams,
    PricePoint,
    VolatilityMetrics,
    VolatilityResult,
)
from cryptovol.returns import compute_log_returns
from cryptovol.volatility import (
    annualize_volatility,
    calculate_mean,
    calculate_metrics,
    calculate_standard_deviation,
    calculate_variance,
    get_periods_per_year,
)
from cryptovol.estimators import DVOLConfig, calculate_dvol, get_estimator
from cryptovol.analysis import (
    build_volatility_result,
    calculate_diagnostics,
    run_all_methods,
)

__version__ = "0.1.0"

__all__ = [
    'ConfigError',
    'InsufficientDataError',
    'InvalidParameterError',
    'InvalidPriceError',
    'ValidationError',
    'load_config',
    'setup_logging',
    'DiagnosticsResult',
    'DVOLMethod',
    'DVOLResult',
    'GARCHParams',
    'PricePoint',
    'VolatilityMetrics',
    'VolatilityResult',
    'compute_log_returns',
    'annualize_volatility',
    'calculate_mean',
    'calculate_metrics',
    'calculate_standard_deviation',
    'calculate_variance',
    'get_periods_per_year',
    'DVOLConfig',
    'calculate_dvol',
    'get_estimator',
    'build_volatility_result',
    'calculate_diagnostics',
    'run_all_methods',
]
