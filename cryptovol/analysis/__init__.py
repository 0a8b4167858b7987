"""
Analysis module for DVOL diagnostics and comparison.

Includes:
- Return diagnostics (autocorrelation, ARCH effect, skewness, kurtosis)
- Multi-method DVOL comparison
- Volatility report assembly
"""

from cryptovol.analysis.diagnostics import (
    calculate_autocorrelation,
    calculate_diagnostics,
    calculate_heteroskedasticity,
    calculate_kurtosis,
    calculate_skewness,
)
from cryptovol.analysis.comparison import (
    run_all_methods,
    summarize_methods,
)
from cryptovol.analysis.report import build_volatility_result

__all__ = [
    # Diagnostics
    'calculate_autocorrelation',
    'calculate_diagnostics',
    'calculate_heteroskedasticity',
    'calculate_kurtosis',
    'calculate_skewness',
    # Comparison
    'run_all_methods',
    'summarize_methods',
    # Report
    'build_volatility_result',
]
