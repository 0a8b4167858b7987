"""
DVOL method comparison module.

Runs every DVOL method on the same series and reports the results
side-by-side.
"""

import logging
from typing import Optional

import numpy as np
import pandas as pd

from cryptovol.estimators import DVOLConfig, get_estimator, list_estimators
from cryptovol.types import PriceSeries, as_price_array
from cryptovol.utils import InvalidPriceError, ValidationError

logger = logging.getLogger(__name__)

COMPARISON_COLUMNS = ['method', 'dvol', 'dvol_index', 'confidence', 'data_points']


def run_all_methods(
    series: PriceSeries,
    config: Optional[DVOLConfig] = None
) -> pd.DataFrame:
    """
    Run all DVOL methods on the same series.

    A method that rejects the input (too few points, bad parameters) is
    logged and reported as a NaN row; price errors still propagate since
    they would fail every method.

    Args:
        series: Price series
        config: Estimator parameters (default: DVOLConfig())

    Returns:
        DataFrame with columns: method, dvol, dvol_index, confidence,
        data_points (one row per method)
    """
    config = config or DVOLConfig()
    prices = as_price_array(series)
    rows = []

    for method in list_estimators():
        try:
            result = get_estimator(method, config).compute(prices)
        except InvalidPriceError:
            raise
        except ValidationError as e:
            logger.warning("%s DVOL skipped: %s", method, e)
            rows.append({
                'method': method,
                'dvol': np.nan,
                'dvol_index': np.nan,
                'confidence': np.nan,
                'data_points': len(prices),
            })
            continue

        rows.append({
            'method': method,
            'dvol': result.dvol,
            'dvol_index': result.dvol_index,
            'confidence': result.confidence,
            'data_points': result.data_points,
        })

    return pd.DataFrame(rows, columns=COMPARISON_COLUMNS)


def summarize_methods(comparison: pd.DataFrame) -> dict:
    """
    Summary statistics of the DVOL column of a comparison table.

    Args:
        comparison: Output of run_all_methods

    Returns:
        Dictionary with mean, min, max, spread and count of valid estimates
    """
    dvol = comparison['dvol'].dropna()
    if len(dvol) == 0:
        return {
            'mean': np.nan,
            'min': np.nan,
            'max': np.nan,
            'spread': np.nan,
            'count': 0,
        }

    return {
        'mean': float(dvol.mean()),
        'min': float(dvol.min()),
        'max': float(dvol.max()),
        'spread': float(dvol.max() - dvol.min()),
        'count': int(len(dvol)),
    }
