# traveltide_features/core/features/features_helpers.py
"""Helper methods for feature engineering.

Two averaging policies are used by the aggregation stages and must not be mixed up:

- ``mean_ignoring_nulls``: absent terms drop out of both the sum and the count,
  so the result is NaN when no term is present.
- ``mean_defaulting_nulls``: absent terms count as zero before averaging.
"""
import numpy as np  # type: ignore
import pandas as pd  # type: ignore


# --- HELPER METHODS ---

def mean_ignoring_nulls(values: pd.Series) -> float:
    """Mean over present values only; NaN when every value is absent."""
    return values.mean(skipna=True)


def mean_defaulting_nulls(values: pd.Series) -> float:
    """Mean with absent values read as 0; 0 for an empty series."""
    if len(values) == 0:
        return 0.0
    return values.fillna(0).mean()


def safe_divide(numerator, denominator):
    """Element-wise ratio that is 0 wherever the denominator is 0 or absent."""
    numerator = pd.Series(numerator, dtype="float64")
    denominator = pd.Series(denominator, dtype="float64", index=numerator.index)
    ratio = np.divide(
        numerator.fillna(0),
        denominator.replace(0, np.nan)
    )
    return ratio.fillna(0)


def coalesce(values: pd.Series, default):
    """Replace absent values with a default."""
    return values.where(values.notna(), default)
