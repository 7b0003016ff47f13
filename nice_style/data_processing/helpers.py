# nice_style/data_processing/helpers.py
#
# Numeric coercion used before values are classified into map bins.

import logging
import re
from typing import Any

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

# Pre-compiled regex for the various "Not Available" strings found in source tables.
_NA_REGEX_PATTERN = re.compile(
    r'(?i)^\s*(nan|none|n/a|#n/a|na|null|nil|<na>|undefined|unknown|-|)\s*$'
)


def is_missing(value: Any) -> bool:
    """True for None, NaN, pd.NA, NaT and the common "Not Available" strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return _NA_REGEX_PATTERN.match(value) is not None
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # Array-likes have no single truth value; they are not a missing scalar.
        return False


def convert_to_numeric(data: Any) -> Any:
    """
    Converts a scalar or Series to floats, treating "Not Available" strings
    and unparseable entries as NaN.

    Args:
        data: A scalar, list, tuple, ndarray or pandas Series.

    Returns:
        A float for scalar input, otherwise a float Series keeping a Series
        input's index and name.
    """
    is_scalar = not isinstance(data, (pd.Series, list, tuple, np.ndarray))
    if isinstance(data, pd.Series):
        series = data
    elif is_scalar:
        series = pd.Series([data], dtype=object)
    else:
        series = pd.Series(list(data), dtype=object)

    if pd.api.types.is_object_dtype(series.dtype) or pd.api.types.is_string_dtype(series.dtype):
        series = series.replace(_NA_REGEX_PATTERN, np.nan, regex=True)

    numeric_series = pd.to_numeric(series, errors='coerce').astype(float)
    return numeric_series.iloc[0] if is_scalar else numeric_series
