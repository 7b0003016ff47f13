# nice_style/data_processing/binning.py
#
# Classifies values into the five ordinal bins used for choropleth fills.
# Intervals are half-open [low, high); the last bin is [20, inf).

import logging
from typing import Any, Iterable, Tuple, Union

import numpy as np
import pandas as pd

from .helpers import convert_to_numeric, is_missing

logger = logging.getLogger(__name__)

BIN_EDGES: Tuple[float, ...] = (0.0, 5.0, 10.0, 15.0, 20.0, np.inf)
BIN_LABELS: Tuple[str, ...] = ("<5", "5-10", "10-15", "15-20", "20+")
MISSING_LABEL = "missing"

# (label, low, high) rows, checked in increasing order.
BIN_TABLE: Tuple[Tuple[str, float, float], ...] = tuple(
    zip(BIN_LABELS, BIN_EDGES[:-1], BIN_EDGES[1:])
)

# Category order for legends: the five bins, then missing.
BIN_CATEGORIES: Tuple[str, ...] = BIN_LABELS + (MISSING_LABEL,)


def bin_value(value: Any) -> str:
    """
    Returns the bin label for a single value.

    Missing input short-circuits to MISSING_LABEL before any comparison, as do
    negative numbers. 4.9 -> "<5", 5.0 -> "5-10", 20.0 -> "20+".
    """
    if is_missing(value):
        return MISSING_LABEL

    numeric = convert_to_numeric(value)
    if pd.isna(numeric) or numeric < BIN_EDGES[0]:
        return MISSING_LABEL

    for label, low, high in BIN_TABLE:
        if low <= numeric < high:
            return label
    # Only +inf reaches here.
    return BIN_LABELS[-1]


def bin_series(values: Union[pd.Series, Iterable[Any]]) -> pd.Series:
    """
    Vectorised bin_value over a Series (or any iterable).

    Returns an ordered categorical Series with the categories in BIN_CATEGORIES
    order, keeping the input's index and name.
    """
    series = values if isinstance(values, pd.Series) else pd.Series(list(values), dtype=object)
    numeric = convert_to_numeric(series)
    # pd.cut drops +inf from [20, inf); keep it in the top bin.
    numeric = numeric.replace(np.inf, np.finfo(float).max)

    binned = pd.cut(numeric, bins=list(BIN_EDGES), labels=list(BIN_LABELS), right=False)
    binned = binned.cat.add_categories([MISSING_LABEL]).fillna(MISSING_LABEL)

    missing_count = int((binned == MISSING_LABEL).sum())
    if missing_count:
        logger.debug(f"[Binning] {missing_count} of {len(binned)} values assigned to '{MISSING_LABEL}'.")
    return binned.rename(series.name)
