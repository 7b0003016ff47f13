# nice_style/data_processing/__init__.py
#
# Value preparation for choropleth fills: numeric coercion and fixed binning.

from .helpers import convert_to_numeric, is_missing
from .binning import (
    BIN_CATEGORIES,
    BIN_EDGES,
    BIN_LABELS,
    MISSING_LABEL,
    bin_series,
    bin_value
)

__all__ = [
    # helpers
    "convert_to_numeric",
    "is_missing",

    # binning
    "BIN_CATEGORIES",
    "BIN_EDGES",
    "BIN_LABELS",
    "MISSING_LABEL",
    "bin_series",
    "bin_value"
]
