"""nice-style: NICE brand styling for matplotlib and Plotly charts."""

from .config.settings import configure_logging, settings
from .data_processing import MISSING_LABEL, bin_series, bin_value
from .exceptions import IndexOutOfRange, InvalidConfiguration, NiceStyleError, UnknownColourName
from .visualization import (
    BIN_COLOURS,
    COLOURS,
    INTERACTIVE_CONFIG,
    PRIMARY_PALETTE,
    ChartType,
    StaticTheme,
    apply_interactive_theme,
    apply_static_theme,
    build_static_theme,
    finalise_plot,
    lookup,
    plot_choropleth_map,
    primary
)

__version__ = "1.0.0"

__all__ = [
    "configure_logging",
    "settings",
    "MISSING_LABEL",
    "bin_series",
    "bin_value",
    "IndexOutOfRange",
    "InvalidConfiguration",
    "NiceStyleError",
    "UnknownColourName",
    "BIN_COLOURS",
    "COLOURS",
    "INTERACTIVE_CONFIG",
    "PRIMARY_PALETTE",
    "ChartType",
    "StaticTheme",
    "apply_interactive_theme",
    "apply_static_theme",
    "build_static_theme",
    "finalise_plot",
    "lookup",
    "plot_choropleth_map",
    "primary",
]
