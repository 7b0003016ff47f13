# nice_style/visualization/__init__.py
#
# Public API of the visualization package: the brand palette, the static and
# interactive themes, the finishing step and choropleth maps.

"""
Makes the styling functions available at the package level for cleaner imports.
"""

# --- Palette ---
from .palette import (
    BIN_COLOURS,
    COLOURS,
    PRIMARY_PALETTE,
    hex_to_rgba,
    lookup,
    primary,
    resolve_colour
)

# --- Theming ---
from .themes import TEMPLATE_NAME, nice_theme_template
from .static import StaticTheme, apply_static_theme, build_static_theme
from .interactive import (
    GRIDLINE_RULES,
    INTERACTIVE_CONFIG,
    ChartType,
    GridLines,
    apply_interactive_theme,
    gridlines_for
)

# --- Finishing & Maps ---
from .finishing import LOGO_OPTIONS, finalise_plot
from .maps import create_empty_figure, plot_choropleth_map


__all__ = [
    # palette
    "BIN_COLOURS",
    "COLOURS",
    "PRIMARY_PALETTE",
    "hex_to_rgba",
    "lookup",
    "primary",
    "resolve_colour",

    # themes
    "TEMPLATE_NAME",
    "nice_theme_template",
    "StaticTheme",
    "apply_static_theme",
    "build_static_theme",
    "GRIDLINE_RULES",
    "INTERACTIVE_CONFIG",
    "ChartType",
    "GridLines",
    "apply_interactive_theme",
    "gridlines_for",

    # finishing & maps
    "LOGO_OPTIONS",
    "finalise_plot",
    "create_empty_figure",
    "plot_choropleth_map"
]
