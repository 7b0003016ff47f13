# nice_style/visualization/interactive.py
#
# Applies the NICE style to an interactive Plotly figure. Which gridlines are
# shown depends only on the chart type, through the GRIDLINE_RULES table.

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Union

import plotly.graph_objects as go

from ..config.settings import settings
from ..exceptions import InvalidConfiguration
from .themes import nice_theme_template

logger = logging.getLogger(__name__)

PLACEHOLDER_X_TITLE = "ADD X AXIS TITLE"
PLACEHOLDER_Y_TITLE = "ADD Y AXIS TITLE"


class ChartType(str, Enum):
    VERTICAL_BAR = "vertical_bar"
    HORIZONTAL_BAR = "horizontal_bar"
    SCATTER = "scatter"
    LINE = "line"


class GridLines(NamedTuple):
    """Major gridline visibility. Horizontal lines belong to the y-axis, vertical to the x-axis."""
    horizontal: bool
    vertical: bool


GRIDLINE_RULES: Mapping[ChartType, GridLines] = MappingProxyType({
    ChartType.VERTICAL_BAR: GridLines(horizontal=True, vertical=False),
    ChartType.HORIZONTAL_BAR: GridLines(horizontal=False, vertical=True),
    ChartType.SCATTER: GridLines(horizontal=True, vertical=True),
    ChartType.LINE: GridLines(horizontal=True, vertical=False),
})

# Every modebar action except "toImage" (download as a static image).
MODEBAR_BUTTONS_TO_REMOVE = (
    "zoom2d", "pan2d", "select2d", "lasso2d", "zoomIn2d", "zoomOut2d",
    "autoScale2d", "resetScale2d", "hoverClosestCartesian", "hoverCompareCartesian",
    "toggleSpikelines", "toggleHover", "resetViews",
    "zoomInMap", "zoomOutMap", "resetViewMap",
    "zoomInGeo", "zoomOutGeo", "resetGeo",
)

# Display config to pass to fig.show(config=...) / st.plotly_chart(config=...).
INTERACTIVE_CONFIG = {
    "displaylogo": False,
    "modeBarButtonsToRemove": list(MODEBAR_BUTTONS_TO_REMOVE),
}


def parse_chart_type(chart_type: Union[str, ChartType]) -> ChartType:
    """Returns the ChartType for a tag, raising InvalidConfiguration for anything unrecognised."""
    try:
        return ChartType(chart_type)
    except ValueError:
        valid = ", ".join(t.value for t in ChartType)
        logger.warning(f"[InteractiveTheme] Unrecognised chart type '{chart_type}'.")
        raise InvalidConfiguration(f"Unknown chart_type '{chart_type}'. Expected one of: {valid}") from None


def gridlines_for(chart_type: Union[str, ChartType]) -> GridLines:
    return GRIDLINE_RULES[parse_chart_type(chart_type)]


def apply_interactive_theme(
    fig: go.Figure,
    chart_type: Union[str, ChartType],
    x_title: str = PLACEHOLDER_X_TITLE,
    y_title: str = PLACEHOLDER_Y_TITLE,
    font_size: Optional[int] = None,
    pad_axes: bool = True
) -> go.Figure:
    """
    Styles a Plotly figure in place and returns it.

    Args:
        fig: The figure, with its traces already added. Traces are not modified.
        chart_type: One of the ChartType values; selects the gridline rule.
        x_title: X-axis title. The default is a reminder to replace it.
        y_title: Y-axis title. The default is a reminder to replace it.
        font_size: Size for tick labels, legend and hover text. Axis titles use
                   font_size + 2 and the plot title font_size * 1.5.
                   Defaults to settings.brand.interactive_font_size (12).
        pad_axes: Offset tick labels from the axis line. Set False when the
                  chart shows tick marks, which already provide the gap.
    """
    grid = gridlines_for(chart_type)
    if font_size is None:
        font_size = settings.brand.interactive_font_size
    if font_size <= 0:
        logger.warning(f"[InteractiveTheme] Rejected font_size {font_size}.")
        raise InvalidConfiguration(f"font_size must be positive, got {font_size}")

    family = settings.brand.body_font
    standoff = settings.brand.axis_pad_px if pad_axes else 0
    tick_font = dict(family=family, size=font_size, color=settings.brand.text_colour)
    axis_title_font = dict(family=family, size=font_size + 2, color=settings.brand.text_colour)

    fig.update_layout(
        template=nice_theme_template,
        font=dict(family=family, size=font_size, color=settings.brand.text_colour),
        title_font=dict(family=settings.brand.title_font, size=round(font_size * 1.5)),
        legend=dict(font=tick_font, title_text=''),
        hoverlabel=dict(font_size=font_size, font_family=family),
        modebar_remove=list(MODEBAR_BUTTONS_TO_REMOVE)
    )
    fig.update_xaxes(
        title_text=x_title,
        title_font=axis_title_font,
        tickfont=tick_font,
        showgrid=grid.vertical,
        gridcolor=settings.brand.grid_colour,
        ticklabelstandoff=standoff,
        zeroline=False
    )
    fig.update_yaxes(
        title_text=y_title,
        title_font=axis_title_font,
        tickfont=tick_font,
        showgrid=grid.horizontal,
        gridcolor=settings.brand.grid_colour,
        ticklabelstandoff=standoff,
        zeroline=False
    )

    logger.debug(
        f"[InteractiveTheme] Applied '{ChartType(chart_type).value}' style "
        f"(grid h={grid.horizontal}, v={grid.vertical}, standoff={standoff}px)."
    )
    return fig
