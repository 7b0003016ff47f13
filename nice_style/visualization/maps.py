# nice_style/visualization/maps.py
#
# Tile-based choropleth maps with NICE bin colours. Values are classified into
# the five fixed bins plus "missing" and drawn with a discrete legend.

import logging
from typing import Any, Dict, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from ..config.settings import settings
from ..data_processing.binning import BIN_CATEGORIES, bin_series
from ..exceptions import InvalidConfiguration
from .palette import BIN_COLOURS
from .themes import nice_theme_template

logger = logging.getLogger(__name__)

# Helper column holding each row's bin label.
BIN_COLUMN = "_nice_bin"


def create_empty_figure(title: str) -> go.Figure:
    """Creates a themed, blank figure with a user-friendly message."""
    fig = go.Figure()
    fig.update_layout(
        template=nice_theme_template,
        title_text=f'<b>{title}</b>',
        xaxis={'visible': False},
        yaxis={'visible': False}
    )
    fig.add_annotation(
        text="No data available.", xref="paper", yref="paper",
        x=0.5, y=0.5, showarrow=False, font_size=14
    )
    return fig


def plot_choropleth_map(
    map_df: pd.DataFrame,
    geojson: Dict[str, Any],
    locations: str,
    value_col: str,
    title: Optional[str] = None,
    featureidkey: Optional[str] = None,
    hover_name: Optional[str] = None
) -> go.Figure:
    """
    Creates a choropleth map coloured by the fixed value bins.

    Args:
        map_df: One row per area.
        geojson: Area geometries, already loaded by the caller.
        locations: Column matching each row to a GeoJSON feature.
        value_col: Numeric column to classify. Missing or negative values
                   fall into the grey "missing" bin.
        title: Optional map title.
        featureidkey: Path to the feature id in the GeoJSON, e.g.
                      "properties.code". Defaults to the feature "id".
        hover_name: Optional column shown in bold on hover.

    Raises:
        InvalidConfiguration: If locations or value_col is not a column of map_df,
                              or map_df already has a BIN_COLUMN column.
    """
    if map_df.empty:
        logger.warning("[Maps] No rows to map; returning an empty figure.")
        return create_empty_figure(title or "Map")

    missing_cols = [col for col in (locations, value_col) if col not in map_df.columns]
    if missing_cols:
        logger.warning(f"[Maps] Columns not found in map data: {missing_cols}")
        raise InvalidConfiguration(f"Columns not found in map data: {', '.join(missing_cols)}")
    if BIN_COLUMN in map_df.columns:
        logger.warning(f"[Maps] Column '{BIN_COLUMN}' is reserved for bin labels.")
        raise InvalidConfiguration(f"Column name '{BIN_COLUMN}' is reserved; rename it before mapping.")

    df = map_df.copy()
    df[BIN_COLUMN] = bin_series(df[value_col]).astype(str)

    px_kwargs: Dict[str, Any] = {}
    if featureidkey:
        px_kwargs["featureidkey"] = featureidkey

    fig = px.choropleth_map(
        df,
        geojson=geojson,
        locations=locations,
        color=BIN_COLUMN,
        color_discrete_map=dict(BIN_COLOURS),
        category_orders={BIN_COLUMN: list(BIN_CATEGORIES)},
        hover_name=hover_name,
        hover_data={value_col: True, BIN_COLUMN: False},
        map_style=settings.map.style,
        zoom=settings.map.default_zoom,
        center={"lat": settings.map.center_lat, "lon": settings.map.center_lon},
        opacity=settings.map.opacity,
        title=f'<b>{title}</b>' if title else None,
        **px_kwargs
    )
    fig.update_layout(
        template=nice_theme_template,
        margin={"r": 0, "t": 40 if title else 0, "l": 0, "b": 0},
        legend=dict(title_text='', orientation='v', yanchor='top', y=0.98, xanchor='left', x=0.01)
    )
    logger.debug(f"[Maps] Choropleth built for {len(df)} areas from column '{value_col}'.")
    return fig
