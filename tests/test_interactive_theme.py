"""Tests for the interactive (Plotly) theme applier."""

from __future__ import annotations

import logging

import plotly.graph_objects as go
import pytest

from nice_style.config.settings import settings
from nice_style.exceptions import InvalidConfiguration
from nice_style.visualization.interactive import (
    GRIDLINE_RULES,
    INTERACTIVE_CONFIG,
    PLACEHOLDER_X_TITLE,
    PLACEHOLDER_Y_TITLE,
    ChartType,
    apply_interactive_theme,
    gridlines_for,
)
from nice_style.visualization.palette import PRIMARY_PALETTE


@pytest.fixture
def bar_fig():
    return go.Figure(go.Bar(x=["a", "b"], y=[3, 4]))


@pytest.mark.parametrize(
    "chart_type,horizontal,vertical",
    [
        ("vertical_bar", True, False),
        ("horizontal_bar", False, True),
        ("scatter", True, True),
        ("line", True, False),
    ],
)
def test_gridline_table(bar_fig, chart_type, horizontal, vertical):
    apply_interactive_theme(bar_fig, chart_type)
    assert bar_fig.layout.yaxis.showgrid is horizontal
    assert bar_fig.layout.xaxis.showgrid is vertical
    assert gridlines_for(chart_type) == (horizontal, vertical)


def test_rule_table_covers_every_chart_type():
    assert set(GRIDLINE_RULES) == set(ChartType)


@pytest.mark.parametrize("chart_type", ["pie", "Vertical_Bar", "", None])
def test_unknown_chart_type_raises(bar_fig, chart_type):
    with pytest.raises(InvalidConfiguration):
        apply_interactive_theme(bar_fig, chart_type)


def test_horizontal_bar_without_padding(bar_fig):
    fig = apply_interactive_theme(bar_fig, "horizontal_bar", pad_axes=False)
    assert fig.layout.yaxis.showgrid is False
    assert fig.layout.xaxis.showgrid is True
    assert fig.layout.xaxis.ticklabelstandoff == 0
    assert fig.layout.yaxis.ticklabelstandoff == 0


def test_padding_is_applied_by_default(bar_fig):
    apply_interactive_theme(bar_fig, ChartType.SCATTER)
    assert bar_fig.layout.xaxis.ticklabelstandoff == settings.brand.axis_pad_px
    assert bar_fig.layout.yaxis.ticklabelstandoff == settings.brand.axis_pad_px


def test_titles_default_to_placeholders(bar_fig):
    apply_interactive_theme(bar_fig, "line")
    assert bar_fig.layout.xaxis.title.text == PLACEHOLDER_X_TITLE
    assert bar_fig.layout.yaxis.title.text == PLACEHOLDER_Y_TITLE


def test_fonts_use_one_family(bar_fig):
    apply_interactive_theme(bar_fig, "vertical_bar", x_title="Year", y_title="Cases", font_size=12)
    layout = bar_fig.layout
    family = settings.brand.body_font

    assert layout.font.family == family
    assert layout.font.size == 12
    assert layout.xaxis.tickfont.family == family
    assert layout.xaxis.tickfont.size == 12
    assert layout.xaxis.title.font.size == 14
    assert layout.legend.font.family == family
    assert layout.title.font.size == 18
    assert layout.xaxis.title.text == "Year"


def test_non_positive_font_size_raises(bar_fig, caplog):
    with caplog.at_level(logging.WARNING, logger="nice_style.visualization.interactive"):
        with pytest.raises(InvalidConfiguration):
            apply_interactive_theme(bar_fig, "line", font_size=0)
    assert "Rejected font_size 0" in caplog.text


def test_toolbar_keeps_only_image_export(bar_fig):
    apply_interactive_theme(bar_fig, "scatter")
    removed = set(bar_fig.layout.modebar.remove)
    assert "zoom2d" in removed
    assert "pan2d" in removed
    assert "toImage" not in removed
    assert INTERACTIVE_CONFIG["displaylogo"] is False
    assert "toImage" not in INTERACTIVE_CONFIG["modeBarButtonsToRemove"]


def test_data_and_template(bar_fig):
    apply_interactive_theme(bar_fig, "vertical_bar")
    assert list(bar_fig.data[0].y) == [3, 4]
    assert tuple(bar_fig.layout.template.layout.colorway) == PRIMARY_PALETTE
