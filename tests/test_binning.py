"""Tests for choropleth value binning."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd
import pytest

from nice_style.data_processing import BIN_CATEGORIES, MISSING_LABEL, bin_series, bin_value, convert_to_numeric


def expected_label(v: float) -> str:
    if v < 0:
        return MISSING_LABEL
    if v < 5:
        return "<5"
    if v < 10:
        return "5-10"
    if v < 15:
        return "10-15"
    if v < 20:
        return "15-20"
    return "20+"


@pytest.mark.parametrize(
    "value,label",
    [
        (0, "<5"),
        (4.9, "<5"),
        (5.0, "5-10"),
        (9.999, "5-10"),
        (10, "10-15"),
        (15.0, "15-20"),
        (19.99, "15-20"),
        (20.0, "20+"),
        (1e9, "20+"),
        (math.inf, "20+"),
        ("7.5", "5-10"),
    ],
)
def test_bin_value_boundaries(value, label):
    assert bin_value(value) == label


@pytest.mark.parametrize(
    "value", [None, np.nan, pd.NA, "N/A", "undefined", "", -0.1, -math.inf, "not a number"]
)
def test_missing_and_negative_values_map_to_missing(value):
    assert bin_value(value) == MISSING_LABEL


def test_bin_value_matches_interval_rule_over_a_sweep():
    for v in np.linspace(-5, 30, 701):
        assert bin_value(v) == expected_label(v), v


def test_bin_series_agrees_with_bin_value():
    values = [4.9, None, "N/A", 20, -1, 5, 12.5, 17, np.inf]
    result = bin_series(values)
    assert list(result) == [bin_value(v) for v in values]
    assert list(result) == ["<5", "missing", "missing", "20+", "missing", "5-10", "10-15", "15-20", "20+"]


def test_bin_series_keeps_index_name_and_category_order():
    series = pd.Series([1.0, 22.0, np.nan], index=["a", "b", "c"], name="rate")
    result = bin_series(series)
    assert list(result.index) == ["a", "b", "c"]
    assert result.name == "rate"
    assert list(result.cat.categories) == list(BIN_CATEGORIES)
    assert result.cat.ordered
    assert result["c"] == MISSING_LABEL


def test_convert_to_numeric_returns_floats():
    result = convert_to_numeric(["1", "N/A", 2, "abc"])
    assert result.dtype == float
    assert result[0] == 1.0
    assert math.isnan(result[1])
    assert result[2] == 2.0
    assert math.isnan(result[3])

    assert convert_to_numeric("12") == 12.0
    assert isinstance(convert_to_numeric(3), float)
    assert math.isnan(convert_to_numeric("undefined"))
