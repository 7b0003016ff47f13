"""Tests for the brand colour table and primary palette."""

from __future__ import annotations

import re

import pytest

from nice_style.exceptions import IndexOutOfRange, UnknownColourName
from nice_style.visualization.palette import (
    BIN_COLOURS,
    COLOURS,
    PRIMARY_PALETTE,
    hex_to_rgba,
    lookup,
    primary,
    resolve_colour,
)

HEX = re.compile(r"^#[0-9A-F]{6}$")


def test_colour_table_values_are_normalised_hex():
    assert len(COLOURS) == 33
    assert all(HEX.match(value) for value in COLOURS.values())


def test_lookup_returns_same_value_every_time():
    first = lookup("bold_teal")
    assert first == "#228096"
    assert all(lookup("bold_teal") == first for _ in range(5))


def test_lookup_unknown_name_raises():
    with pytest.raises(UnknownColourName, match="no_such_colour"):
        lookup("no_such_colour")
    # Also catchable as the builtin it specialises.
    with pytest.raises(KeyError):
        lookup("no_such_colour")


def test_colour_table_is_read_only():
    with pytest.raises(TypeError):
        COLOURS["bold_teal"] = "#000000"  # type: ignore[index]


def test_primary_palette_is_five_distinct_brand_colours():
    values = [primary(k) for k in range(5)]
    assert values[0] == COLOURS["bold_teal"]
    assert len(set(values)) == 5
    assert all(HEX.match(v) for v in values)
    assert set(PRIMARY_PALETTE) <= set(COLOURS.values())


@pytest.mark.parametrize("k", [5, 6, -1])
def test_primary_out_of_range(k):
    with pytest.raises(IndexOutOfRange):
        primary(k)


def test_bin_colours_cover_all_bins_and_missing_is_grey():
    assert list(BIN_COLOURS) == ["<5", "5-10", "10-15", "15-20", "20+", "missing"]
    assert BIN_COLOURS["missing"] == COLOURS["neutral_grey"]


def test_resolve_colour_accepts_names_and_hex():
    assert resolve_colour("white") == "#FFFFFF"
    assert resolve_colour("#abc") == "#AABBCC"
    assert resolve_colour("228096") == "#228096"
    with pytest.raises(UnknownColourName):
        resolve_colour("teal-ish")


def test_hex_to_rgba():
    assert hex_to_rgba("bold_teal", 0.5) == "rgba(34, 128, 150, 0.5)"
