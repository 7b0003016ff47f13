# nice_style/visualization/palette.py
#
# The NICE brand colour table. Plain data plus two lookup functions, so any
# consumer (matplotlib, Plotly, map layers) can share one source of truth.

import logging
import re
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from ..exceptions import IndexOutOfRange, UnknownColourName

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r'^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$')


def _normalise_hex(value: str) -> str:
    """Returns '#RRGGBB' in upper case, expanding 3-digit shorthand."""
    match = _HEX_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"'{value}' is not a hex colour")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits.upper()}"


_RAW_COLOURS: Dict[str, str] = {
    # --- Neutrals ---
    "black": "#000000",
    "white": "#FFFFFF",
    "off_white": "#F7F7F7",
    "light_grey": "#E5E5E5",
    "neutral_grey": "#D9D9D9",
    "grid_grey": "#BFBFBF",
    "mid_grey": "#8C8C8C",
    "dark_grey": "#4D4D4D",

    # --- Teals (primary brand family) ---
    "bold_teal": "#228096",
    "dark_teal": "#00546E",
    "mid_teal": "#5EA8B8",
    "light_teal": "#A6D1DB",
    "pale_teal": "#E0F0F3",

    # --- Secondary families ---
    "bold_purple": "#6C3E8C",
    "mid_purple": "#9C7BB3",
    "light_purple": "#D4C5E0",
    "bold_orange": "#E06B26",
    "mid_orange": "#F09A5E",
    "light_orange": "#F8CCAB",
    "bold_green": "#3C8A3E",
    "mid_green": "#7BB47C",
    "light_green": "#C2DFC2",
    "bold_pink": "#C4326B",
    "mid_pink": "#DB7BA0",
    "light_pink": "#F0C6D6",
    "bold_yellow": "#F2B705",
    "light_yellow": "#FBE39B",
    "navy": "#0E2841",
    "bold_blue": "#1F6FB5",
    "light_blue": "#9CC3E6",

    # --- Status ---
    "red": "#C0392B",
    "amber": "#F39C12",
    "forest": "#1E5631",
}

# Read-only view over the table; entries cannot be added or changed.
COLOURS: Mapping[str, str] = MappingProxyType(
    {name: _normalise_hex(value) for name, value in _RAW_COLOURS.items()}
)

# Default category colours. Order matters: the first entry is the brand colour.
PRIMARY_PALETTE: Tuple[str, ...] = tuple(
    COLOURS[name] for name in ("bold_teal", "bold_purple", "bold_orange", "bold_green", "bold_pink")
)

# Sequential fills for the choropleth bins, light to dark, plus the missing bin.
BIN_COLOURS: Mapping[str, str] = MappingProxyType({
    "<5": COLOURS["pale_teal"],
    "5-10": COLOURS["light_teal"],
    "10-15": COLOURS["mid_teal"],
    "15-20": COLOURS["bold_teal"],
    "20+": COLOURS["dark_teal"],
    "missing": COLOURS["neutral_grey"],
})


def lookup(name: str) -> str:
    """Returns the hex value for a brand colour name."""
    try:
        return COLOURS[name]
    except KeyError:
        logger.warning(f"[Palette] Unknown colour name requested: '{name}'")
        raise UnknownColourName(
            f"Unknown colour '{name}'. Known colours: {', '.join(sorted(COLOURS))}"
        ) from None


def primary(k: int) -> str:
    """Returns the k-th primary brand colour, 0 being the main brand colour."""
    if not 0 <= k < len(PRIMARY_PALETTE):
        raise IndexOutOfRange(
            f"Primary palette index {k} is outside [0, {len(PRIMARY_PALETTE)})"
        )
    return PRIMARY_PALETTE[k]


def resolve_colour(value: str) -> str:
    """Accepts either a brand colour name or a hex string and returns the hex value."""
    if value in COLOURS:
        return COLOURS[value]
    try:
        return _normalise_hex(value)
    except ValueError:
        return lookup(value)


def hex_to_rgba(value: str, alpha: float = 1.0) -> str:
    """Converts a hex colour (or brand colour name) to a CSS rgba() string for Plotly."""
    hex_value = resolve_colour(value)
    r, g, b = (int(hex_value[i:i + 2], 16) for i in (1, 3, 5))
    return f"rgba({r}, {g}, {b}, {alpha})"
