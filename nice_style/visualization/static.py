# nice_style/visualization/static.py
#
# The NICE style for static matplotlib charts.
#
# A StaticTheme is an immutable value. build_static_theme() creates one from the
# brand defaults, StaticTheme.merge() derives a new one with caller overrides
# (last write wins), and apply_static_theme() styles an existing figure with it.

import logging
from typing import Any, Dict, List, Literal, Optional, Tuple, Union

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, ValidationError, field_validator

from ..config.settings import settings
from ..exceptions import InvalidConfiguration, UnknownColourName
from .palette import COLOURS, PRIMARY_PALETTE, resolve_colour

logger = logging.getLogger(__name__)

LegendPosition = Union[Literal["none", "top", "bottom", "left", "right"], Tuple[float, float]]

# Text sizes relative to base_font_size.
SIZE_MULTIPLIERS: Dict[str, float] = {
    "title": 2.0,
    "subtitle": 1.6,
    "axis_text": 1.0,
    "legend_text": 1.0,
    "strip_text": 1.0,
}

# Gap between title/subtitle lines, in points.
TITLE_MARGIN_PT = 9.0

# Where a legend goes for each named position: (loc, bbox_to_anchor, one row?).
_LEGEND_PLACEMENT: Dict[str, Tuple[str, Tuple[float, float], bool]] = {
    "top": ("lower center", (0.5, 1.02), True),
    "bottom": ("upper center", (0.5, -0.08), True),
    "left": ("center right", (-0.08, 0.5), False),
    "right": ("center left", (1.02, 0.5), False),
}

TITLE_GID = "title"
SUBTITLE_GID = "subtitle"


class StaticTheme(BaseModel):
    """Style settings for static charts. Instances are frozen; use merge() to vary one."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    base_font_size: PositiveFloat = Field(default_factory=lambda: settings.brand.base_font_size)
    legend_position: LegendPosition = "none"
    title_font: str = Field(default_factory=lambda: settings.brand.title_font)
    body_font: str = Field(default_factory=lambda: settings.brand.body_font)

    show_x_grid: bool = Field(default_factory=lambda: settings.brand.show_x_grid)
    show_y_grid: bool = True
    panel_border: str = "none"
    strip_fill: str = PRIMARY_PALETTE[0]

    @field_validator("panel_border", "strip_fill")
    @classmethod
    def _resolve_colour(cls, value: str) -> str:
        if value == "none":
            return value
        try:
            return resolve_colour(value)
        except UnknownColourName as e:
            raise ValueError(str(e)) from None

    # --- Derived sizes ---
    def size(self, element: str) -> float:
        return self.base_font_size * SIZE_MULTIPLIERS[element]

    @property
    def title_size(self) -> float:
        return self.size("title")

    @property
    def subtitle_size(self) -> float:
        return self.size("subtitle")

    @property
    def font_stack(self) -> List[str]:
        return [self.body_font] + settings.brand.font_stack[1:]

    def merge(self, **overrides: Any) -> "StaticTheme":
        """Returns a new theme with the given fields replaced. The receiver is unchanged."""
        return _validated_theme({**self.model_dump(), **overrides})

    def rc_params(self) -> Dict[str, Any]:
        """matplotlib rcParams for figures created under this theme (see matplotlib.rc_context)."""
        grid_axis = {
            (True, True): "both",
            (True, False): "x",
            (False, True): "y",
        }.get((self.show_x_grid, self.show_y_grid), "both")
        has_border = self.panel_border != "none"
        text_colour = settings.brand.text_colour

        return {
            # Font
            "font.family": "sans-serif",
            "font.sans-serif": [name for name in self.font_stack if name != "sans-serif"],
            "font.size": self.base_font_size,
            "text.color": text_colour,

            # Figure
            "figure.facecolor": COLOURS["white"],

            # Axes
            "axes.facecolor": "none",
            "axes.edgecolor": self.panel_border if has_border else "none",
            "axes.linewidth": 0.5 if has_border else 0.0,
            "axes.spines.top": has_border,
            "axes.spines.right": has_border,
            "axes.spines.bottom": has_border,
            "axes.spines.left": has_border,
            "axes.titlesize": self.size("strip_text"),
            "axes.labelsize": self.size("axis_text"),
            "axes.labelcolor": text_colour,
            "axes.prop_cycle": plt.cycler(color=list(PRIMARY_PALETTE)),
            "axes.grid": self.show_x_grid or self.show_y_grid,
            "axes.grid.axis": grid_axis,
            "axes.grid.which": "major",
            "axes.axisbelow": True,

            # Grid
            "grid.color": settings.brand.grid_colour,
            "grid.linewidth": 0.8,

            # Ticks: labels only
            "xtick.major.size": 0,
            "xtick.minor.size": 0,
            "ytick.major.size": 0,
            "ytick.minor.size": 0,
            "xtick.major.pad": 5,
            "xtick.labelsize": self.size("axis_text"),
            "ytick.labelsize": self.size("axis_text"),
            "xtick.color": text_colour,
            "ytick.color": text_colour,

            # Legend
            "legend.frameon": False,
            "legend.fontsize": self.size("legend_text"),
            "legend.title_fontsize": self.size("legend_text"),
        }


def _validated_theme(fields: Dict[str, Any]) -> StaticTheme:
    try:
        return StaticTheme(**fields)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        logger.warning(f"[StaticTheme] Rejected configuration: {problems}")
        raise InvalidConfiguration(f"Invalid static theme configuration: {problems}") from e


def build_static_theme(
    legend_position: LegendPosition = "none",
    base_font_size: Optional[float] = None,
    **overrides: Any
) -> StaticTheme:
    """
    Builds the NICE static chart theme.

    Args:
        legend_position: "none", "top", "bottom", "left", "right", or an (x, y)
                         pair in axes coordinates.
        base_font_size: Body text size in points. Title is 2x, subtitle 1.6x.
                        Defaults to settings.brand.base_font_size (11).
        **overrides: Any other StaticTheme field, e.g. show_x_grid=False or
                     panel_border="black".

    Raises:
        InvalidConfiguration: If any value is not recognised.
    """
    fields: Dict[str, Any] = {"legend_position": legend_position, **overrides}
    if base_font_size is not None:
        fields["base_font_size"] = base_font_size
    return _validated_theme(fields)


# -----------------------------------------------------------------------------
# Applying a theme to a figure
# -----------------------------------------------------------------------------

def plot_left_edge(fig: plt.Figure) -> float:
    """Left edge of the plotting area in figure coordinates."""
    axes = _content_axes(fig)
    return min(ax.get_position().x0 for ax in axes) if axes else 0.0


def plot_right_edge(fig: plt.Figure) -> float:
    """Right edge of the plotting area in figure coordinates."""
    axes = _content_axes(fig)
    return max(ax.get_position().x1 for ax in axes) if axes else 1.0


def find_by_gid(fig: plt.Figure, gid: str) -> list:
    """All artists in the figure tagged with the given gid."""
    return list(fig.findobj(match=lambda artist: artist.get_gid() == gid, include_self=False))


def _content_axes(fig: plt.Figure) -> List[Axes]:
    return [ax for ax in fig.axes if ax.get_label() != "<colorbar>"]


def _panels(axes: List[Axes]) -> Dict[Tuple[float, ...], List[Axes]]:
    """Groups axes by position. A twinx/twiny axes shares its parent's panel."""
    panels: Dict[Tuple[float, ...], List[Axes]] = {}
    for ax in axes:
        key = tuple(round(v, 6) for v in ax.get_position().bounds)
        panels.setdefault(key, []).append(ax)
    return panels


def _style_legend(ax: Axes, theme: StaticTheme) -> None:
    legend = ax.get_legend()
    if legend is None:
        return
    if theme.legend_position == "none":
        legend.remove()
        return

    handles = list(legend.legend_handles)
    labels = [text.get_text() for text in legend.get_texts()]
    if isinstance(theme.legend_position, tuple):
        loc, anchor, one_row = "center", theme.legend_position, False
    else:
        loc, anchor, one_row = _LEGEND_PLACEMENT[theme.legend_position]

    # Re-creating the legend replaces the old one on the axes.
    ax.legend(
        handles,
        labels,
        loc=loc,
        bbox_to_anchor=anchor,
        ncol=max(len(labels), 1) if one_row else 1,
        frameon=False,
        facecolor="none",
        alignment="left",
        title=None,
        prop={"family": theme.font_stack, "size": theme.size("legend_text")},
        labelcolor=settings.brand.text_colour,
        handlelength=1.0,
    )


def _style_strip(ax: Axes, theme: StaticTheme) -> None:
    """Renders a facet panel's title as a filled strip with white centred text."""
    label = ax.get_title(loc="center")
    if not label:
        return
    ax.set_title(
        label,
        loc="center",
        color=COLOURS["white"],
        fontsize=theme.size("strip_text"),
        fontfamily=theme.font_stack,
    )
    ax.title.set_bbox(dict(
        facecolor=theme.strip_fill,
        edgecolor=COLOURS["black"],
        linewidth=1,
        linestyle="solid",
        boxstyle="square,pad=0.3",
    ))


def _style_axes(ax: Axes, theme: StaticTheme, is_faceted: bool, is_twin: bool = False) -> None:
    text_colour = settings.brand.text_colour

    # Axis titles are left blank; the chart title and subtitle carry that information.
    ax.set_xlabel("")
    ax.set_ylabel("")

    ax.minorticks_off()
    ax.tick_params(
        axis="both",
        which="both",
        length=0,
        labelsize=theme.size("axis_text"),
        labelcolor=text_colour,
        labelfontfamily=theme.font_stack,
    )
    ax.tick_params(axis="x", which="major", pad=5)

    # Only the first axes of a panel draws gridlines.
    ax.grid(False, which="minor")
    for axis, visible in ((ax.yaxis, theme.show_y_grid), (ax.xaxis, theme.show_x_grid)):
        if visible and not is_twin:
            axis.grid(True, which="major", color=settings.brand.grid_colour, linewidth=0.8)
        else:
            axis.grid(False, which="major")
    ax.set_axisbelow(True)

    ax.set_facecolor("none")
    has_border = theme.panel_border != "none"
    for spine in ax.spines.values():
        spine.set_visible(has_border)
        if has_border:
            spine.set_edgecolor(theme.panel_border)
            spine.set_linewidth(0.5)

    _style_legend(ax, theme)
    if is_faceted and not is_twin:
        _style_strip(ax, theme)


def _place_title_block(
    fig: plt.Figure,
    theme: StaticTheme,
    title: Optional[str],
    subtitle: Optional[str]
) -> None:
    """Draws title and subtitle above the plot, left-aligned, and makes room for them."""
    fig_height_pt = fig.get_figheight() * 72.0
    left = plot_left_edge(fig)
    y = 1.0 - (TITLE_MARGIN_PT / fig_height_pt)

    lines = (
        (TITLE_GID, title, theme.title_size, "bold", theme.title_font),
        (SUBTITLE_GID, subtitle, theme.subtitle_size, "normal", theme.body_font),
    )
    for gid, text, size, weight, family in lines:
        for old in find_by_gid(fig, gid):
            old.remove()
        if not text:
            continue
        fig.text(
            left, y, text,
            gid=gid,
            ha="left",
            va="top",
            fontsize=size,
            fontweight=weight,
            fontfamily=[family] + theme.font_stack[1:],
            color=settings.brand.text_colour,
        )
        y -= (size * 1.2 + TITLE_MARGIN_PT) / fig_height_pt

    if (title or subtitle) and fig.get_layout_engine() is None:
        fig.subplots_adjust(top=min(fig.subplotpars.top, y - TITLE_MARGIN_PT / fig_height_pt))


def apply_static_theme(
    fig: plt.Figure,
    theme: Optional[StaticTheme] = None,
    *,
    title: Optional[str] = None,
    subtitle: Optional[str] = None
) -> plt.Figure:
    """
    Applies a StaticTheme to every panel of an existing figure and returns it.

    Panels of a multi-panel figure are treated as facets: their titles become
    filled strips. Axes sharing a position (secondary axes from twinx/twiny)
    belong to one panel. For a single panel, an existing axes title is
    promoted to the chart title when no title is given.
    """
    theme = theme or build_static_theme()
    panels = list(_panels(_content_axes(fig)).values())
    is_faceted = len(panels) > 1

    if not is_faceted and panels and title is None:
        for ax in panels[0]:
            if ax.get_title():
                title = ax.get_title()
                ax.set_title("")
                break

    for panel in panels:
        primary_ax, *twins = panel
        _style_axes(primary_ax, theme, is_faceted)
        for twin in twins:
            _style_axes(twin, theme, is_faceted, is_twin=True)
    fig.set_facecolor(COLOURS["white"])
    _place_title_block(fig, theme, title, subtitle)

    logger.debug(
        f"[StaticTheme] Styled {len(panels)} panel(s); legend={theme.legend_position}, "
        f"x_grid={theme.show_x_grid}, y_grid={theme.show_y_grid}."
    )
    return fig
