# nice_style/visualization/finishing.py
#
# Final touches for a themed static chart: a footer with the data source and
# the NICE logo, and left alignment of the title, subtitle and footer.

import logging
from typing import Literal, Optional

import matplotlib.image as mpimg
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.offsetbox import AnnotationBbox, OffsetImage

from ..config.settings import settings
from ..exceptions import InvalidConfiguration
from .palette import COLOURS, PRIMARY_PALETTE
from .static import (
    SUBTITLE_GID,
    TITLE_GID,
    StaticTheme,
    build_static_theme,
    find_by_gid,
    plot_left_edge,
    plot_right_edge
)

logger = logging.getLogger(__name__)

LogoOption = Literal["NICE", "none"]
LOGO_OPTIONS = ("NICE", "none")

FOOTER_GID = "footer"
FOOTER_RULE_GID = "footer-rule"
LOGO_GID = "logo"

# Logo height as a multiple of the footer text size.
_LOGO_HEIGHT_FACTOR = 2.0


def _add_logo(fig: plt.Figure, x: float, y: float, text_size: float) -> None:
    logo_path = settings.brand.logo_path
    if logo_path is not None and logo_path.is_file():
        image = mpimg.imread(str(logo_path))
        target_px = text_size * _LOGO_HEIGHT_FACTOR * fig.dpi / 72.0
        logo = AnnotationBbox(
            OffsetImage(image, zoom=target_px / image.shape[0]),
            (x, y),
            xycoords="figure fraction",
            box_alignment=(1.0, 0.5),
            frameon=False,
        )
        logo.set_gid(LOGO_GID)
        fig.add_artist(logo)
        return

    if logo_path is not None:
        logger.warning(f"[Finishing] Logo file not found at {logo_path}; drawing the wordmark instead.")
    fig.text(
        x, y, settings.brand.logo_text,
        gid=LOGO_GID,
        ha="right",
        va="center",
        fontsize=text_size * 1.3,
        fontweight="bold",
        color=COLOURS["white"],
        bbox=dict(facecolor=PRIMARY_PALETTE[0], edgecolor="none", boxstyle="square,pad=0.3"),
    )


def _left_align(fig: plt.Figure, x: float) -> None:
    for gid in (TITLE_GID, SUBTITLE_GID, FOOTER_GID):
        for text in find_by_gid(fig, gid):
            text.set_x(x)
            text.set_horizontalalignment("left")


def finalise_plot(
    fig: plt.Figure,
    source: str,
    logo: LogoOption = "NICE",
    theme: Optional[StaticTheme] = None
) -> plt.Figure:
    """
    Adds the source footer (and logo) to a themed chart and left-aligns the text blocks.

    Args:
        fig: A figure already passed through apply_static_theme().
        source: Attribution text, e.g. "Source: NHS Digital".
        logo: "NICE" to add the logo at the right of the footer, "none" to omit it.
        theme: The theme used for the chart; only its font sizes and fonts are read.

    Raises:
        InvalidConfiguration: If logo is not one of LOGO_OPTIONS.
    """
    if logo not in LOGO_OPTIONS:
        logger.warning(f"[Finishing] Unrecognised logo option '{logo}'.")
        raise InvalidConfiguration(f"Unknown logo option '{logo}'. Expected one of: {', '.join(LOGO_OPTIONS)}")

    theme = theme or build_static_theme()
    text_size = theme.size("axis_text")
    fig_height_pt = fig.get_figheight() * 72.0
    footer_height = (text_size * _LOGO_HEIGHT_FACTOR + 12.0) / fig_height_pt

    # Make room below the plot before measuring edges.
    if fig.get_layout_engine() is None:
        fig.subplots_adjust(bottom=max(fig.subplotpars.bottom, footer_height * 2.0))

    left = plot_left_edge(fig)
    right = plot_right_edge(fig)
    footer_y = footer_height / 2.0

    for gid in (FOOTER_GID, FOOTER_RULE_GID, LOGO_GID):
        for old in find_by_gid(fig, gid):
            old.remove()

    rule = Line2D(
        [left, right], [footer_height, footer_height],
        transform=fig.transFigure,
        color=settings.brand.grid_colour,
        linewidth=0.8,
    )
    rule.set_gid(FOOTER_RULE_GID)
    fig.add_artist(rule)

    fig.text(
        left, footer_y, source,
        gid=FOOTER_GID,
        ha="left",
        va="center",
        fontsize=text_size,
        fontfamily=theme.font_stack,
        color=settings.brand.text_colour,
    )
    if logo == "NICE":
        _add_logo(fig, right, footer_y, text_size)

    _left_align(fig, left)
    logger.debug(f"[Finishing] Footer added (logo={logo}) and text aligned to x={left:.3f}.")
    return fig
