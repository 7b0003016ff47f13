# nice_style/visualization/themes.py
#
# The NICE Plotly template. Registered under "nice" so it can also be selected
# by name (fig.update_layout(template="nice")).

import logging

import plotly.graph_objects as go
import plotly.io as pio

# --- Core Package Imports ---
try:
    from ..config.settings import settings
    from .palette import COLOURS, PRIMARY_PALETTE
except ImportError as e:
    logging.basicConfig(level="CRITICAL")
    logging.critical(f"FATAL ERROR in themes.py: A core dependency is missing. {e}", exc_info=True)
    raise

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "nice"

# --- NICE Plotly Theme Template Definition ---
nice_theme_template = go.layout.Template(
    layout=go.Layout(
        # --- Fonts ---
        font=dict(
            family=settings.brand.body_font,
            size=settings.brand.interactive_font_size,
            color=settings.brand.text_colour
        ),
        # --- Title ---
        title=dict(
            font=dict(
                family=settings.brand.title_font,
                size=round(settings.brand.interactive_font_size * 1.5)
            ),
            x=0,  # Align title to the left
            xanchor='left',
            xref='paper'
        ),
        # --- Background Colors ---
        paper_bgcolor=COLOURS["white"],
        plot_bgcolor=COLOURS["white"],

        # --- Colorways ---
        colorway=list(PRIMARY_PALETTE),

        # --- Axes Configuration ---
        xaxis=dict(
            showgrid=False,
            gridcolor=settings.brand.grid_colour,
            showline=True,
            linecolor=settings.brand.text_colour,
            zeroline=False,
            ticks='',
            title_standoff=10
        ),
        yaxis=dict(
            showgrid=True,
            gridcolor=settings.brand.grid_colour,
            showline=False,
            zeroline=False,
            ticks='',
            title_standoff=10
        ),
        # --- Legend ---
        legend=dict(
            orientation='h',
            yanchor='bottom',
            y=1.02,
            xanchor='left',
            x=0,
            bgcolor='rgba(0,0,0,0)',
            borderwidth=0,
            title_text=''
        ),
        # --- Margins ---
        margin=dict(l=70, r=30, t=80, b=70),

        # --- Hover Labels ---
        hoverlabel=dict(
            bgcolor=COLOURS["white"],
            font_size=settings.brand.interactive_font_size,
            font_family=settings.brand.body_font
        ),

        # --- Tile maps ---
        map=dict(style=settings.map.style)
    )
)

pio.templates[TEMPLATE_NAME] = nice_theme_template
logger.debug(f"NICE Plotly theme template registered as '{TEMPLATE_NAME}'.")
