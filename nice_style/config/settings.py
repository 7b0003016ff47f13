# nice_style/config/settings.py
#
# Centralized configuration for the NICE chart styling layer.
# Settings are declared with Pydantic for validation and loaded from
# NICE_STYLE_* environment variables or a .env file in the working directory.

import logging
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, PositiveInt, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Define Package Root ---
PACKAGE_ROOT = Path(__file__).resolve().parent.parent

# --- Logger for Settings Module ---
settings_logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# 1. NESTED CONFIGURATION MODELS
# -----------------------------------------------------------------------------

class AppConfig(BaseModel):
    """Package metadata and logging settings."""
    name: str = "nice-style"
    version: str = "1.0.0"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: str = "%(asctime)s - %(name)s.%(funcName)s - %(levelname)s - %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"


class BrandConfig(BaseModel):
    """Fonts, sizes and fixed colours shared by the static and interactive themes."""
    title_font: str = "Helvetica"
    body_font: str = "Helvetica"
    base_font_size: PositiveInt = 11
    interactive_font_size: PositiveInt = 12
    axis_pad_px: int = Field(default=10, ge=0)

    text_colour: str = "#000000"
    grid_colour: str = "#BFBFBF"

    # Vertical (x-axis) major gridlines on static charts. Bar and line charts
    # usually read better with this off; callers can also set it per theme.
    show_x_grid: bool = True

    logo_path: Optional[Path] = None
    logo_text: str = "NICE"

    @computed_field
    @property
    def font_stack(self) -> List[str]:
        """Body font followed by fallbacks matplotlib can always resolve."""
        return [self.body_font, "Arial", "DejaVu Sans", "sans-serif"]


class MapConfig(BaseModel):
    """Defaults for tile-based choropleth maps."""
    default_zoom: float = 5.0
    center_lat: float = 52.8  # England
    center_lon: float = -1.5
    style: str = "carto-positron"
    opacity: float = Field(default=0.75, ge=0.0, le=1.0)


# -----------------------------------------------------------------------------
# 2. MAIN SETTINGS CLASS
# -----------------------------------------------------------------------------

class Settings(BaseSettings):
    """
    Main settings class for nice_style.
    Aggregates the configuration models and loads overrides from the environment,
    e.g. NICE_STYLE_BRAND__BODY_FONT=Arial.
    """
    model_config = SettingsConfigDict(
        env_prefix='NICE_STYLE_',
        case_sensitive=False,
        env_nested_delimiter='__',
        env_file=".env",
        extra='ignore'
    )

    app: AppConfig = Field(default_factory=AppConfig)
    brand: BrandConfig = Field(default_factory=BrandConfig)
    map: MapConfig = Field(default_factory=MapConfig)


def configure_logging(level: Optional[str] = None) -> None:
    """Sets up root logging from the settings. Intended for scripts and notebooks."""
    logging.basicConfig(
        level=level or settings.app.log_level,
        format=settings.app.log_format,
        datefmt=settings.app.log_date_format,
        force=True
    )


# -----------------------------------------------------------------------------
# 3. SINGLETON INSTANCE
# -----------------------------------------------------------------------------

try:
    settings = Settings()
    settings_logger.debug(
        f"Settings loaded for '{settings.app.name}' v{settings.app.version}. "
        f"LOG_LEVEL={settings.app.log_level}. PACKAGE_ROOT='{PACKAGE_ROOT}'"
    )
    if settings.brand.logo_path is not None and not settings.brand.logo_path.is_file():
        settings_logger.warning(
            f"Logo file not found at {settings.brand.logo_path}. "
            "Finished charts will use the text wordmark instead."
        )
except Exception as e:
    settings_logger.critical(f"FATAL: Could not initialize nice_style settings. Error: {e}", exc_info=True)
    raise
