"""Configuration for nice_style, loaded once at import."""

from .settings import Settings, configure_logging, settings

__all__ = ["Settings", "configure_logging", "settings"]
