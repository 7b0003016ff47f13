"""Tests for configuration loading and logging setup."""

from __future__ import annotations

import logging

import pytest

from nice_style.config.settings import Settings, configure_logging


def test_defaults():
    config = Settings()
    assert config.brand.base_font_size == 11
    assert config.brand.interactive_font_size == 12
    assert config.brand.show_x_grid is True
    assert config.brand.font_stack[0] == config.brand.body_font
    assert config.map.style == "carto-positron"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("NICE_STYLE_BRAND__BODY_FONT", "Arial")
    monkeypatch.setenv("NICE_STYLE_BRAND__SHOW_X_GRID", "false")
    monkeypatch.setenv("NICE_STYLE_APP__LOG_LEVEL", "DEBUG")

    config = Settings()
    assert config.brand.body_font == "Arial"
    assert config.brand.show_x_grid is False
    assert config.app.log_level == "DEBUG"


def test_invalid_environment_value_is_rejected(monkeypatch):
    monkeypatch.setenv("NICE_STYLE_BRAND__BASE_FONT_SIZE", "-3")
    with pytest.raises(ValueError):
        Settings()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def test_configure_logging_sets_root_level(restore_root_logger):
    configure_logging("WARNING")
    assert restore_root_logger.level == logging.WARNING
