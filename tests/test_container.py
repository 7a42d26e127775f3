"""Tests for container wiring."""

import logging

import pytest

from ibd_nutrition.adapters.catalog_loader import CatalogError
from ibd_nutrition.app_logging import ENGINE_LOGGER
from ibd_nutrition.config import Settings
from ibd_nutrition.containers import build_container, create_engine


def test_build_container_loads_bundled_catalog(settings) -> None:
    container = build_container(settings)

    assert len(container.catalog) == 60
    assert container.analysis_service.matcher is container.matcher
    assert container.scaler.multiplier == settings.portion_multiplier


def test_build_container_applies_settings(catalog) -> None:
    settings = Settings(
        portion_multiplier=2.0, flare_window_entries=3, analysis_window_days=14
    )

    container = build_container(settings, catalog=catalog)

    assert container.scaler.scale("Rice").calories == 410.0
    assert container.flare_scorer.window_entries == 3
    assert container.analysis_service.default_days == 14


def test_build_container_rejects_missing_catalog(tmp_path) -> None:
    settings = Settings(catalog_path=str(tmp_path / "missing.json"))

    with pytest.raises(CatalogError):
        build_container(settings)


def test_create_engine_configures_logging(settings) -> None:
    logger = logging.getLogger(ENGINE_LOGGER)
    logger.handlers.clear()

    container = create_engine(settings.model_copy(update={"debug": True}))

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert container.matcher.debug is True
    logger.handlers.clear()
    logger.propagate = True
