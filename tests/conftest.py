"""Shared test fixtures for the price calculator."""

import pytest

from pricecalc.config import AppSettings, DecimalSettings


@pytest.fixture
def decimal_settings() -> DecimalSettings:
    """Return DecimalSettings with the on-chain defaults (64 digits, 1e18 scale)."""
    return DecimalSettings(precision=64, scale_decimals=18)


@pytest.fixture
def app_settings(decimal_settings: DecimalSettings) -> AppSettings:
    """Return AppSettings with test defaults."""
    return AppSettings(log_level="DEBUG", decimal=decimal_settings)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables out of settings and log rendering."""
    for var in ("DECIMAL_PRECISION", "DECIMAL_SCALE_DECIMALS", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
