"""Configuration system using pydantic-settings with environment variable loading."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DecimalSettings(BaseSettings):
    """Decimal engine and fixed-point convention.

    Defaults mirror on-chain fixed-point arithmetic: 64 significant digits,
    truncating division, and 18-decimal (1e18) scaling of rates and prices.
    All fields configurable via DECIMAL_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="DECIMAL_")

    precision: int = Field(default=64, ge=64)  # significant digits
    scale_decimals: int = Field(default=18, ge=0)  # 1e18 fixed-point


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",  # callers' .env files carry unrelated keys
    )

    log_level: str = "WARNING"  # stdout is reserved for the result word
    decimal: DecimalSettings = DecimalSettings()
