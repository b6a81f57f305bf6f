"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
layout location, routing defaults, HTTP settings and logging.

Configuration can be overridden via environment variables:
- TNAV_LAYOUT_DATA_DIR=/path/to/data
- TNAV_LAYOUT_LAYOUT_FILE=airport.json
- TNAV_ROUTING_DEFAULT_PROFILE=wheelchair
- TNAV_API_PORT=9000
- TNAV_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LayoutConfig(BaseSettings):
    """Layout data configuration.

    Environment variables prefixed with TNAV_LAYOUT_.
    """

    model_config = SettingsConfigDict(env_prefix="TNAV_LAYOUT_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    layout_file: str = "terminal-map.json"

    @property
    def layout_path(self) -> Path:
        """Full path to the layout JSON file."""
        return self.data_dir / self.layout_file


class RoutingConfig(BaseSettings):
    """Routing defaults.

    Environment variables prefixed with TNAV_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="TNAV_ROUTING_")

    default_profile: str = "standard"


class ApiConfig(BaseSettings):
    """HTTP front end configuration.

    Environment variables prefixed with TNAV_API_.
    """

    model_config = SettingsConfigDict(env_prefix="TNAV_API_")

    host: str = "127.0.0.1"
    port: int = 8080
    cost_decimals: int = Field(default=1, ge=0)


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with TNAV_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TNAV_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.layout.layout_path)
        print(config.routing.default_profile)

    Environment variables prefixed with TNAV_.
    """

    model_config = SettingsConfigDict(env_prefix="TNAV_")

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
