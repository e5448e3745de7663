"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the route planner's
settings (where the routes CSV lives, how bulk-loaded lines are labelled,
how logging is formatted).

Configuration can be overridden via environment variables:
- BRP_GRAPH_DATA_DIR=/path/to/data
- BRP_GRAPH_ROUTES_FILE=realistic_bus_routes_bidirectional.csv
- BRP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Route data configuration.

    Environment variables prefixed with BRP_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="BRP_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    routes_file: str = "bus_routes.csv"
    line_prefix: str = "Line"
    bidirectional: bool = True

    @property
    def routes_path(self) -> Path:
        """Full path to the routes CSV file."""
        return self.data_dir / self.routes_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with BRP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="BRP_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.routes_path)

    Environment variables prefixed with BRP_.
    """

    model_config = SettingsConfigDict(env_prefix="BRP_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
