"""
Configuration management for the gateway service.

Loads configuration from YAML. Every value must be present in the file;
PORT, USER_SERVICE_URL and PRODUCT_SERVICE_URL may override single keys.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field
from service_commons.config import (
    REDACTION_MARKER,
    ConfigurationError,
    create_settings_loader,
    get_safe_model_config,
)
from service_commons.config import get_config_path as resolve_config_path

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "ENV_OVERRIDES",
    "REDACTION_MARKER",
    "BackendsConfig",
    "ConfigurationError",
    "LoggingConfig",
    "ServerConfig",
    "ServiceConfig",
    "Settings",
    "clear_settings_cache",
    "get_config_path",
    "get_safe_config",
    "get_settings",
]


class ServiceConfig(BaseModel):
    """Service identity configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str
    version: str
    display_name: str
    health_id: str


class BackendsConfig(BaseModel):
    """Downstream service URLs and per-call timeouts."""

    model_config = ConfigDict(extra="forbid")

    user_service_url: str
    product_service_url: str
    health_timeout_seconds: float = Field(gt=0)
    proxy_timeout_seconds: float = Field(gt=0)
    dashboard_timeout_seconds: float = Field(gt=0)


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    model_config = ConfigDict(extra="forbid")

    host: str
    port: int
    cors_origins: list[str]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str
    format: str


class Settings(BaseModel):
    """
    Root configuration container.

    Every section and key is required; unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    service: ServiceConfig
    backends: BackendsConfig
    server: ServerConfig
    logging: LoggingConfig


ENV_OVERRIDES: dict[str, tuple[str, ...]] = {
    "PORT": ("server", "port"),
    "USER_SERVICE_URL": ("backends", "user_service_url"),
    "PRODUCT_SERVICE_URL": ("backends", "product_service_url"),
}


def get_config_path() -> Path:
    """Config file named by CONFIG_PATH, else ./config.yaml."""
    return resolve_config_path("CONFIG_PATH", "config.yaml")


get_settings, clear_settings_cache = create_settings_loader(  # nosemgrep
    Settings,
    get_config_path,
    ENV_OVERRIDES,
)


def get_safe_config() -> dict[str, Any]:
    """Current settings with sensitive values redacted, for /info."""
    return get_safe_model_config(get_settings(), REDACTION_MARKER)
