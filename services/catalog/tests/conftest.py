"""
Shared test configuration and fixtures.

Every test runs against a temporary config file selected through CONFIG_PATH,
with settings cache and application state reset around it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from catalog_service.config import clear_settings_cache
from catalog_service.core.state import reset_app_state

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


CATALOG_CONFIG_YAML = """
service:
  name: catalog
  version: 1.0.0
  display_name: Product Service
  health_id: product-service

server:
  host: "0.0.0.0"
  port: 3001
  cors_origins:
    - "*"

logging:
  level: "INFO"
  format: "json"
"""


@pytest.fixture(autouse=True)
def catalog_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point CONFIG_PATH at a fresh config file and isolate cached state."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(CATALOG_CONFIG_YAML)
    monkeypatch.setenv("CONFIG_PATH", str(config_file))
    monkeypatch.delenv("PORT", raising=False)

    clear_settings_cache()
    reset_app_state()
    yield config_file
    clear_settings_cache()
    reset_app_state()
