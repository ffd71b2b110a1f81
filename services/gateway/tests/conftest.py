"""
Shared test configuration and fixtures.

Every test runs against a temporary config file selected through CONFIG_PATH,
with settings cache and application state reset around it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gateway.config import clear_settings_cache
from gateway.core.state import reset_app_state

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


USER_SERVICE_URL = "http://users.test"
PRODUCT_SERVICE_URL = "http://products.test"

GATEWAY_CONFIG_YAML = f"""
service:
  name: gateway
  version: 1.0.0
  display_name: API Gateway
  health_id: gateway-service

backends:
  user_service_url: "{USER_SERVICE_URL}"
  product_service_url: "{PRODUCT_SERVICE_URL}"
  health_timeout_seconds: 5.0
  proxy_timeout_seconds: 10.0
  dashboard_timeout_seconds: 5.0

server:
  host: "0.0.0.0"
  port: 3003
  cors_origins:
    - "*"

logging:
  level: "INFO"
  format: "json"
"""


@pytest.fixture(autouse=True)
def gateway_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point CONFIG_PATH at a fresh config file and isolate cached state."""
    config_file = tmp_path / "gateway.yaml"
    config_file.write_text(GATEWAY_CONFIG_YAML)
    monkeypatch.setenv("CONFIG_PATH", str(config_file))
    for name in ("PORT", "USER_SERVICE_URL", "PRODUCT_SERVICE_URL"):
        monkeypatch.delenv(name, raising=False)

    clear_settings_cache()
    reset_app_state()
    yield config_file
    clear_settings_cache()
    reset_app_state()
