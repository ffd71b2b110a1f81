"""
Shared configuration infrastructure for services.

Each service describes its settings as a pydantic model, keeps the values in a
YAML file and lets a small set of environment variables override individual
keys (deployment-time knobs such as ``PORT``).

Resolution order for a service's settings:

1. The YAML file named by ``CONFIG_PATH`` (default ``./config.yaml``)
2. Environment overrides, each mapped onto one key path of that file
3. Validation against the service's settings model (unknown keys rejected)
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

EnvOverrides = Mapping[str, tuple[str, ...]]


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""


# Matched case-insensitively anywhere in a key
SENSITIVE_KEYWORDS: frozenset[str] = frozenset(
    {"secret", "password", "passwd", "token", "credential", "api_key", "apikey", "private"}
)

_SENSITIVE_PATTERN = re.compile(
    "|".join(sorted(re.escape(keyword) for keyword in SENSITIVE_KEYWORDS)),
    re.IGNORECASE,
)

REDACTION_MARKER: str = "[REDACTED]"


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """
    Read a YAML configuration file into a mapping.

    Raises:
        ConfigurationError: If the file is missing, unparsable, empty, or not
            a mapping at the top level
    """
    try:
        text = config_path.read_text()
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Configuration file not found: {config_path.absolute()} "
            f"(set CONFIG_PATH to point elsewhere)"
        ) from e

    try:
        config = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if config is None:
        raise ConfigurationError(f"Configuration file is empty: {config_path}")
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Configuration must be a YAML mapping, got {type(config).__name__}"
        )
    return config


def get_config_path(env_var_name: str, default_filename: str) -> Path:
    """Path named by ``env_var_name``, or ``default_filename`` when unset."""
    return Path(os.environ.get(env_var_name, default_filename))


def apply_env_overrides(
    yaml_config: dict[str, Any],
    env_overrides: EnvOverrides,
) -> dict[str, Any]:
    """
    Overlay environment variables onto parsed YAML configuration.

    Unset and empty variables are skipped. Values are written as strings;
    the settings model coerces them (e.g. ``PORT`` to ``int``).

    Args:
        yaml_config: Parsed YAML configuration (modified in place)
        env_overrides: Environment variable name -> key path into the config,
            e.g. ``{"PORT": ("server", "port")}``

    Raises:
        ConfigurationError: If a key path crosses a non-mapping value
    """
    for env_var_name, key_path in env_overrides.items():
        value = os.environ.get(env_var_name)
        if not value:
            continue

        *parents, leaf = key_path
        section: Any = yaml_config
        for key in parents:
            section = section.setdefault(key, {})
            if not isinstance(section, dict):
                raise ConfigurationError(
                    f"Cannot apply {env_var_name}: "
                    f"'{'.'.join(key_path)}' does not point into a mapping"
                )
        section[leaf] = value

    return yaml_config


def load_settings(settings_model: type[ModelT], yaml_config: dict[str, Any]) -> ModelT:
    """
    Validate raw configuration against a settings model.

    Raises:
        ConfigurationError: If validation fails
    """
    try:
        return settings_model.model_validate(yaml_config)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


def create_settings_loader(
    settings_model: type[ModelT],
    get_config_path_fn: Callable[[], Path],
    env_overrides: EnvOverrides,
) -> tuple[Callable[[], ModelT], Callable[[], None]]:
    """
    Create a cached settings getter and its cache resetter for a service.

    The file is read once per process; tests reset the cache after pointing
    CONFIG_PATH at a different file.

    Returns:
        Tuple of (get_settings, clear_settings_cache)
    """

    @lru_cache(maxsize=1)
    def get_settings() -> ModelT:
        yaml_config = load_yaml_config(get_config_path_fn())
        return load_settings(settings_model, apply_env_overrides(yaml_config, env_overrides))

    return get_settings, get_settings.cache_clear


def is_sensitive_key(key: str) -> bool:
    """Check if a configuration key contains sensitive keywords."""
    return _SENSITIVE_PATTERN.search(key) is not None


def redact_sensitive_values(data: Any, redaction_marker: str) -> Any:
    """
    Copy ``data`` with every value under a sensitive key replaced.

    Walks nested mappings and lists to any depth; other values are returned
    unchanged.
    """
    if isinstance(data, dict):
        return {
            key: (
                redaction_marker
                if is_sensitive_key(str(key))
                else redact_sensitive_values(value, redaction_marker)
            )
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [redact_sensitive_values(item, redaction_marker) for item in data]
    return data


def get_safe_model_config(settings: BaseModel, redaction_marker: str) -> dict[str, Any]:
    """Dump settings with sensitive values redacted."""
    safe: dict[str, Any] = redact_sensitive_values(settings.model_dump(), redaction_marker)
    return safe
