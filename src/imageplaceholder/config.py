"""Configuration loading with environment variable overrides."""

import os
from typing import Any

from imageplaceholder.models.config import DimensionConstraints, ProviderSettings, ServerConfig
from imageplaceholder.models.errors import PlaceholderError
from imageplaceholder.models.requests import Provider

LOG_LEVELS = ["debug", "info", "warn", "error"]
ENVIRONMENTS = ["development", "production", "test"]

# Environment variable -> DimensionConstraints field
CONSTRAINT_ENV_VARS = {
    "MCP_MIN_WIDTH": "min_width",
    "MCP_MAX_WIDTH": "max_width",
    "MCP_MIN_HEIGHT": "min_height",
    "MCP_MAX_HEIGHT": "max_height",
}

DEFAULT_PROVIDER_CONFIG: dict[Provider, ProviderSettings] = {
    Provider.PLACEHOLD: ProviderSettings(
        base_url="https://placehold.co",
        url_template="{baseUrl}/{width}x{height}",
    ),
    Provider.LOREM_PICSUM: ProviderSettings(
        base_url="https://picsum.photos",
        url_template="{baseUrl}/{width}/{height}",
    ),
}


def _read_choice(name: str, choices: list[str]) -> str | None:
    raw = os.getenv(name)
    if not raw:
        return None

    value = raw.lower()
    if value not in choices:
        raise PlaceholderError.configuration(name, raw, f"One of: {', '.join(choices)}")
    return value


def _read_positive_int(name: str) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return None

    try:
        value = int(raw.strip())
    except ValueError as e:
        raise PlaceholderError.configuration(name, raw, "Positive integer >= 1") from e

    if value < 1:
        raise PlaceholderError.configuration(name, raw, "Positive integer >= 1")
    return value


def create_config() -> ServerConfig:
    """
    Build the server config from defaults and environment overrides.

    Reads MCP_LOG_LEVEL and MCP_ENVIRONMENT.

    Raises:
        PlaceholderError: CONFIGURATION_ERROR for unrecognized values
    """
    overrides: dict[str, Any] = {}

    log_level = _read_choice("MCP_LOG_LEVEL", LOG_LEVELS)
    if log_level:
        overrides["log_level"] = log_level

    environment = _read_choice("MCP_ENVIRONMENT", ENVIRONMENTS)
    if environment:
        overrides["environment"] = environment

    return ServerConfig(**overrides)


def create_validation_constraints() -> DimensionConstraints:
    """
    Build the dimension constraints from defaults and environment overrides.

    Reads MCP_MIN_WIDTH, MCP_MAX_WIDTH, MCP_MIN_HEIGHT and MCP_MAX_HEIGHT.

    Raises:
        PlaceholderError: CONFIGURATION_ERROR for non-numeric bounds or min > max
    """
    overrides: dict[str, int] = {}
    for env_name, field in CONSTRAINT_ENV_VARS.items():
        value = _read_positive_int(env_name)
        if value is not None:
            overrides[field] = value

    constraints = DimensionConstraints(**overrides)

    if constraints.min_width > constraints.max_width:
        raise PlaceholderError.configuration(
            "width constraints",
            f"min: {constraints.min_width}, max: {constraints.max_width}",
            "minWidth must be <= maxWidth",
        )

    if constraints.min_height > constraints.max_height:
        raise PlaceholderError.configuration(
            "height constraints",
            f"min: {constraints.min_height}, max: {constraints.max_height}",
            "minHeight must be <= maxHeight",
        )

    return constraints


def create_provider_config() -> dict[Provider, ProviderSettings]:
    """Get provider settings. Base URLs are fixed and not read from the environment."""
    return dict(DEFAULT_PROVIDER_CONFIG)
