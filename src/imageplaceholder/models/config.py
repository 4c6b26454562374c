"""Configuration models for ImagePlaceholder."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from imageplaceholder.models.requests import Provider

LogLevel = Literal["debug", "info", "warn", "error"]
Environment = Literal["development", "production", "test"]


class ServerConfig(BaseModel):
    """Settings for the MCP server process."""

    name: str = Field("image-placeholder", description="Server name advertised to MCP clients")
    version: str = Field("1.1.0", description="Server version advertised to MCP clients")
    log_level: LogLevel = Field("info", description="Minimum log level")
    environment: Environment = Field("development", description="Deployment environment (selects the log format)")


class DimensionConstraints(BaseModel):
    """Bounds and provider allow-list used by the request validator."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    min_width: int = Field(1, description="Smallest accepted width in pixels")
    max_width: int = Field(10000, description="Largest accepted width in pixels")
    min_height: int = Field(1, description="Smallest accepted height in pixels")
    max_height: int = Field(10000, description="Largest accepted height in pixels")
    supported_providers: list[str] = Field(
        default_factory=lambda: [p.value for p in Provider],
        description="Provider names accepted by the validator",
    )


class ProviderSettings(BaseModel):
    """Base URL and legacy URL template for one provider."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(..., description="Provider origin")
    url_template: str = Field(..., description="Template with {baseUrl}, {width} and {height} tokens")
