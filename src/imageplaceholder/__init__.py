"""ImagePlaceholder - placeholder image URLs for MCP clients."""

from imageplaceholder.config import (
    DEFAULT_PROVIDER_CONFIG,
    create_config,
    create_provider_config,
    create_validation_constraints,
)
from imageplaceholder.legacy import image_placeholder
from imageplaceholder.models.config import DimensionConstraints, ProviderSettings, ServerConfig
from imageplaceholder.models.errors import ErrorCode, PlaceholderError, is_client_error
from imageplaceholder.models.requests import (
    PicsumOptions,
    PlaceholderRequest,
    PlaceholdOptions,
    Provider,
)
from imageplaceholder.models.responses import AppliedOptions, Dimensions, PlaceholderResult
from imageplaceholder.providers.base import BaseUrlBuilder, UrlBuilder
from imageplaceholder.providers.factory import UrlBuilderFactory
from imageplaceholder.providers.picsum_provider import PicsumUrlBuilder
from imageplaceholder.providers.placehold_provider import PlaceholdUrlBuilder
from imageplaceholder.services.placeholder_service import PlaceholderGenerator
from imageplaceholder.services.validation_service import PlaceholderValidator
from imageplaceholder.utils.logging_utils import configure_logging

__version__ = "1.1.0"

__all__ = [
    # Request/Response types
    "AppliedOptions",
    "Dimensions",
    "PicsumOptions",
    "PlaceholderRequest",
    "PlaceholderResult",
    "PlaceholdOptions",
    "Provider",
    # Errors
    "ErrorCode",
    "PlaceholderError",
    "is_client_error",
    # Configuration
    "DEFAULT_PROVIDER_CONFIG",
    "DimensionConstraints",
    "ProviderSettings",
    "ServerConfig",
    "create_config",
    "create_provider_config",
    "create_validation_constraints",
    # URL builders
    "BaseUrlBuilder",
    "PicsumUrlBuilder",
    "PlaceholdUrlBuilder",
    "UrlBuilder",
    "UrlBuilderFactory",
    # Services
    "PlaceholderGenerator",
    "PlaceholderValidator",
    # Utilities
    "configure_logging",
    "image_placeholder",
]
