"""Models package for ImagePlaceholder."""

from imageplaceholder.models.config import DimensionConstraints, ProviderSettings, ServerConfig
from imageplaceholder.models.errors import ErrorCode, PlaceholderError, is_client_error
from imageplaceholder.models.requests import (
    PicsumOptions,
    PlaceholderRequest,
    PlaceholdOptions,
    Provider,
)
from imageplaceholder.models.responses import AppliedOptions, Dimensions, PlaceholderResult

__all__ = [
    "AppliedOptions",
    "Dimensions",
    "DimensionConstraints",
    "ErrorCode",
    "is_client_error",
    "PicsumOptions",
    "PlaceholderError",
    "PlaceholderRequest",
    "PlaceholderResult",
    "PlaceholdOptions",
    "Provider",
    "ProviderSettings",
    "ServerConfig",
]
