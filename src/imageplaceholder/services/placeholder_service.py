"""Placeholder service that orchestrates validation and URL building."""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from imageplaceholder.models.config import ProviderSettings
from imageplaceholder.models.errors import PlaceholderError
from imageplaceholder.models.requests import PicsumOptions, PlaceholderRequest, PlaceholdOptions, Provider
from imageplaceholder.models.responses import AppliedOptions, Dimensions, PlaceholderResult
from imageplaceholder.providers.factory import UrlBuilderFactory
from imageplaceholder.services.validation_service import PlaceholderValidator, request_to_mapping
from imageplaceholder.utils.validation_utils import coerce_options

logger = logging.getLogger(__name__)


class PlaceholderGenerator:
    """Generates placeholder image URLs for the supported providers."""

    def __init__(
        self,
        validator: PlaceholderValidator | None = None,
        provider_config: dict[str, ProviderSettings] | None = None,
    ):
        """
        Initialize the generator.

        Args:
            validator: Request validator (uses default constraints if not provided)
            provider_config: Provider settings keyed by provider name
        """
        self.validator = validator or PlaceholderValidator()
        self.provider_config = provider_config or {}

    def generate_placeholder(self, params: Mapping[str, Any] | PlaceholderRequest) -> PlaceholderResult:
        """
        Generate a placeholder image URL.

        Args:
            params: Request mapping (provider, width, height, placeholdOptions,
                picsumOptions) or a PlaceholderRequest

        Returns:
            PlaceholderResult with the URL, resolved dimensions and applied options

        Raises:
            PlaceholderError: When validation or URL building fails. Errors are
                re-raised unchanged.
        """
        logger.debug(f"[PlaceholderGenerator] Generating placeholder for {params!r}")

        self.validator.validate(params)
        data = request_to_mapping(params)

        provider = data["provider"]
        width = int(data["width"])
        height = int(data["height"]) if data.get("height") is not None else None

        try:
            builder = UrlBuilderFactory.create_builder(provider)

            if provider == Provider.PLACEHOLD:
                options = coerce_options(PlaceholdOptions, data.get("placeholdOptions"))
                url = builder.build_url(width, height, options)
                applied = AppliedOptions(placehold_options=options)
            elif provider == Provider.LOREM_PICSUM:
                options = coerce_options(PicsumOptions, data.get("picsumOptions"))
                url = builder.build_url(width, height, options)
                applied = AppliedOptions(picsum_options=options)
            else:
                # The validator only lets table providers through
                raise PlaceholderError.provider(provider, "Unsupported provider")

            effective_height = height if height is not None else width
            result = PlaceholderResult(
                url=url,
                provider=Provider(provider),
                dimensions=Dimensions(width=width, height=effective_height),
                applied_options=applied,
            )

            logger.info(
                f"✅ [PlaceholderGenerator] Generated {result.provider.value} placeholder "
                f"{width}x{effective_height}: {url} (options={options is not None})"
            )
            return result

        except PlaceholderError as e:
            logger.error(f"❌ [PlaceholderGenerator] Failed to generate placeholder: {e.message}")
            raise

    def get_supported_providers(self) -> list[str]:
        """Get the names of all supported providers."""
        return UrlBuilderFactory.get_supported_providers()

    def get_provider_config(self, provider: str) -> Optional[ProviderSettings]:
        """Get the settings for a provider, or None if it has none."""
        return self.provider_config.get(provider)

    def get_provider_base_url(self, provider: str) -> Optional[str]:
        """Get the base URL for a provider from the builder factory."""
        return UrlBuilderFactory.get_provider_base_url(provider)
