"""Factory mapping provider names to their URL builders."""

from typing import Optional

from imageplaceholder.models.errors import PlaceholderError
from imageplaceholder.models.requests import Provider
from imageplaceholder.providers.base import BaseUrlBuilder
from imageplaceholder.providers.picsum_provider import PicsumUrlBuilder
from imageplaceholder.providers.placehold_provider import PlaceholdUrlBuilder


class UrlBuilderFactory:
    """Creates provider-specific URL builders from a fixed provider table."""

    PROVIDER_BASE_URLS: dict[Provider, str] = {
        Provider.PLACEHOLD: "https://placehold.co",
        Provider.LOREM_PICSUM: "https://picsum.photos",
    }

    _BUILDERS: dict[Provider, type[BaseUrlBuilder]] = {
        Provider.PLACEHOLD: PlaceholdUrlBuilder,
        Provider.LOREM_PICSUM: PicsumUrlBuilder,
    }

    @classmethod
    def create_builder(cls, provider: str) -> BaseUrlBuilder:
        """
        Create the URL builder for a provider.

        Raises:
            PlaceholderError: PROVIDER_ERROR when the provider is not in the table
        """
        key = cls._lookup(provider)
        if key is None:
            raise PlaceholderError.provider(
                provider,
                f"Unsupported provider: {provider}",
                supported_providers=cls.get_supported_providers(),
            )

        builder_cls = cls._BUILDERS.get(key)
        if builder_cls is None:
            raise PlaceholderError.provider(
                provider,
                f"No URL builder implemented for provider: {provider}",
                supported_providers=cls.get_supported_providers(),
            )

        return builder_cls(cls.PROVIDER_BASE_URLS[key])

    @classmethod
    def get_supported_providers(cls) -> list[str]:
        """Get the names of all providers in the table."""
        return [provider.value for provider in cls.PROVIDER_BASE_URLS]

    @classmethod
    def get_provider_base_url(cls, provider: str) -> Optional[str]:
        """Get the base URL for a provider, or None if it is unknown."""
        key = cls._lookup(provider)
        return cls.PROVIDER_BASE_URLS.get(key) if key is not None else None

    @classmethod
    def _lookup(cls, provider: str) -> Optional[Provider]:
        try:
            key = Provider(provider)
        except ValueError:
            return None
        return key if key in cls.PROVIDER_BASE_URLS else None
