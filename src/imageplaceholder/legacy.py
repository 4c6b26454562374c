"""Legacy synchronous entry point kept for backward compatibility."""

from imageplaceholder.config import create_provider_config, create_validation_constraints
from imageplaceholder.models.errors import PlaceholderError
from imageplaceholder.services.validation_service import PlaceholderValidator


def image_placeholder(provider: str, width: int, height: int | None = None) -> str:
    """
    Build a placeholder URL from the provider's URL template.

    Deprecated: use PlaceholderGenerator, which supports provider options.

    Args:
        provider: "placehold" or "lorem-picsum"
        width: Image width in pixels
        height: Image height in pixels (defaults to width)

    Returns:
        URL string, e.g. "https://placehold.co/300x200"

    Raises:
        PlaceholderError: When parameters are invalid or the template cannot be filled
    """
    validator = PlaceholderValidator(create_validation_constraints())
    validator.validate({"provider": provider, "width": width, "height": height})

    settings = create_provider_config().get(provider)
    if settings is None:
        raise PlaceholderError.internal(f"Invalid provider: {provider}", provider=provider)

    if height is None:
        height = width

    try:
        return settings.url_template.format_map({
            "baseUrl": settings.base_url,
            "width": int(width),
            "height": int(height),
        })
    except (KeyError, IndexError, ValueError) as e:
        raise PlaceholderError.internal(
            f"Failed to fill URL template for {provider}: {e}",
            original_exception=e,
            template=settings.url_template,
        ) from e
