"""URL builder for the picsum.photos provider."""

import logging
from typing import Any, Optional
from urllib.parse import quote

from imageplaceholder.models.errors import PlaceholderError
from imageplaceholder.models.requests import PicsumOptions
from imageplaceholder.providers.base import BaseUrlBuilder
from imageplaceholder.utils.validation_utils import coerce_options

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ["jpg", "webp"]
MIN_BLUR = 1
MAX_BLUR = 10

# Characters left unescaped in a seed path segment
SEED_SAFE_CHARS = "-_.!~*'()"


class PicsumUrlBuilder(BaseUrlBuilder):
    """URL builder for picsum.photos."""

    def build_url(
        self,
        width: int,
        height: Optional[int] = None,
        options: PicsumOptions | dict[str, Any] | None = None,
    ) -> str:
        """
        Build a picsum.photos URL.

        URL patterns:
            Random:   {base}/{width}[/{height}][.{format}][?{effects}]
            Specific: {base}/id/{id}/{width}[/{height}][.{format}][?{effects}]
            Seeded:   {base}/seed/{seed}/{width}[/{height}][.{format}][?{effects}]

        Effects are emitted in order: grayscale, blur, random.
        """
        self.validate_dimensions(width, height)
        opts = coerce_options(PicsumOptions, options)
        if opts is not None:
            self.validate_options(opts)

        width = int(width)
        height = int(height) if height is not None else None

        url = self.base_url
        if opts is not None:
            if opts.image_id is not None:
                url += f"/id/{opts.image_id}"
            elif opts.seed:
                url += f"/seed/{quote(opts.seed, safe=SEED_SAFE_CHARS)}"

        url += f"/{width}"
        if height is not None and height != width:
            url += f"/{height}"

        query_params: list[str] = []
        if opts is not None:
            if opts.format:
                url += f".{opts.format}"

            if opts.grayscale:
                query_params.append("grayscale")

            if opts.blur is not None:
                query_params.append(_blur_param(opts.blur))

            if opts.random is not None:
                query_params.append(f"random={opts.random}")

        if query_params:
            url += "?" + "&".join(query_params)

        logger.debug(f"Built picsum.photos URL for {width}x{height or width}: {url}")
        return url

    def validate_options(self, options: PicsumOptions | dict[str, Any] | None = None) -> bool:
        """
        Validate picsum.photos options.

        Raises:
            PlaceholderError: On an unknown format, a negative image ID or random
                token, an empty seed, a blur outside 1-10, or both image_id and seed
        """
        opts = coerce_options(PicsumOptions, options)
        if opts is None:
            return True

        if opts.format and opts.format not in SUPPORTED_FORMATS:
            raise PlaceholderError.validation(
                "format", opts.format, f"Format must be one of: {', '.join(SUPPORTED_FORMATS)}"
            )

        if opts.image_id is not None and opts.image_id < 0:
            raise PlaceholderError.validation("imageId", opts.image_id, "Image ID must be a non-negative integer")

        if opts.seed is not None and not opts.seed.strip():
            raise PlaceholderError.validation("seed", opts.seed, "Seed must be a non-empty string")

        if opts.blur is not None and not MIN_BLUR <= opts.blur <= MAX_BLUR:
            raise PlaceholderError.validation(
                "blur", opts.blur, f"Blur must be an integer between {MIN_BLUR} and {MAX_BLUR}"
            )

        if opts.random is not None and opts.random < 0:
            raise PlaceholderError.validation("random", opts.random, "Random must be a non-negative integer")

        if opts.image_id is not None and opts.seed is not None:
            raise PlaceholderError.validation(
                "options",
                "imageId and seed both specified",
                "Cannot specify both imageId and seed - they are mutually exclusive",
            )

        return True


def _blur_param(blur: int) -> str:
    # Validation keeps blur within 1-10, so only 1 takes the bare form in practice
    if blur in (0, 1):
        return "blur"
    return f"blur={blur}"
