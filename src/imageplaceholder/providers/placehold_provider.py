"""URL builder for the placehold.co provider."""

import logging
from typing import Any, Optional

from imageplaceholder.models.errors import PlaceholderError
from imageplaceholder.models.requests import PlaceholdOptions
from imageplaceholder.providers.base import BaseUrlBuilder
from imageplaceholder.utils.validation_utils import coerce_options

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "svg"
DEFAULT_FONT = "lato"

SUPPORTED_FORMATS = ["svg", "png", "jpeg", "gif", "webp", "avif"]
RETINA_FORMATS = ["png", "jpeg", "gif", "webp", "avif"]
RETINA_SCALES = ["2x", "3x"]
SUPPORTED_FONTS = [
    "lato",
    "lora",
    "montserrat",
    "noto-sans",
    "open-sans",
    "oswald",
    "playfair-display",
    "poppins",
    "pt-sans",
    "raleway",
    "roboto",
    "source-sans-pro",
]


class PlaceholdUrlBuilder(BaseUrlBuilder):
    """URL builder for placehold.co."""

    def build_url(
        self,
        width: int,
        height: Optional[int] = None,
        options: PlaceholdOptions | dict[str, Any] | None = None,
    ) -> str:
        """
        Build a placehold.co URL.

        URL structure:
            {base}/{width}[x{height}][@{retina}][/{bg}/{fg}][.{format}][?text=...][&font=...]

        Args:
            width: Image width in pixels (10-4000)
            height: Image height in pixels (10-4000). Omitted or equal to width gives a square URL.
            options: placehold.co options

        Returns:
            The composed URL

        Raises:
            PlaceholderError: When dimensions or options are invalid
        """
        self.validate_dimensions(width, height)
        opts = coerce_options(PlaceholdOptions, options)
        if opts is not None:
            self.validate_options(opts)

        width = int(width)
        height = int(height) if height is not None else None

        url = f"{self.base_url}/{width}"
        if height is not None and height != width:
            url += f"x{height}"

        query_params: list[str] = []
        if opts is not None:
            if opts.retina:
                url += f"@{opts.retina}"

            if opts.background_color and opts.text_color:
                url += f"/{_path_color(opts.background_color)}/{_path_color(opts.text_color)}"

            if opts.format and opts.format != DEFAULT_FORMAT:
                url += f".{opts.format}"

            if opts.custom_text:
                query_params.append(f"text={self.encode_text(opts.custom_text)}")

            if opts.font and opts.font != DEFAULT_FONT:
                query_params.append(f"font={opts.font.replace('-', '+')}")

        if query_params:
            url += "?" + "&".join(query_params)

        logger.debug(f"Built placehold.co URL for {width}x{height or width}: {url}")
        return url

    def validate_options(self, options: PlaceholdOptions | dict[str, Any] | None = None) -> bool:
        """
        Validate placehold.co options.

        Raises:
            PlaceholderError: On an unknown format or font, a retina scale without
                a raster format, or an incomplete or malformed color pair
        """
        opts = coerce_options(PlaceholdOptions, options)
        if opts is None:
            return True

        if opts.format and opts.format not in SUPPORTED_FORMATS:
            raise PlaceholderError.validation(
                "format", opts.format, f"Format must be one of: {', '.join(SUPPORTED_FORMATS)}"
            )

        # Retina needs an explicit raster format; svg is the default
        if opts.retina:
            fmt = opts.format or DEFAULT_FORMAT
            if fmt not in RETINA_FORMATS:
                raise PlaceholderError.validation(
                    "retina",
                    f"{opts.retina} with {fmt}",
                    f"Retina scaling is only supported for: {', '.join(RETINA_FORMATS)}",
                )

        if opts.background_color or opts.text_color:
            if not opts.background_color or not opts.text_color:
                raise PlaceholderError.validation(
                    "colors",
                    f"bg: {opts.background_color or 'missing'}, text: {opts.text_color or 'missing'}",
                    "Both backgroundColor and textColor must be specified together",
                )

            if not self.is_valid_color(opts.background_color):
                raise PlaceholderError.validation(
                    "backgroundColor",
                    opts.background_color,
                    'Invalid color format (use hex codes, CSS color names, or "transparent")',
                )

            if not self.is_valid_color(opts.text_color):
                raise PlaceholderError.validation(
                    "textColor",
                    opts.text_color,
                    "Invalid color format (use hex codes or CSS color names)",
                )

        if opts.font and opts.font not in SUPPORTED_FONTS:
            raise PlaceholderError.validation(
                "font", opts.font, f"Font must be one of: {', '.join(SUPPORTED_FONTS)}"
            )

        if opts.retina and opts.retina not in RETINA_SCALES:
            raise PlaceholderError.validation("retina", opts.retina, 'Retina must be "2x" or "3x"')

        return True


def _path_color(color: str) -> str:
    # '#' would start a URL fragment
    return color[1:] if color.startswith("#") else color
