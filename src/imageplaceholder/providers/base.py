"""Base URL builder interface and shared helpers."""

import re
from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol

from typing_extensions import runtime_checkable

from imageplaceholder.models.errors import PlaceholderError
from imageplaceholder.utils.validation_utils import is_integer

# Bounds enforced by every builder, independent of the validator's constraints
MIN_DIMENSION = 10
MAX_DIMENSION = 4000

HEX_COLOR_PATTERN = re.compile(r"#?([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")

CSS_COLORS = frozenset({
    "black",
    "white",
    "red",
    "green",
    "blue",
    "yellow",
    "orange",
    "purple",
    "pink",
    "brown",
    "gray",
    "grey",
    "cyan",
    "magenta",
    "lime",
    "maroon",
    "navy",
    "olive",
    "silver",
    "teal",
    "aqua",
    "fuchsia",
    "transparent",
})


@runtime_checkable
class UrlBuilder(Protocol):
    """Protocol for provider URL builders."""

    def build_url(self, width: int, height: Optional[int] = None, options: Any = None) -> str:
        """
        Compose a placeholder URL.

        Args:
            width: Image width in pixels
            height: Image height in pixels (square image when omitted)
            options: Provider-specific options model or mapping

        Returns:
            The composed URL

        Raises:
            PlaceholderError: When dimensions or options are invalid
        """
        ...

    def validate_options(self, options: Any = None) -> bool:
        """Validate provider-specific options. Returns True or raises PlaceholderError."""
        ...


class BaseUrlBuilder(ABC):
    """Common functionality for the provider URL builders."""

    def __init__(self, base_url: str):
        self.base_url = base_url

    @abstractmethod
    def build_url(self, width: int, height: Optional[int] = None, options: Any = None) -> str:
        ...

    @abstractmethod
    def validate_options(self, options: Any = None) -> bool:
        ...

    def validate_dimensions(self, width: Any, height: Any = None) -> None:
        """Check width and height against the builder bounds."""
        if not is_integer(width) or not MIN_DIMENSION <= width <= MAX_DIMENSION:
            raise PlaceholderError.validation(
                "width", width, f"Width must be an integer between {MIN_DIMENSION} and {MAX_DIMENSION}"
            )

        if height is not None:
            if not is_integer(height) or not MIN_DIMENSION <= height <= MAX_DIMENSION:
                raise PlaceholderError.validation(
                    "height", height, f"Height must be an integer between {MIN_DIMENSION} and {MAX_DIMENSION}"
                )

    @staticmethod
    def is_valid_hex_color(color: str) -> bool:
        return HEX_COLOR_PATTERN.fullmatch(color) is not None

    @staticmethod
    def is_valid_css_color(color: str) -> bool:
        return color.lower() in CSS_COLORS

    def is_valid_color(self, color: str) -> bool:
        """Hex code, CSS color name, or 'transparent'."""
        return color == "transparent" or self.is_valid_hex_color(color) or self.is_valid_css_color(color)

    @staticmethod
    def encode_text(text: str) -> str:
        """Encode text for a query value: spaces become '+', newlines the literal '\\n'."""
        return text.replace(" ", "+").replace("\n", "\\n")
