"""Request models for ImagePlaceholder."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Provider(str, Enum):
    """Placeholder image services a URL can point at."""

    PLACEHOLD = "placehold"
    LOREM_PICSUM = "lorem-picsum"


class PlaceholdOptions(BaseModel):
    """Cosmetic options for placehold.co URLs.

    Only the shape of each field is checked here; allowed values, the color
    pairing and the retina/format coupling are enforced by the URL builder.
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    format: Optional[str] = Field(None, description="Image format (svg, png, jpeg, gif, webp, avif). Defaults to svg.")
    background_color: Optional[str] = Field(None, description="Background color (hex code, CSS color name or 'transparent')")
    text_color: Optional[str] = Field(None, description="Text color (hex code or CSS color name)")
    custom_text: Optional[str] = Field(None, description="Text drawn on the image instead of the dimensions")
    font: Optional[str] = Field(None, description="Font used for the text. Defaults to lato.")
    retina: Optional[str] = Field(None, description="Pixel density suffix ('2x' or '3x'), raster formats only")


class PicsumOptions(BaseModel):
    """Options for picsum.photos URLs.

    Integer fields take whole-valued floats (237.0) the same way request
    dimensions do, since JSON clients may send every number as a float.
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    format: Optional[str] = Field(None, description="Image format extension (jpg or webp)")
    image_id: Optional[int] = Field(None, description="Specific picsum image ID (mutually exclusive with seed)")
    seed: Optional[str] = Field(None, description="Seed for a stable random image (mutually exclusive with image_id)")
    grayscale: Optional[bool] = Field(None, description="Render the image in grayscale")
    blur: Optional[int] = Field(None, description="Blur amount (1-10)")
    random: Optional[int] = Field(None, description="Cache-busting token for repeated random images")

    @field_validator("image_id", "blur", "random", mode="before")
    @classmethod
    def _whole_float_to_int(cls, value):
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class PlaceholderRequest(BaseModel):
    """Request model for placeholder URL generation."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    provider: str = Field(..., description="Provider to build the URL for")
    width: int = Field(..., description="Image width in pixels")
    height: Optional[int] = Field(None, description="Image height in pixels. Defaults to width (square image).")
    placehold_options: Optional[PlaceholdOptions] = Field(None, description="Options for the placehold provider")
    picsum_options: Optional[PicsumOptions] = Field(None, description="Options for the lorem-picsum provider")
