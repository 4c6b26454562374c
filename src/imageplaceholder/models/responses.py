"""Response models for ImagePlaceholder."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from imageplaceholder.models.requests import PicsumOptions, PlaceholdOptions, Provider


class Dimensions(BaseModel):
    """Resolved image dimensions."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=1, description="Image width in pixels")
    height: int = Field(..., ge=1, description="Image height in pixels (width when none was requested)")


class AppliedOptions(BaseModel):
    """Echo of the provider options that went into the URL."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    placehold_options: Optional[PlaceholdOptions] = None
    picsum_options: Optional[PicsumOptions] = None


class PlaceholderResult(BaseModel):
    """Result of a placeholder URL generation."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    url: str = Field(..., description="Composed placeholder image URL")
    provider: Provider = Field(..., description="Provider the URL points at")
    dimensions: Dimensions = Field(..., description="Resolved width and height")
    applied_options: AppliedOptions = Field(
        default_factory=AppliedOptions,
        description="Provider options that were supplied with the request",
    )
