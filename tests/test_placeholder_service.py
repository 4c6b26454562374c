"""Tests for the placeholder generator."""

import logging

import pytest

from imageplaceholder.config import create_provider_config
from imageplaceholder.models.errors import ErrorCode, PlaceholderError
from imageplaceholder.models.requests import (
    PicsumOptions,
    PlaceholderRequest,
    PlaceholdOptions,
    Provider,
)
from imageplaceholder.models.responses import PlaceholderResult
from imageplaceholder.services.placeholder_service import PlaceholderGenerator


def test_generate_placehold(generator):
    result = generator.generate_placeholder({"provider": "placehold", "width": 300, "height": 200})

    assert isinstance(result, PlaceholderResult)
    assert result.url == "https://placehold.co/300x200"
    assert result.provider == Provider.PLACEHOLD
    assert result.dimensions.width == 300
    assert result.dimensions.height == 200
    assert result.applied_options.placehold_options is None
    assert result.applied_options.picsum_options is None


def test_generate_lorem_picsum(generator):
    result = generator.generate_placeholder({"provider": "lorem-picsum", "width": 400, "height": 300})

    assert result.url == "https://picsum.photos/400/300"
    assert result.provider == Provider.LOREM_PICSUM


def test_generate_square_default(generator):
    """An omitted height resolves to the width."""
    result = generator.generate_placeholder({"provider": "placehold", "width": 300})

    assert result.url == "https://placehold.co/300"
    assert (result.dimensions.width, result.dimensions.height) == (300, 300)


def test_generate_normalizes_integral_floats(generator):
    result = generator.generate_placeholder({"provider": "placehold", "width": 300.0, "height": 200.0})

    assert result.url == "https://placehold.co/300x200"
    assert result.dimensions.width == 300


def test_generate_with_placehold_options(generator):
    options = {
        "retina": "2x",
        "backgroundColor": "f9fafb",
        "textColor": "2563eb",
        "format": "png",
        "customText": "DeepakNess",
        "font": "playfair-display",
    }

    result = generator.generate_placeholder(
        {"provider": "placehold", "width": 1200, "height": 630, "placeholdOptions": options}
    )

    assert result.url == "https://placehold.co/1200x630@2x/f9fafb/2563eb.png?text=DeepakNess&font=playfair+display"
    assert result.applied_options.placehold_options == PlaceholdOptions(**options)
    assert result.applied_options.picsum_options is None


def test_generate_with_picsum_options(generator):
    result = generator.generate_placeholder(
        {"provider": "lorem-picsum", "width": 400, "height": 300, "picsumOptions": {"imageId": 237, "blur": 2}}
    )

    assert result.url == "https://picsum.photos/id/237/400/300?blur=2"
    assert result.applied_options.picsum_options == PicsumOptions(image_id=237, blur=2)


def test_generate_with_request_model(generator):
    request = PlaceholderRequest(
        provider="lorem-picsum",
        width=200,
        picsum_options=PicsumOptions(seed="abc", grayscale=True),
    )

    result = generator.generate_placeholder(request)

    assert result.url == "https://picsum.photos/seed/abc/200?grayscale"
    assert result.dimensions.height == 200


def test_generate_result_serializes_with_wire_names(generator):
    result = generator.generate_placeholder(
        {"provider": "placehold", "width": 300, "placeholdOptions": {"format": "webp"}}
    )

    dumped = result.model_dump(by_alias=True, exclude_none=True)

    assert dumped["url"] == "https://placehold.co/300.webp"
    assert dumped["provider"] == "placehold"
    assert dumped["dimensions"] == {"width": 300, "height": 300}
    assert dumped["appliedOptions"] == {"placeholdOptions": {"format": "webp"}}


def test_generate_rejects_cross_provider_options(generator):
    """Mismatched options fail before any URL is built."""
    with pytest.raises(PlaceholderError) as exc_info:
        generator.generate_placeholder({"provider": "placehold", "width": 300, "picsumOptions": {"grayscale": True}})

    assert exc_info.value.code == ErrorCode.VALIDATION_ERROR
    assert exc_info.value.field == "picsumOptions"


def test_generate_propagates_provider_error(generator):
    with pytest.raises(PlaceholderError) as exc_info:
        generator.generate_placeholder({"provider": "dummyimage", "width": 300})

    assert exc_info.value.code == ErrorCode.PROVIDER_ERROR


def test_generate_propagates_builder_error(generator, caplog):
    """Builder errors are logged and re-raised unchanged."""
    with caplog.at_level(logging.ERROR, logger="imageplaceholder"):
        with pytest.raises(PlaceholderError) as exc_info:
            generator.generate_placeholder(
                {"provider": "placehold", "width": 300, "placeholdOptions": {"format": "svg", "retina": "2x"}}
            )

    assert exc_info.value.field == "retina"
    assert "Failed to generate placeholder" in caplog.text


def test_generate_enforces_builder_bounds_when_validator_is_relaxed(generator):
    """The builder's 10-4000 bound still applies inside the validator's 1-10000 bound."""
    with pytest.raises(PlaceholderError) as exc_info:
        generator.generate_placeholder({"provider": "placehold", "width": 5000, "height": 100})

    assert "between 10 and 4000" in exc_info.value.message


def test_generate_boundary_in_both_layers(generator):
    with pytest.raises(PlaceholderError, match="between 10 and 4000"):
        generator.generate_placeholder({"provider": "lorem-picsum", "width": 5})


def test_generate_is_idempotent(generator):
    params = {"provider": "lorem-picsum", "width": 640, "height": 480, "picsumOptions": {"seed": "s", "random": 0}}

    first = generator.generate_placeholder(params)
    second = generator.generate_placeholder(params)

    assert first.url == second.url == "https://picsum.photos/seed/s/640/480?random=0"


def test_generate_logs_success(generator, caplog):
    with caplog.at_level(logging.INFO, logger="imageplaceholder"):
        generator.generate_placeholder({"provider": "placehold", "width": 300, "height": 200})

    assert "https://placehold.co/300x200" in caplog.text


def test_get_supported_providers(generator):
    assert generator.get_supported_providers() == ["placehold", "lorem-picsum"]


def test_get_provider_config():
    generator = PlaceholderGenerator(provider_config=create_provider_config())

    settings = generator.get_provider_config("placehold")

    assert settings is not None
    assert settings.base_url == "https://placehold.co"
    assert generator.get_provider_config("dummyimage") is None


def test_get_provider_base_url(generator):
    assert generator.get_provider_base_url("lorem-picsum") == "https://picsum.photos"
    assert generator.get_provider_base_url("dummyimage") is None
