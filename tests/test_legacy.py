"""Tests for the legacy image_placeholder entry point."""

import pytest

from imageplaceholder.legacy import image_placeholder
from imageplaceholder.models.config import ProviderSettings
from imageplaceholder.models.errors import ErrorCode, PlaceholderError
from imageplaceholder.models.requests import Provider


def test_legacy_placehold():
    assert image_placeholder("placehold", 400, 300) == "https://placehold.co/400x300"


def test_legacy_lorem_picsum():
    assert image_placeholder("lorem-picsum", 500, 400) == "https://picsum.photos/500/400"


def test_legacy_keeps_template_form_for_squares():
    """The template path does not collapse square sizes."""
    assert image_placeholder("placehold", 1, 1) == "https://placehold.co/1x1"
    assert image_placeholder("lorem-picsum", 10000, 10000) == "https://picsum.photos/10000/10000"


def test_legacy_defaults_height_to_width():
    assert image_placeholder("placehold", 250) == "https://placehold.co/250x250"


@pytest.mark.parametrize(
    "provider, width, height",
    [
        ("placehold", 0, 100),
        ("placehold", 10001, 100),
        ("placehold", 100, 0),
        ("placehold", 100, 10001),
        ("placehold", 100.5, 100),
        ("placehold", 100, 100.5),
        ("placehold", -100, 100),
    ],
)
def test_legacy_rejects_invalid_dimensions(provider, width, height):
    with pytest.raises(PlaceholderError) as exc_info:
        image_placeholder(provider, width, height)

    assert exc_info.value.code == ErrorCode.VALIDATION_ERROR


def test_legacy_rejects_invalid_provider():
    with pytest.raises(PlaceholderError) as exc_info:
        image_placeholder("invalid", 100, 100)

    assert exc_info.value.code == ErrorCode.PROVIDER_ERROR


def test_legacy_honors_environment_bounds(monkeypatch):
    monkeypatch.setenv("MCP_MAX_WIDTH", "200")

    with pytest.raises(PlaceholderError):
        image_placeholder("placehold", 300, 100)


def test_legacy_wraps_template_errors(monkeypatch):
    """A template with an unknown token is an internal error."""
    broken = {Provider.PLACEHOLD: ProviderSettings(base_url="https://placehold.co", url_template="{baseUrl}/{size}")}
    monkeypatch.setattr("imageplaceholder.legacy.create_provider_config", lambda: broken)

    with pytest.raises(PlaceholderError) as exc_info:
        image_placeholder("placehold", 100, 100)

    error = exc_info.value
    assert error.code == ErrorCode.INTERNAL_ERROR
    assert error.context["original_error"] == "KeyError"
    assert isinstance(error.original_exception, KeyError)


@pytest.mark.parametrize(
    "provider, width, height, expected",
    [
        ("placehold", 123, 456, "https://placehold.co/123x456"),
        ("lorem-picsum", 789, 123, "https://picsum.photos/789/123"),
        ("placehold", 1000, 2000, "https://placehold.co/1000x2000"),
    ],
)
def test_legacy_string_interpolation(provider, width, height, expected):
    assert image_placeholder(provider, width, height) == expected
