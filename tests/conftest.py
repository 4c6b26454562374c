"""Shared pytest fixtures for ImagePlaceholder tests."""

import pytest

from imageplaceholder.config import CONSTRAINT_ENV_VARS
from imageplaceholder.models.config import DimensionConstraints
from imageplaceholder.providers.picsum_provider import PicsumUrlBuilder
from imageplaceholder.providers.placehold_provider import PlaceholdUrlBuilder
from imageplaceholder.services.placeholder_service import PlaceholderGenerator
from imageplaceholder.services.validation_service import PlaceholderValidator


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove configuration overrides so every test starts from the defaults."""
    for name in [*CONSTRAINT_ENV_VARS, "MCP_LOG_LEVEL", "MCP_ENVIRONMENT"]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def constraints():
    """Fixture for the default dimension constraints."""
    return DimensionConstraints()


@pytest.fixture
def validator(constraints):
    """Fixture for a validator using the default constraints."""
    return PlaceholderValidator(constraints)


@pytest.fixture
def generator(validator):
    """Fixture for a generator wired to the default validator."""
    return PlaceholderGenerator(validator)


@pytest.fixture
def placehold_builder():
    """Fixture for a placehold.co URL builder."""
    return PlaceholdUrlBuilder("https://placehold.co")


@pytest.fixture
def picsum_builder():
    """Fixture for a picsum.photos URL builder."""
    return PicsumUrlBuilder("https://picsum.photos")
