"""Request validation against the configured dimension constraints."""

import logging
from collections.abc import Mapping
from typing import Any

from imageplaceholder.models.config import DimensionConstraints
from imageplaceholder.models.errors import PlaceholderError
from imageplaceholder.models.requests import PlaceholderRequest, Provider
from imageplaceholder.utils.validation_utils import coerce_options, is_integer

logger = logging.getLogger(__name__)


def request_to_mapping(params: Any) -> Any:
    """Flatten a PlaceholderRequest to its wire-format mapping; other values pass through."""
    if isinstance(params, PlaceholderRequest):
        return params.model_dump(by_alias=True, exclude_none=True)
    return params


class PlaceholderValidator:
    """Validates placeholder requests before any URL is built.

    Only structural rules are checked here. Provider-specific option values are
    validated by the URL builders.
    """

    def __init__(self, constraints: DimensionConstraints | None = None):
        self._constraints = constraints or DimensionConstraints()

    def validate(self, params: Mapping[str, Any] | PlaceholderRequest) -> None:
        """
        Validate a placeholder request.

        Args:
            params: Mapping with provider, width, optional height and optional
                placeholdOptions/picsumOptions, or a PlaceholderRequest

        Raises:
            PlaceholderError: VALIDATION_ERROR for malformed input,
                PROVIDER_ERROR when the provider is not supported
        """
        params = request_to_mapping(params)
        if not isinstance(params, Mapping):
            raise PlaceholderError.validation("params", params, "Must be a valid object")

        self._validate_provider(params.get("provider"))
        self._validate_dimension("width", params.get("width"))

        # Height is optional - a square image is assumed when it is missing
        if params.get("height") is not None:
            self._validate_dimension("height", params.get("height"))

        self._validate_provider_options(params)

    def _validate_provider(self, provider: Any) -> None:
        if not provider or not isinstance(provider, str):
            raise PlaceholderError.validation("provider", provider, "Must be a non-empty string")

        supported = self._constraints.supported_providers
        if provider not in supported:
            raise PlaceholderError.provider(
                provider,
                f"Unsupported provider. Supported providers: {', '.join(supported)}",
                supported_providers=list(supported),
            )

    def _validate_dimension(self, name: str, value: Any) -> None:
        if not is_integer(value):
            raise PlaceholderError.validation(name, value, "Must be a positive integer")

        if name == "width":
            low, high = self._constraints.min_width, self._constraints.max_width
        else:
            low, high = self._constraints.min_height, self._constraints.max_height

        if not low <= value <= high:
            raise PlaceholderError.validation(name, value, f"Must be between {low} and {high} pixels")

    def _validate_provider_options(self, params: Mapping[str, Any]) -> None:
        provider = params.get("provider")

        if provider == Provider.PLACEHOLD and params.get("picsumOptions") is not None:
            raise PlaceholderError.validation(
                "picsumOptions",
                params.get("picsumOptions"),
                "Cannot use picsum options with placehold provider",
            )

        if provider == Provider.LOREM_PICSUM and params.get("placeholdOptions") is not None:
            raise PlaceholderError.validation(
                "placeholdOptions",
                params.get("placeholdOptions"),
                "Cannot use placehold options with lorem-picsum provider",
            )

    def get_constraints(self) -> DimensionConstraints:
        """Get a copy of the current constraints."""
        return self._constraints.model_copy(deep=True)

    def update_constraints(self, partial: Mapping[str, Any] | None = None, **overrides: Any) -> None:
        """
        Merge constraint overrides into the held constraint set.

        Keys may use field names (max_width) or their camelCase wire names
        (maxWidth). The merged set is validated before it replaces the current one.

        Raises:
            PlaceholderError: VALIDATION_ERROR for unknown keys or badly typed values.
                The held constraints are left unchanged.
        """
        update = {**(partial or {}), **overrides}
        aliases = {name: info.alias or name for name, info in DimensionConstraints.model_fields.items()}
        merged = {
            **self._constraints.model_dump(by_alias=True),
            **{aliases.get(key, key): value for key, value in update.items()},
        }
        self._constraints = coerce_options(DimensionConstraints, merged)
        logger.info(f"Validation constraints updated: {sorted(update)}")
