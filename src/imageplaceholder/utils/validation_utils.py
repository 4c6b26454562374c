"""Shared checks used by the request validator and the URL builders."""

import math
from typing import Any, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from imageplaceholder.models.errors import PlaceholderError

TModel = TypeVar("TModel", bound=BaseModel)


def is_integer(value: Any) -> bool:
    """
    Check that a value is a whole number.

    Floats with no fractional part (300.0) count as integers since JSON
    clients send numbers without distinguishing the two. Booleans, NaN and
    infinities do not.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    return False


def coerce_options(model_cls: type[TModel], options: Any) -> Optional[TModel]:
    """
    Turn a raw options mapping into ``model_cls``.

    Args:
        model_cls: Options model to validate against
        options: Mapping, model instance or None

    Returns:
        Validated model instance, or None when no options were given

    Raises:
        PlaceholderError: When the options have the wrong shape. The first
            offending field is reported.
    """
    if options is None or isinstance(options, model_cls):
        return options

    try:
        return model_cls.model_validate(options)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "options"
        raise PlaceholderError.validation(field, first.get("input"), first["msg"]) from e
