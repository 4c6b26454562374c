"""Error code definitions and the error type raised by ImagePlaceholder."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error category codes for placeholder operations."""

    # Caller-attributable errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PROVIDER_ERROR = "PROVIDER_ERROR"

    # Startup / unexpected errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Set of error codes caused by the caller's input
CLIENT_ERRORS = {
    ErrorCode.VALIDATION_ERROR,
    ErrorCode.PROVIDER_ERROR,
}


def is_client_error(code: ErrorCode) -> bool:
    """Check if an error code points at bad caller input rather than a server fault."""
    return code in CLIENT_ERRORS


class PlaceholderError(Exception):
    """Error raised by every layer of ImagePlaceholder.

    The ``code`` tells the variant apart; ``context`` holds the field-to-value
    details for that variant (offending field, supported providers, ...).
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: dict[str, Any] | None = None,
        original_exception: Exception | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception

    @classmethod
    def validation(cls, field: str, value: Any, constraints: str | None = None) -> "PlaceholderError":
        """Build a validation failure attributable to ``field``."""
        message = f"Invalid {field}: {value}. {constraints}" if constraints else f"Invalid {field}: {value}"
        return cls(
            ErrorCode.VALIDATION_ERROR,
            message,
            {"field": field, "value": value, "constraints": constraints},
        )

    @classmethod
    def provider(cls, provider: Any, message: str, **context: Any) -> "PlaceholderError":
        """Build a provider-unsupported failure."""
        return cls(
            ErrorCode.PROVIDER_ERROR,
            f'Provider "{provider}" error: {message}',
            {"provider": provider, **context},
        )

    @classmethod
    def configuration(
        cls, setting: str, value: Any, expected_format: str | None = None
    ) -> "PlaceholderError":
        """Build a configuration failure for an environment-derived setting."""
        if expected_format:
            message = f'Configuration error for "{setting}": {value}. Expected: {expected_format}'
        else:
            message = f'Configuration error for "{setting}": {value}'
        return cls(
            ErrorCode.CONFIGURATION_ERROR,
            message,
            {"setting": setting, "value": value, "expected_format": expected_format},
        )

    @classmethod
    def internal(
        cls, message: str, original_exception: Exception | None = None, **context: Any
    ) -> "PlaceholderError":
        """Wrap an unexpected failure, keeping the originating error's identity."""
        if original_exception is not None:
            context.setdefault("original_error", type(original_exception).__name__)
        return cls(ErrorCode.INTERNAL_ERROR, message, context, original_exception=original_exception)

    @property
    def field(self) -> str | None:
        """Field name for validation failures, None for other variants."""
        return self.context.get("field")

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for logs and diagnostics."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context,
        }

    def __repr__(self) -> str:
        return f"PlaceholderError(code={self.code.value}, message={self.message!r})"
