"""Custom exception classes for the pager service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_INDEX_OUT_OF_RANGE,
    ERROR_CODE_INVALID_CONFIGURATION,
    ERROR_CODE_RECURSION_LIMIT_EXCEEDED,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_SETTINGS_STORE,
    ERROR_CODE_VALIDATION_FAILED,
)


class PagerServiceError(Exception):
    """
    Base exception for all pager service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(PagerServiceError):
    """Raised when request validation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidConfigurationError(ValidationError):
    """Raised when formatter settings fail validation."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_CONFIGURATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class NotFoundError(PagerServiceError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class IndexOutOfRangeError(NotFoundError):
    """Raised when the requested page index does not exist."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INDEX_OUT_OF_RANGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class RecursionLimitExceededError(PagerServiceError):
    """Raised when nested rendering goes deeper than the allowed ceiling."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RECURSION_LIMIT_EXCEEDED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class SettingsStoreError(PagerServiceError):
    """Raised when a formatter settings store operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_SETTINGS_STORE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
