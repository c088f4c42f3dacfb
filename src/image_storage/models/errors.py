"""Custom exception classes for the image storage adapters."""

from typing import Any

from image_storage.utils.constants import (
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_STORAGE_FAILURE,
    ERROR_CODE_VALIDATION_FAILED,
    STATUS_CODE_NOT_FOUND,
    STATUS_CODE_STORAGE_FAILURE,
    STATUS_CODE_VALIDATION_FAILED,
)


class ImageStorageError(Exception):
    """
    Base exception for all image storage errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message, error code and status code.
    Optional contextual information can be supplied via `details`.
    The original backend exception, when there is one, is chained as
    ``__cause__``.
    """

    message: str
    error_code: str
    status_code: int
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        status_code: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(ImageStorageError):
    """Raised when object key parts are invalid."""

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
            status_code=STATUS_CODE_VALIDATION_FAILED,
            details=details,
        )


class NotFoundError(ImageStorageError):
    """Raised when the addressed object does not exist."""

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
            status_code=STATUS_CODE_NOT_FOUND,
            details=details,
        )


class StorageFailureError(ImageStorageError):
    """Raised when any other object store operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_STORAGE_FAILURE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=STATUS_CODE_STORAGE_FAILURE,
            details=details,
        )
