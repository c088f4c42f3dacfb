"""
Unit tests for image_storage.models.errors
"""

from image_storage.models.errors import (
    ImageStorageError,
    NotFoundError,
    StorageFailureError,
    ValidationError,
)


class TestImageStorageError:
    def test_base_error(self) -> None:
        err = ImageStorageError(
            message="Something went wrong",
            error_code="TEST_ERROR",
            status_code=418,
            details={"foo": "bar"},
        )

        assert err.message == "Something went wrong"
        assert err.error_code == "TEST_ERROR"
        assert err.status_code == 418
        assert err.details == {"foo": "bar"}
        assert str(err) == "Something went wrong"


class TestNotFoundError:
    def test_not_found_error(self) -> None:
        err = NotFoundError(message="File not found", details={"key": "0/0/1/1/a/b/c/abc"})

        assert isinstance(err, ImageStorageError)
        assert err.error_code == "NOT_FOUND"
        assert err.status_code == 404
        assert err.details == {"key": "0/0/1/1/a/b/c/abc"}


class TestStorageFailureError:
    def test_defaults(self) -> None:
        err = StorageFailureError(message="Unable to store image")

        assert err.error_code == "STORAGE_FAILURE"
        assert err.status_code == 500
        assert err.details == {}

    def test_keeps_original_error_as_cause(self) -> None:
        original = ConnectionError("reset by peer")

        try:
            try:
                raise original
            except ConnectionError as exc:
                raise StorageFailureError(
                    message="Unable to get image",
                    error_code="IMAGE_FETCH_FAILED",
                ) from exc
        except StorageFailureError as err:
            assert err.__cause__ is original
            assert err.error_code == "IMAGE_FETCH_FAILED"


class TestValidationError:
    def test_validation_error_defaults(self) -> None:
        err = ValidationError(message="Invalid input")

        assert err.error_code == "VALIDATION_FAILED"
        assert err.status_code == 400
        assert err.details == {}
