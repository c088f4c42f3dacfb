"""S3-backed implementation of ImageStorageRepository."""

from datetime import datetime

from aws_lambda_powertools import Logger

from image_storage.infrastructure.adapters.s3_adapter import S3AdapterProtocol
from image_storage.infrastructure.aws.s3_object_storage import S3ObjectStorage
from image_storage.models.errors import NotFoundError
from image_storage.models.keys import ObjectKind
from image_storage.repositories.storage_repository import ImageStorageRepository

logger = Logger(UTC=True)


class S3ImageStorage(ImageStorageRepository):
    """Image storage implementation backed by Amazon S3."""

    def __init__(self, adapter: S3AdapterProtocol | None = None) -> None:
        """Create storage using the provided S3 adapter."""
        self._objects = S3ObjectStorage(ObjectKind.IMAGE, adapter)

    def store(self, user: str, image_id: str, image_data: bytes) -> None:
        self._objects.store(user, image_id, image_data)

    def delete(self, user: str, image_id: str) -> None:
        """Delete an image after confirming that it exists.

        Malformed identifiers raise ValidationError before the existence
        check, which would otherwise report them as missing.
        """
        self._objects.key_for(user, image_id)

        if not self._objects.exists(user, image_id):
            logger.warning(
                "Image to delete not found",
                extra={"user": user, "image_id": image_id},
            )
            raise NotFoundError(
                message="File not found",
                details={"user": user, "image_id": image_id},
            )

        self._objects.delete_one(user, image_id)

    def get_image(self, user: str, image_id: str) -> bytes:
        return self._objects.fetch(user, image_id)

    def get_last_modified(self, user: str, image_id: str) -> datetime:
        return self._objects.last_modified(user, image_id)

    def get_status(self) -> bool:
        return self._objects.status()

    def image_exists(self, user: str, image_id: str) -> bool:
        return self._objects.exists(user, image_id)
