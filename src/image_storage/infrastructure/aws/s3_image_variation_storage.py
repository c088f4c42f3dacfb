"""S3-backed implementation of ImageVariationStorageRepository."""

from aws_lambda_powertools import Logger

from image_storage.infrastructure.adapters.s3_adapter import S3AdapterProtocol
from image_storage.infrastructure.aws.s3_object_storage import S3ObjectStorage
from image_storage.models.keys import ObjectKind
from image_storage.repositories.variation_storage_repository import (
    ImageVariationStorageRepository,
)

logger = Logger(UTC=True)


class S3ImageVariationStorage(ImageVariationStorageRepository):
    """Image variation storage backed by Amazon S3.

    Variations live under ``imageVariation/...`` keys ending in the width,
    so all variations of one image share a listable prefix.
    """

    def __init__(self, adapter: S3AdapterProtocol | None = None) -> None:
        """Create storage using the provided S3 adapter."""
        self._objects = S3ObjectStorage(ObjectKind.IMAGE_VARIATION, adapter)

    def store_image_variation(
        self,
        user: str,
        image_id: str,
        image_data: bytes,
        width: int,
    ) -> None:
        self._objects.store(user, image_id, image_data, width=width)

    def get_image_variation(self, user: str, image_id: str, width: int) -> bytes:
        return self._objects.fetch(user, image_id, width=width)

    def delete_image_variations(
        self,
        user: str,
        image_id: str,
        width: int | None = None,
    ) -> None:
        """Delete one variation, or every variation of the image when width is None."""
        if width is not None:
            self._objects.delete_one(user, image_id, width=width)
            return

        deleted = self._objects.delete_by_prefix(user, image_id)
        logger.debug(
            "Image variations removed",
            extra={"user": user, "image_id": image_id, "count": deleted},
        )
