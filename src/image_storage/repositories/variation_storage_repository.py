"""Abstract contract for image variation storage."""

from abc import ABC, abstractmethod


class ImageVariationStorageRepository(ABC):
    """Contract for storing pre-resized copies of images.

    Each variation is an independent blob addressed by the original
    image's identity plus its width in pixels.
    """

    @abstractmethod
    def store_image_variation(
        self,
        user: str,
        image_id: str,
        image_data: bytes,
        width: int,
    ) -> None:
        """Store a variation of an image.

        Args:
            user: Owner of the image
            image_id: Identifier of the original image
            image_data: Binary content of the resized image
            width: Width of the variation in pixels

        Raises:
            StorageFailureError: If the write fails
        """

    @abstractmethod
    def get_image_variation(self, user: str, image_id: str, width: int) -> bytes:
        """Read a variation of an image.

        Raises:
            NotFoundError: If the variation does not exist
            StorageFailureError: If the read fails
        """

    @abstractmethod
    def delete_image_variations(
        self,
        user: str,
        image_id: str,
        width: int | None = None,
    ) -> None:
        """Delete one variation, or all variations when width is None.

        Deleting all variations of an image that has none is not an error.

        Raises:
            NotFoundError: If a single variation is reported missing
            StorageFailureError: If listing or deletion fails
        """
