"""Abstract contract for image file storage."""

from abc import ABC, abstractmethod
from datetime import datetime


class ImageStorageRepository(ABC):
    """Contract for storing and retrieving original images.

    Implementations could be S3, GCS, local disk, etc.
    Callers depend on this interface, not the implementation.
    """

    @abstractmethod
    def store(self, user: str, image_id: str, image_data: bytes) -> None:
        """Store image bytes, overwriting any existing image.

        Args:
            user: Owner of the image
            image_id: Unique image identifier
            image_data: Binary image content

        Raises:
            StorageFailureError: If the write fails
        """

    @abstractmethod
    def delete(self, user: str, image_id: str) -> None:
        """Delete an image.

        Raises:
            ValidationError: If the identifiers are malformed
            NotFoundError: If the image does not exist
            StorageFailureError: If deletion fails
        """

    @abstractmethod
    def get_image(self, user: str, image_id: str) -> bytes:
        """Read image bytes.

        Raises:
            NotFoundError: If the image does not exist
            StorageFailureError: If the read fails
        """

    @abstractmethod
    def get_last_modified(self, user: str, image_id: str) -> datetime:
        """Return the last modification time of an image (UTC).

        Raises:
            NotFoundError: If the image does not exist
            StorageFailureError: If the metadata cannot be read
        """

    @abstractmethod
    def get_status(self) -> bool:
        """Return True when the storage backend is healthy. Never raises."""

    @abstractmethod
    def image_exists(self, user: str, image_id: str) -> bool:
        """Return True when the image can be found. Never raises."""
