"""Generic S3-backed object storage shared by the image and variation stores.

One implementation parameterized by ``ObjectKind`` derives keys, talks to
the adapter and translates backend errors:

- 404 responses become ``NotFoundError``
- every other failure becomes ``StorageFailureError``
- ``exists`` and ``status`` never raise and report ``False`` instead
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from image_storage.infrastructure.adapters.s3_adapter import S3Adapter, S3AdapterProtocol
from image_storage.models.errors import NotFoundError, StorageFailureError, ValidationError
from image_storage.models.keys import ObjectKind
from image_storage.utils.constants import (
    ERROR_CODE_IMAGE_DELETE_FAILED,
    ERROR_CODE_IMAGE_FETCH_FAILED,
    ERROR_CODE_IMAGE_LIST_FAILED,
    ERROR_CODE_IMAGE_METADATA_FAILED,
    ERROR_CODE_IMAGE_STORE_FAILED,
    KEY_SEPARATOR,
    S3_NOT_FOUND_ERROR_CODES,
    STATUS_CODE_NOT_FOUND,
)
from image_storage.utils.keys import build_object_key
from image_storage.utils.time import to_utc

logger = Logger(UTC=True)


def is_not_found(exc: ClientError) -> bool:
    """Return True when a backend error reports a missing object."""
    response: Mapping[str, Any] = exc.response
    status = response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    code = str(response.get("Error", {}).get("Code", ""))
    return status == STATUS_CODE_NOT_FOUND or code in S3_NOT_FOUND_ERROR_CODES


class S3ObjectStorage:
    """Object storage for one ``ObjectKind`` backed by S3.

    Holds no mutable state besides the adapter, so a single instance can
    be shared between threads. Concurrent writes to the same key are
    last-writer-wins.
    """

    def __init__(self, kind: ObjectKind, adapter: S3AdapterProtocol | None = None) -> None:
        """Create storage for ``kind`` using the provided S3 adapter."""
        self._kind = kind
        self._s3: S3AdapterProtocol = adapter or S3Adapter()

    def key_for(self, user: str, image_id: str, width: int | None = None) -> str:
        """Return the object key for the given identifying fields."""
        return build_object_key(self._kind, user, image_id, width)

    def store(self, user: str, image_id: str, data: bytes, width: int | None = None) -> None:
        """Write the blob, silently overwriting any existing object."""
        key = self.key_for(user, image_id, width)

        logger.debug(
            "Storing object",
            extra={"kind": self._kind.name, "key": key, "size": len(data)},
        )

        try:
            self._s3.put_object(key=key, body=data)
            logger.info("Object stored successfully", extra={"key": key})

        except ClientError as exc:
            logger.error("S3 put failed", extra={"key": key})
            raise StorageFailureError(
                message=f"Unable to store {self._label}",
                error_code=ERROR_CODE_IMAGE_STORE_FAILED,
                details={"key": key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error storing object")
            raise StorageFailureError(
                message=f"Unable to store {self._label}",
                error_code=ERROR_CODE_IMAGE_STORE_FAILED,
                details={"key": key},
            ) from exc

    def fetch(self, user: str, image_id: str, width: int | None = None) -> bytes:
        """Read the blob stored under the derived key."""
        key = self.key_for(user, image_id, width)

        logger.debug("Fetching object", extra={"key": key})

        try:
            response = self._s3.get_object(key=key)
            body = response.get("Body")
            data = body.read() if body is not None else None

        except ClientError as exc:
            logger.error("S3 get failed", extra={"key": key})

            if is_not_found(exc):
                raise NotFoundError(
                    message="File not found",
                    details={"key": key},
                ) from exc

            raise StorageFailureError(
                message=f"Unable to get {self._label}",
                error_code=ERROR_CODE_IMAGE_FETCH_FAILED,
                details={"key": key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error fetching object")
            raise StorageFailureError(
                message=f"Unable to get {self._label}",
                error_code=ERROR_CODE_IMAGE_FETCH_FAILED,
                details={"key": key},
            ) from exc

        if not isinstance(data, bytes):
            logger.error("S3 response has no readable body", extra={"key": key})
            raise StorageFailureError(
                message=f"Unable to get {self._label}",
                error_code=ERROR_CODE_IMAGE_FETCH_FAILED,
                details={"key": key},
            )

        logger.info("Object fetched successfully", extra={"key": key, "size": len(data)})
        return data

    def last_modified(self, user: str, image_id: str) -> datetime:
        """Return the store-reported last modification time in UTC."""
        key = self.key_for(user, image_id)

        logger.debug("Fetching object metadata", extra={"key": key})

        try:
            response = self._s3.head_object(key=key)

        except ClientError as exc:
            logger.error("S3 head failed", extra={"key": key})

            if is_not_found(exc):
                raise NotFoundError(
                    message="File not found",
                    details={"key": key},
                ) from exc

            raise StorageFailureError(
                message=f"Unable to get {self._label} metadata",
                error_code=ERROR_CODE_IMAGE_METADATA_FAILED,
                details={"key": key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error fetching object metadata")
            raise StorageFailureError(
                message=f"Unable to get {self._label} metadata",
                error_code=ERROR_CODE_IMAGE_METADATA_FAILED,
                details={"key": key},
            ) from exc

        last_modified = response.get("LastModified")
        if not isinstance(last_modified, datetime):
            logger.error("S3 metadata lacks LastModified", extra={"key": key})
            raise StorageFailureError(
                message=f"Unable to get {self._label} metadata",
                error_code=ERROR_CODE_IMAGE_METADATA_FAILED,
                details={"key": key},
            )

        return to_utc(last_modified)

    def exists(self, user: str, image_id: str) -> bool:
        """Return True if a metadata fetch succeeds.

        Any error, including malformed identifiers, yields False, so
        "absent" and "could not check" are indistinguishable here.
        """
        try:
            self._s3.head_object(key=self.key_for(user, image_id))
        except Exception as exc:
            logger.warning(
                "Existence check failed",
                extra={
                    "user": user,
                    "image_id": image_id,
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                },
            )
            return False

        return True

    def status(self) -> bool:
        """Return True only if the bucket probe answers with HTTP 200."""
        try:
            response = self._s3.head_bucket()
        except Exception as exc:
            logger.warning(
                "S3 health check failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            return False

        return response.get("ResponseMetadata", {}).get("HTTPStatusCode") == 200

    def delete_one(self, user: str, image_id: str, width: int | None = None) -> None:
        """Delete exactly the object at the derived key."""
        key = self.key_for(user, image_id, width)

        logger.debug("Deleting object", extra={"key": key})

        try:
            self._s3.delete_object(key=key)
            logger.info("Object deleted successfully", extra={"key": key})

        except ClientError as exc:
            logger.error("S3 deletion failed", extra={"key": key})

            if is_not_found(exc):
                raise NotFoundError(
                    message="File not found",
                    details={"key": key},
                ) from exc

            raise StorageFailureError(
                message=f"Unable to delete {self._label}",
                error_code=ERROR_CODE_IMAGE_DELETE_FAILED,
                details={"key": key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error deleting object")
            raise StorageFailureError(
                message=f"Unable to delete {self._label}",
                error_code=ERROR_CODE_IMAGE_DELETE_FAILED,
                details={"key": key},
            ) from exc

    def delete_by_prefix(self, user: str, image_id: str) -> int:
        """Delete every width-keyed object of one image.

        Lists all keys below the image prefix and removes them with batch
        deletes. Nothing listed means nothing to do, and no delete request
        is sent.

        Returns:
            Number of keys submitted for deletion
        """
        if not self._kind.supports_width:
            raise ValidationError(
                message=f"Prefix deletion is not supported for {self._kind.name} keys",
                details={"kind": self._kind.name},
            )

        # Trailing separator keeps image "abc" from matching image "abcdef"
        prefix = self.key_for(user, image_id) + KEY_SEPARATOR

        logger.debug("Listing objects for deletion", extra={"prefix": prefix})

        try:
            keys = self._s3.list_keys(prefix=prefix)

        except Exception as exc:
            logger.exception("Failed to list objects", extra={"prefix": prefix})
            raise StorageFailureError(
                message=f"Unable to delete {self._label}s",
                error_code=ERROR_CODE_IMAGE_LIST_FAILED,
                details={"prefix": prefix},
            ) from exc

        if not keys:
            logger.info("No objects to delete", extra={"prefix": prefix})
            return 0

        try:
            self._s3.delete_objects(keys=keys)

        except Exception as exc:
            logger.exception(
                "Batch deletion failed",
                extra={"prefix": prefix, "count": len(keys)},
            )
            raise StorageFailureError(
                message=f"Unable to delete {self._label}s",
                error_code=ERROR_CODE_IMAGE_DELETE_FAILED,
                details={"prefix": prefix, "count": len(keys)},
            ) from exc

        logger.info("Objects deleted successfully", extra={"prefix": prefix, "count": len(keys)})
        return len(keys)

    @property
    def _label(self) -> str:
        return "image variation" if self._kind is ObjectKind.IMAGE_VARIATION else "image"
