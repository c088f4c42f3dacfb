"""Thin adapter for interacting with Amazon S3 and S3-compatible stores."""

from collections.abc import Iterator, Mapping, Sequence
from typing import Any, Protocol

import boto3
from botocore.exceptions import BotoCoreError

from image_storage.models.config import S3StorageConfig
from image_storage.models.errors import StorageFailureError
from image_storage.utils.constants import (
    DEFAULT_CONTENT_TYPE,
    ERROR_CODE_S3_CLIENT_CREATION_FAILED,
    S3_DELETE_BATCH_SIZE,
)


class _Paginator(Protocol):
    def paginate(self, **kwargs: Any) -> Iterator[Mapping[str, Any]]: ...


class _Boto3S3Client(Protocol):
    """Internal typing for boto3 S3 client (AWS-facing only)."""

    def put_object(
        self,
        *,
        Bucket: str,
        Key: str,
        Body: bytes,
        ContentType: str,
    ) -> Any: ...

    def get_object(self, *, Bucket: str, Key: str) -> Mapping[str, Any]: ...

    def head_object(self, *, Bucket: str, Key: str) -> Mapping[str, Any]: ...

    def head_bucket(self, *, Bucket: str) -> Mapping[str, Any]: ...

    def delete_object(self, *, Bucket: str, Key: str) -> Any: ...

    def delete_objects(self, *, Bucket: str, Delete: Mapping[str, Any]) -> Mapping[str, Any]: ...

    def get_paginator(self, operation_name: str) -> _Paginator: ...


class S3AdapterProtocol(Protocol):
    """Minimal S3 adapter protocol (storage-facing)."""

    def put_object(self, *, key: str, body: bytes) -> None: ...

    def get_object(self, *, key: str) -> Mapping[str, Any]: ...

    def head_object(self, *, key: str) -> Mapping[str, Any]: ...

    def head_bucket(self) -> Mapping[str, Any]: ...

    def delete_object(self, *, key: str) -> None: ...

    def delete_objects(self, *, keys: Sequence[str]) -> None: ...

    def list_keys(self, *, prefix: str) -> list[str]: ...


class S3Adapter:
    """Low-level S3 operations (mechanical, no error handling).

    This adapter:
    - Wraps a boto3 S3 client bound to a single bucket
    - Does NOT handle errors (lets them bubble up)
    - Storage implementations catch and translate errors

    The client can be injected, which is how S3-compatible stores with
    custom session setup are plugged in.
    """

    def __init__(
        self,
        config: S3StorageConfig | None = None,
        client: _Boto3S3Client | None = None,
    ) -> None:
        """Create the S3 client from configuration (environment by default)."""
        self._config = config or S3StorageConfig.from_env()
        self._bucket = self._config.bucket_name
        self._client: _Boto3S3Client = client or self._create_client(self._config)

    @property
    def bucket(self) -> str:
        return self._bucket

    @staticmethod
    def _create_client(config: S3StorageConfig) -> _Boto3S3Client:
        try:
            client: _Boto3S3Client = boto3.client("s3", **config.client_kwargs())
        except (BotoCoreError, ValueError, TypeError) as exc:
            raise StorageFailureError(
                message="Unable to create S3 client",
                error_code=ERROR_CODE_S3_CLIENT_CREATION_FAILED,
                details={"bucket": config.bucket_name},
            ) from exc
        return client

    def put_object(self, *, key: str, body: bytes) -> None:
        """Store object in S3, overwriting any existing object.
        Raises boto3 exceptions - caught by storage implementation.
        """
        self._client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=body,
            ContentType=DEFAULT_CONTENT_TYPE,
        )

    def get_object(self, *, key: str) -> Mapping[str, Any]:
        """Fetch object from S3.
        Raises boto3 exceptions - caught by storage implementation.
        """
        return self._client.get_object(Bucket=self._bucket, Key=key)

    def head_object(self, *, key: str) -> Mapping[str, Any]:
        """Fetch object metadata from S3.
        Raises boto3 exceptions - caught by storage implementation.
        """
        return self._client.head_object(Bucket=self._bucket, Key=key)

    def head_bucket(self) -> Mapping[str, Any]:
        """Probe the bucket.
        Raises boto3 exceptions - caught by storage implementation.
        """
        return self._client.head_bucket(Bucket=self._bucket)

    def delete_object(self, *, key: str) -> None:
        """Delete object from S3.
        Raises boto3 exceptions - caught by storage implementation.
        """
        self._client.delete_object(Bucket=self._bucket, Key=key)

    def delete_objects(self, *, keys: Sequence[str]) -> None:
        """Delete objects from S3 in batches of at most 1000 keys.

        Per-key results reported by S3 are not inspected.
        Raises boto3 exceptions - caught by storage implementation.
        """
        for start in range(0, len(keys), S3_DELETE_BATCH_SIZE):
            batch = keys[start : start + S3_DELETE_BATCH_SIZE]
            self._client.delete_objects(
                Bucket=self._bucket,
                Delete={
                    "Objects": [{"Key": key} for key in batch],
                    "Quiet": True,
                },
            )

    def list_keys(self, *, prefix: str) -> list[str]:
        """Return every key under ``prefix``, following all listing pages.
        Raises boto3 exceptions - caught by storage implementation.
        """
        keys: list[str] = []
        paginator = self._client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
            keys.extend(obj["Key"] for obj in page.get("Contents", []))
        return keys
