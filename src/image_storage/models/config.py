"""Connection settings for the S3 storage adapters."""

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from image_storage.utils.constants import (
    ENV_AWS_ACCESS_KEY_ID,
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
    ENV_AWS_SECRET_ACCESS_KEY,
    ENV_IMAGE_S3_BUCKET_NAME,
)


class S3StorageConfig(BaseModel):
    """Bucket and client settings used to build the boto3 S3 client."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    bucket_name: StrictStr = Field(..., min_length=1, description="Bucket holding the objects")
    region_name: StrictStr | None = Field(None, description="AWS region of the bucket")
    endpoint_url: StrictStr | None = Field(
        None, description="Custom endpoint for S3-compatible stores (LocalStack, MinIO)"
    )
    access_key_id: StrictStr | None = Field(None, description="Access key for the bucket")
    secret_access_key: StrictStr | None = Field(None, description="Secret key for the bucket")
    client_params: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra keyword arguments passed to boto3.client",
    )

    @classmethod
    def from_env(cls) -> "S3StorageConfig":
        """Create settings from environment variables."""
        bucket_name = os.getenv(ENV_IMAGE_S3_BUCKET_NAME)
        if not bucket_name:
            raise RuntimeError(f"{ENV_IMAGE_S3_BUCKET_NAME} environment variable is not set")

        return cls(
            bucket_name=bucket_name,
            region_name=os.getenv(ENV_AWS_REGION),
            endpoint_url=os.getenv(ENV_AWS_ENDPOINT_URL),
            access_key_id=os.getenv(ENV_AWS_ACCESS_KEY_ID),
            secret_access_key=os.getenv(ENV_AWS_SECRET_ACCESS_KEY),
        )

    def client_kwargs(self) -> dict[str, Any]:
        """Return keyword arguments for ``boto3.client("s3", ...)``.

        Unset values are left out so boto3 falls back to its own
        credential and region resolution. ``client_params`` wins over
        the named settings.
        """
        kwargs: dict[str, Any] = {
            "region_name": self.region_name,
            "endpoint_url": self.endpoint_url,
            "aws_access_key_id": self.access_key_id,
            "aws_secret_access_key": self.secret_access_key,
        }
        kwargs = {name: value for name, value in kwargs.items() if value}
        kwargs.update(self.client_params)
        return kwargs
