"""Global constants used throughout the storage package.

This module centralizes error codes, key layout values and environment
variable names so they are not hardcoded across modules.
"""

from http import HTTPStatus
from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"

# Storage Errors
ERROR_CODE_STORAGE_FAILURE = "STORAGE_FAILURE"
ERROR_CODE_IMAGE_STORE_FAILED = "IMAGE_STORE_FAILED"
ERROR_CODE_IMAGE_FETCH_FAILED = "IMAGE_FETCH_FAILED"
ERROR_CODE_IMAGE_METADATA_FAILED = "IMAGE_METADATA_FAILED"
ERROR_CODE_IMAGE_DELETE_FAILED = "IMAGE_DELETE_FAILED"
ERROR_CODE_IMAGE_LIST_FAILED = "IMAGE_LIST_FAILED"
ERROR_CODE_S3_CLIENT_CREATION_FAILED = "S3_CLIENT_CREATION_FAILED"

# ============================================================================
# Status Codes
# ============================================================================

STATUS_CODE_VALIDATION_FAILED: Final[int] = HTTPStatus.BAD_REQUEST.value
STATUS_CODE_NOT_FOUND: Final[int] = HTTPStatus.NOT_FOUND.value
STATUS_CODE_STORAGE_FAILURE: Final[int] = HTTPStatus.INTERNAL_SERVER_ERROR.value

# Backend error codes that mean "object does not exist"
S3_NOT_FOUND_ERROR_CODES: Final[frozenset[str]] = frozenset({"NoSuchKey", "NotFound", "404"})

# ============================================================================
# Object Key Layout
# ============================================================================

KEY_SEPARATOR: Final[str] = "/"
IMAGE_VARIATION_KEY_PREFIX: Final[str] = "imageVariation"
SHARD_DEPTH: Final[int] = 3
USER_PAD_CHAR: Final[str] = "0"

# ============================================================================
# S3 Limits
# ============================================================================

S3_DELETE_BATCH_SIZE = 1000  # DeleteObjects accepts at most 1000 keys
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_AWS_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
ENV_AWS_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
ENV_IMAGE_S3_BUCKET_NAME = "IMAGE_S3_BUCKET_NAME"
