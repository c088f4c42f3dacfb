"""Models describing how stored objects are addressed."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from image_storage.utils.constants import (
    IMAGE_VARIATION_KEY_PREFIX,
    KEY_SEPARATOR,
    SHARD_DEPTH,
)


class ObjectKind(Enum):
    """Kind of entity stored in the bucket.

    The value is the leading key segment, or ``None`` when keys for the
    kind start directly with the user shard.
    """

    IMAGE = None
    IMAGE_VARIATION = IMAGE_VARIATION_KEY_PREFIX

    @property
    def key_prefix(self) -> str | None:
        return self.value

    @property
    def supports_width(self) -> bool:
        return self is ObjectKind.IMAGE_VARIATION


class ObjectKeyParts(BaseModel):
    """Validated identifying fields of a stored object."""

    model_config = ConfigDict(frozen=True)

    user: StrictStr = Field(..., min_length=1, description="Owner user identifier")
    image_id: StrictStr = Field(
        ...,
        min_length=SHARD_DEPTH,
        description="Image identifier, long enough to derive the shard prefix",
    )
    width: StrictInt | None = Field(None, gt=0, description="Variation width in pixels")

    @field_validator("user", "image_id")
    @classmethod
    def no_separator(cls, value: str) -> str:
        if KEY_SEPARATOR in value:
            raise ValueError(f"must not contain '{KEY_SEPARATOR}'")
        return value
