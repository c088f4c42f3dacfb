"""Deterministic object key derivation.

Keys spread objects across directory-like partitions using the first
characters of the user and image identifiers::

    0/4/2/42/a/b/c/abcdef                        image
    imageVariation/0/4/2/42/a/b/c/abcdef/100     variation, width 100

The width-less variation key is a strict prefix of every variation key of
the same image, which is what prefix deletion relies on.
"""

from image_storage.models.errors import ValidationError
from image_storage.models.keys import ObjectKeyParts, ObjectKind
from image_storage.utils.constants import KEY_SEPARATOR, SHARD_DEPTH, USER_PAD_CHAR
from image_storage.utils.validators import validate_model


def _shard(value: str) -> list[str]:
    return list(value[:SHARD_DEPTH])


def build_object_key(
    kind: ObjectKind,
    user: str,
    image_id: str,
    width: int | None = None,
) -> str:
    """Return the object key for the given identifying fields.

    Args:
        kind: Entity kind the key addresses
        user: Owner user identifier
        image_id: Image identifier (at least three characters)
        width: Variation width, only allowed for image variations

    Returns:
        The ``/``-joined object key

    Raises:
        ValidationError: If any identifying field is invalid
    """
    if width is not None and not kind.supports_width:
        raise ValidationError(
            message=f"Width is not supported for {kind.name} keys",
            details={"width": width},
        )

    parts = validate_model(
        ObjectKeyParts,
        {"user": user, "image_id": image_id, "width": width},
    )

    segments: list[str] = []
    if kind.key_prefix is not None:
        segments.append(kind.key_prefix)

    segments.extend(_shard(parts.user.rjust(SHARD_DEPTH, USER_PAD_CHAR)))
    segments.append(parts.user)
    segments.extend(_shard(parts.image_id))
    segments.append(parts.image_id)

    if parts.width is not None:
        segments.append(str(parts.width))

    return KEY_SEPARATOR.join(segments)
