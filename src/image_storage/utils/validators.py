"""Input validation utilities."""

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from image_storage.models.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for error details.

    Removes internal fields like:
    - url
    - ctx
    - input
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "input"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        if "field required" in msg.lower():
            msg = "This field is required"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def validate_model(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Build a Pydantic model or raise the domain ValidationError.

    Args:
        model: Pydantic model class
        data: Input data to validate

    Returns:
        The validated model instance

    Raises:
        ValidationError: If the data does not satisfy the model
    """
    try:
        return model(**data)

    except PydanticValidationError as exc:
        raise ValidationError(
            message=f"Invalid {model.__name__} input",
            details={"errors": sanitize_validation_errors(list(exc.errors()))},
        ) from exc
