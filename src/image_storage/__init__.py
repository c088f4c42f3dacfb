"""Image Object Storage Package."""

__version__ = "1.0.0"
__description__ = (
    "S3-backed storage adapters for images and pre-resized image variations"
)

__all__ = ["infrastructure", "models", "repositories", "utils"]
