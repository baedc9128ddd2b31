"""Image storage adapters."""

from apps.cleanup.infrastructure.storage.image_normalizer import (
    ImageNormalizer,
    InvalidImageError,
)
from apps.cleanup.infrastructure.storage.local_store import LocalImageStore
from apps.cleanup.infrastructure.storage.s3_store import S3ImageStore

__all__ = ["ImageNormalizer", "InvalidImageError", "LocalImageStore", "S3ImageStore"]
