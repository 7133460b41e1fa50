"""Image storage services."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import PurePath
from typing import Protocol

from ggdevlog.domain.images import ImageRef
from ggdevlog.errors import DeleteError, DeleteErrorKind, UploadError, UploadErrorKind

logger = logging.getLogger(__name__)


class ImageStore(Protocol):
    """Interface for a backend that keeps image blobs."""

    async def upload(self, data: bytes, original_file_name: str) -> ImageRef:
        """Store the bytes and return the stored name and public URL."""

    async def delete(self, names: Sequence[str]) -> None:
        """Delete every named image, raising ``DeleteError`` on any failure."""

    async def close(self) -> None:
        """Release backend resources."""


def make_image_name(original_file_name: str, now: datetime | None = None) -> str:
    """Return ``img_<epoch millis><ext>`` keeping the original extension."""
    moment = now or datetime.now(tz=UTC)
    suffix = PurePath(original_file_name).suffix.lower()
    return f"img_{int(moment.timestamp() * 1000)}{suffix}"


def raise_for_failed_deletes(names: Sequence[str], failed: Sequence[str]) -> None:
    """Raise the aggregate ``DeleteError`` for a batch with failed names."""
    if not failed:
        return
    kind = (
        DeleteErrorKind.BACKEND_UNAVAILABLE
        if len(failed) == len(names)
        else DeleteErrorKind.PARTIAL_FAILURE
    )
    raise DeleteError(kind, failed_names=failed)


@dataclass
class ImageService:
    """Application service in front of the configured image store."""

    store: ImageStore

    async def upload(self, data: bytes, original_file_name: str | None) -> ImageRef:
        """Validate and store an uploaded image."""
        if not data or not original_file_name:
            raise UploadError(UploadErrorKind.INVALID_FILE, "No image file provided")
        ref = await self.store.upload(data, original_file_name)
        logger.info("Image uploaded", extra={"image_name": ref.name})
        return ref

    async def delete(self, names: Sequence[str]) -> None:
        """Delete the named images; an empty list is a no-op."""
        unique = list(dict.fromkeys(name for name in names if name))
        if not unique:
            return
        try:
            await self.store.delete(unique)
        except DeleteError as exc:
            logger.warning(
                "Image deletion failed",
                extra={"failed_names": exc.failed_names, "kind": exc.kind.value},
            )
            raise
        logger.info("Images deleted", extra={"image_names": unique})
