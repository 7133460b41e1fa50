"""Image store backed by a Supabase Storage bucket."""

import asyncio
import logging
import mimetypes
from collections.abc import Sequence
from dataclasses import dataclass

import httpx
from supabase import Client, StorageException

from ggdevlog.domain.images import ImageRef
from ggdevlog.errors import UploadError, UploadErrorKind
from ggdevlog.services.images import (
    ImageStore,
    make_image_name,
    raise_for_failed_deletes,
)

logger = logging.getLogger(__name__)


@dataclass
class SupabaseImageStore(ImageStore):
    """Stores images as objects in a public Supabase bucket."""

    client: Client
    bucket: str

    async def upload(self, data: bytes, original_file_name: str) -> ImageRef:
        """Upload the image and return its public URL."""
        name = make_image_name(original_file_name)
        content_type = mimetypes.guess_type(name)[0] or "application/octet-stream"
        bucket = self.client.storage.from_(self.bucket)
        try:
            await asyncio.to_thread(
                bucket.upload, name, data, {"content-type": content_type}
            )
            url = bucket.get_public_url(name)
        except (StorageException, httpx.HTTPError) as exc:
            logger.exception("Supabase upload failed", extra={"image_name": name})
            raise UploadError(UploadErrorKind.BACKEND_UNAVAILABLE) from exc
        return ImageRef(name=name, url=url)

    async def delete(self, names: Sequence[str]) -> None:
        """Remove each object on its own so one failure does not hide others."""
        bucket = self.client.storage.from_(self.bucket)
        failed: list[str] = []
        for name in names:
            try:
                await asyncio.to_thread(bucket.remove, [name])
            except (StorageException, httpx.HTTPError):
                logger.exception("Supabase delete failed", extra={"image_name": name})
                failed.append(name)
        raise_for_failed_deletes(names, failed)

    async def close(self) -> None:
        """The Supabase client is shared with the record store; nothing to close."""
