"""Image upload and deletion endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Body, Depends, File, Request, UploadFile

from ggdevlog.api.deps import require_admin
from ggdevlog.api.responses import success
from ggdevlog.errors import UploadError, UploadErrorKind

if TYPE_CHECKING:
    from ggdevlog.containers import AppContainer

router = APIRouter(prefix="/img", tags=["img"], dependencies=[Depends(require_admin)])


@router.post("")
async def upload_image(
    request: Request, img: Annotated[UploadFile | None, File()] = None
) -> dict[str, object]:
    """Store one image from the ``img`` multipart field."""
    container: AppContainer = request.app.state.container
    if img is None:
        raise UploadError(UploadErrorKind.INVALID_FILE, "No image file provided")
    try:
        data = await img.read()
        ref = await container.image_service.upload(data, img.filename)
    finally:
        # Releases the spooled temporary file on every path.
        await img.close()
    return success("Image uploaded", ref.to_payload())


@router.delete("")
async def delete_images(
    request: Request, names: Annotated[list[str], Body()]
) -> dict[str, object]:
    """Delete the listed images; the body is a JSON array of names."""
    container: AppContainer = request.app.state.container
    await container.image_service.delete(names)
    return success("Images deleted")
