"""Introduction page endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from ggdevlog.api.deps import require_admin
from ggdevlog.api.models import IntroducePayload
from ggdevlog.api.responses import success

if TYPE_CHECKING:
    from ggdevlog.containers import AppContainer

router = APIRouter(prefix="/introduce", tags=["introduce"])


@router.get("")
async def get_introduce(request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    document = container.introduce_service.get()
    return success("Introduction loaded", document.to_payload())


@router.put("", dependencies=[Depends(require_admin)])
async def replace_introduce(
    payload: IntroducePayload, request: Request
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    document = container.introduce_service.replace(payload.content, payload.images)
    return success("Introduction updated", document.to_payload())
