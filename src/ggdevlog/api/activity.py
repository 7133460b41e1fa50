"""Visit activity endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from ggdevlog.api.deps import require_admin
from ggdevlog.api.responses import success

if TYPE_CHECKING:
    from ggdevlog.containers import AppContainer

router = APIRouter(prefix="/activity", tags=["activity"])


@router.get("")
async def get_activity(request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return success("Activity loaded", container.activity_service.get_counts())


@router.post("", dependencies=[Depends(require_admin)])
async def record_activity(request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    count = container.activity_service.record_visit()
    return success("Activity recorded", {"count": count})
