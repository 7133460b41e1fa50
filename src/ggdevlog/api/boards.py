"""Board endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from ggdevlog.api.deps import require_admin
from ggdevlog.api.models import BoardPayload
from ggdevlog.api.responses import success

if TYPE_CHECKING:
    from ggdevlog.containers import AppContainer

router = APIRouter(prefix="/board", tags=["board"])


@router.get("")
async def list_boards(request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    boards = container.board_service.list_boards()
    return success(
        "Board list loaded",
        [{"id": board.id, "name": board.name} for board in boards],
    )


@router.post("", dependencies=[Depends(require_admin)])
async def create_board(payload: BoardPayload, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    container.board_service.create_board(payload.name)
    return success("Board created")


@router.put("/{board_id}", dependencies=[Depends(require_admin)])
async def rename_board(
    board_id: int, payload: BoardPayload, request: Request
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    container.board_service.rename_board(board_id, payload.name)
    return success("Board updated")


@router.delete("/{board_id}", dependencies=[Depends(require_admin)])
async def delete_board(board_id: int, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    container.board_service.delete_board(board_id)
    return success("Board deleted")
