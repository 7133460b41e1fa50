"""Post endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from ggdevlog.api.deps import require_admin
from ggdevlog.api.models import PostPayload
from ggdevlog.api.responses import success

if TYPE_CHECKING:
    from ggdevlog.containers import AppContainer

router = APIRouter(prefix="/post", tags=["post"])


@router.get("")
async def list_posts(
    request: Request,
    board_name: str | None = None,
    page: int | None = None,
    limit: int | None = None,
) -> dict[str, object]:
    """Return a page of posts, newest first."""
    container: AppContainer = request.app.state.container
    result = container.post_service.list_posts(board_name, page, limit)
    return success(
        "Post list loaded",
        {
            "board_name": result.board_name,
            "page": result.page,
            "limit": result.limit,
            "total": result.total,
            "totalPage": result.total_pages,
            "data": result.rows,
        },
    )


@router.get("/{post_id}")
async def get_post(post_id: int, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return success("Post loaded", container.post_service.get_post(post_id))


@router.post("", dependencies=[Depends(require_admin)])
async def create_post(payload: PostPayload, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    post_id = container.post_service.create_post(payload.model_dump())
    return success("Post created", {"post_id": post_id})


@router.put("/{post_id}", dependencies=[Depends(require_admin)])
async def update_post(
    post_id: int, payload: PostPayload, request: Request
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    updated_id = container.post_service.update_post(post_id, payload.model_dump())
    return success("Post updated", {"post_id": updated_id})


@router.delete("/{post_id}", dependencies=[Depends(require_admin)])
async def delete_post(post_id: int, request: Request) -> dict[str, object]:
    """Delete a post together with its thumbnail and body images."""
    container: AppContainer = request.app.state.container
    board_name = await container.post_service.delete_post_cascade(post_id)
    return success("Post deleted", {"board_name": board_name})
