"""Post management and the post/image cascade."""

import logging
from dataclasses import dataclass
from typing import Protocol

from ggdevlog.domain.posts import PostImages, PostPage
from ggdevlog.errors import NotFoundError
from ggdevlog.services.images import ImageService

logger = logging.getLogger(__name__)

ALL_BOARDS = "all"
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5


class PostRepository(Protocol):
    """Persistence interface for posts."""

    def list_posts(
        self, board_name: str | None, offset: int, limit: int
    ) -> tuple[list[dict[str, object]], int]:
        """Return one page of post summaries and the total row count."""

    def get_post(self, post_id: int) -> dict[str, object] | None:
        """Return post detail, if present."""

    def create_post(self, payload: dict[str, object]) -> int:
        """Insert a post and return its id."""

    def update_post(self, post_id: int, payload: dict[str, object]) -> int | None:
        """Update a post and return its id, or None when it does not exist."""

    def get_post_images(self, post_id: int) -> PostImages | None:
        """Return the board name and image references of a post."""

    def delete_post(self, post_id: int) -> None:
        """Delete a post row."""


@dataclass
class PostService:
    """Application service for posts."""

    repository: PostRepository
    image_service: ImageService

    def list_posts(
        self, board_name: str | None, page: int | None, limit: int | None
    ) -> PostPage:
        """Return a page of posts, optionally filtered by board name."""
        resolved_board = board_name or ALL_BOARDS
        resolved_page = page if page and page > 0 else DEFAULT_PAGE
        resolved_limit = limit if limit and limit > 0 else DEFAULT_LIMIT
        rows, total = self.repository.list_posts(
            None if resolved_board == ALL_BOARDS else resolved_board,
            offset=(resolved_page - 1) * resolved_limit,
            limit=resolved_limit,
        )
        return PostPage(
            board_name=resolved_board,
            page=resolved_page,
            limit=resolved_limit,
            total=total,
            rows=rows,
        )

    def get_post(self, post_id: int) -> dict[str, object]:
        post = self.repository.get_post(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def create_post(self, payload: dict[str, object]) -> int:
        return self.repository.create_post(payload)

    def update_post(self, post_id: int, payload: dict[str, object]) -> int:
        updated = self.repository.update_post(post_id, payload)
        if updated is None:
            raise NotFoundError("Post not found")
        return updated

    async def delete_post_cascade(self, post_id: int) -> str | None:
        """Delete a post after deleting every image it references.

        Image deletion failures abort the cascade with ``DeleteError`` and
        leave the post in place, so its references stay visible for a retry.
        Returns the post's board name.
        """
        post = self.repository.get_post_images(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        names = post.image_names()
        if names:
            await self.image_service.delete(names)
        self.repository.delete_post(post_id)
        logger.info(
            "Post deleted", extra={"post_id": post_id, "image_count": len(names)}
        )
        return post.board_name
