"""Supabase-backed post repository."""

from dataclasses import dataclass

from supabase import Client, PostgrestAPIError

from ggdevlog.domain.images import ImageRef
from ggdevlog.domain.posts import PostImages
from ggdevlog.errors import StoreError
from ggdevlog.services.posts import PostRepository

_LIST_COLUMNS = (
    "id, board:board_id!inner(id, name), thumbnail, title, description, created_at"
)
_DETAIL_COLUMNS = (
    "id, board:board_id (id, name), title, description, thumbnail, content, "
    "images, created_at, updated_at"
)
_IMAGE_COLUMNS = "id, board:board_id (id, name), thumbnail, images"


@dataclass
class SupabasePostRepository(PostRepository):
    """Supabase implementation for posts."""

    client: Client

    def list_posts(
        self, board_name: str | None, offset: int, limit: int
    ) -> tuple[list[dict[str, object]], int]:
        """Return a page of posts, newest first, and the total count."""
        query = (
            self.client.table("post")
            .select(_LIST_COLUMNS, count="exact")
            .order("created_at", desc=True)
        )
        if board_name is not None:
            query = query.eq("board.name", board_name)
        try:
            response = query.range(offset, offset + limit - 1).execute()
        except PostgrestAPIError as exc:
            raise StoreError() from exc
        return response.data or [], response.count or 0

    def get_post(self, post_id: int) -> dict[str, object] | None:
        """Return post detail, if present."""
        try:
            response = (
                self.client.table("post")
                .select(_DETAIL_COLUMNS)
                .eq("id", post_id)
                .limit(1)
                .execute()
            )
        except PostgrestAPIError as exc:
            raise StoreError() from exc
        if not response.data:
            return None
        return response.data[0]

    def create_post(self, payload: dict[str, object]) -> int:
        """Insert a post row and return its id."""
        try:
            response = self.client.table("post").insert(payload).execute()
        except PostgrestAPIError as exc:
            raise StoreError() from exc
        if not response.data:
            raise StoreError("Failed to create post")
        return response.data[0]["id"]

    def update_post(self, post_id: int, payload: dict[str, object]) -> int | None:
        """Update a post row and return its id, or None when absent."""
        try:
            response = (
                self.client.table("post").update(payload).eq("id", post_id).execute()
            )
        except PostgrestAPIError as exc:
            raise StoreError() from exc
        if not response.data:
            return None
        return response.data[0]["id"]

    def get_post_images(self, post_id: int) -> PostImages | None:
        """Return the board name and image references of a post."""
        try:
            response = (
                self.client.table("post")
                .select(_IMAGE_COLUMNS)
                .eq("id", post_id)
                .limit(1)
                .execute()
            )
        except PostgrestAPIError as exc:
            raise StoreError() from exc
        if not response.data:
            return None
        row = response.data[0]
        board = row.get("board") or {}
        images = [
            ref
            for ref in (ImageRef.from_payload(item) for item in row.get("images") or [])
            if ref is not None
        ]
        return PostImages(
            id=row["id"],
            board_name=board.get("name") if isinstance(board, dict) else None,
            thumbnail=ImageRef.from_payload(row.get("thumbnail")),
            images=images,
        )

    def delete_post(self, post_id: int) -> None:
        """Delete a post row."""
        try:
            self.client.table("post").delete().eq("id", post_id).execute()
        except PostgrestAPIError as exc:
            raise StoreError() from exc
