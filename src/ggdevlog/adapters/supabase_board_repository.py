"""Supabase-backed board repository."""

from dataclasses import dataclass

from supabase import Client, PostgrestAPIError

from ggdevlog.domain.boards import Board
from ggdevlog.errors import StoreError
from ggdevlog.services.boards import BoardRepository


@dataclass
class SupabaseBoardRepository(BoardRepository):
    """Supabase implementation for boards."""

    client: Client

    def list_boards(self) -> list[Board]:
        """Return all boards ordered by name."""
        try:
            response = (
                self.client.table("board")
                .select("id, name")
                .order("name", desc=False)
                .execute()
            )
        except PostgrestAPIError as exc:
            raise StoreError() from exc
        return [Board(id=row["id"], name=row["name"]) for row in response.data or []]

    def create_board(self, name: str) -> None:
        """Insert a board row."""
        try:
            self.client.table("board").insert({"name": name}).execute()
        except PostgrestAPIError as exc:
            raise StoreError() from exc

    def rename_board(self, board_id: int, name: str) -> None:
        """Update a board's name."""
        try:
            self.client.table("board").update({"name": name}).eq(
                "id", board_id
            ).execute()
        except PostgrestAPIError as exc:
            raise StoreError() from exc

    def delete_board(self, board_id: int) -> None:
        """Delete a board row."""
        try:
            self.client.table("board").delete().eq("id", board_id).execute()
        except PostgrestAPIError as exc:
            raise StoreError() from exc
