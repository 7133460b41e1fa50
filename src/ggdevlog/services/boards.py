"""Board management."""

from dataclasses import dataclass
from typing import Protocol

from ggdevlog.domain.boards import Board


class BoardRepository(Protocol):
    """Persistence interface for boards."""

    def list_boards(self) -> list[Board]:
        """Return all boards ordered by name."""

    def create_board(self, name: str) -> None:
        """Insert a board."""

    def rename_board(self, board_id: int, name: str) -> None:
        """Rename a board."""

    def delete_board(self, board_id: int) -> None:
        """Delete a board."""


@dataclass
class BoardService:
    """Application service for boards."""

    repository: BoardRepository

    def list_boards(self) -> list[Board]:
        return self.repository.list_boards()

    def create_board(self, name: str) -> None:
        self.repository.create_board(name.strip())

    def rename_board(self, board_id: int, name: str) -> None:
        self.repository.rename_board(board_id, name.strip())

    def delete_board(self, board_id: int) -> None:
        self.repository.delete_board(board_id)
