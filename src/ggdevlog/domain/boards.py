"""Domain models for boards."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Board:
    """A category that groups posts."""

    id: int
    name: str
