"""Request payload models."""

from typing import Any

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Admin login request."""

    pw: str = ""


class BoardPayload(BaseModel):
    """Board create/rename request."""

    name: str = Field(min_length=1)


class PostPayload(BaseModel):
    """Post create/update request.

    Image references are stored as sent: plain names or
    ``{img_name, img_url}`` objects, and thumbnails saved by older editors
    may still use ``image_name``.
    """

    board_id: int
    title: str
    thumbnail: dict[str, Any] | None = None
    description: str = ""
    content: dict[str, Any] | None = None
    images: list[str | dict[str, Any]] = Field(default_factory=list)


class IntroducePayload(BaseModel):
    """Introduction document replacement."""

    content: Any = None
    images: list[Any] = Field(default_factory=list)
