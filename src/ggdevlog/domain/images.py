"""Domain models for stored images."""

from collections.abc import Mapping
from dataclasses import dataclass

# Thumbnails written by older frontends used "image_name" instead of "img_name".
_NAME_KEYS = ("img_name", "image_name", "name")
_URL_KEYS = ("img_url", "image_url", "url")


@dataclass(frozen=True)
class ImageRef:
    """A stored image name plus its public URL."""

    name: str
    url: str

    @classmethod
    def from_payload(cls, payload: object) -> "ImageRef | None":
        """Build a reference from a stored thumbnail or image entry."""
        if isinstance(payload, str):
            return cls(name=payload, url="") if payload else None
        if not isinstance(payload, Mapping):
            return None
        name = _first_value(payload, _NAME_KEYS)
        if not name:
            return None
        return cls(name=name, url=_first_value(payload, _URL_KEYS) or "")

    def to_payload(self) -> dict[str, str]:
        return {"img_name": self.name, "img_url": self.url}


def _first_value(payload: Mapping, keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
    return None
