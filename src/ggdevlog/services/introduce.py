"""Self-introduction document service."""

from dataclasses import dataclass
from typing import Protocol

from ggdevlog.domain.introduce import IntroduceDocument


class IntroduceRepository(Protocol):
    """Persistence interface for the introduction document."""

    def load(self) -> IntroduceDocument:
        """Return the stored document, creating an empty one if missing."""

    def save(self, document: IntroduceDocument) -> None:
        """Replace the stored document."""


@dataclass
class IntroduceService:
    """Application service for the introduction page."""

    repository: IntroduceRepository

    def get(self) -> IntroduceDocument:
        return self.repository.load()

    def replace(self, content: object, images: list[object]) -> IntroduceDocument:
        document = IntroduceDocument(content=content, images=list(images))
        self.repository.save(document)
        return document
