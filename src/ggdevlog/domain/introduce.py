"""Domain models for the self-introduction document."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IntroduceDocument:
    """Editor content of the introduction page and the images it embeds."""

    content: object = None
    images: list[object] = field(default_factory=list)

    def to_payload(self) -> dict[str, object]:
        return {"content": self.content, "images": list(self.images)}
