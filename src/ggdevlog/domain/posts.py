"""Domain models for blog posts."""

from dataclasses import dataclass, field

from ggdevlog.domain.images import ImageRef


@dataclass(frozen=True)
class PostImages:
    """The parts of a post needed to clean up its stored images."""

    id: int
    board_name: str | None
    thumbnail: ImageRef | None
    images: list[ImageRef] = field(default_factory=list)

    def image_names(self) -> list[str]:
        """Return every referenced image name, thumbnail first, without repeats."""
        refs = [self.thumbnail, *self.images] if self.thumbnail else self.images
        names: list[str] = []
        for ref in refs:
            if ref.name not in names:
                names.append(ref.name)
        return names


@dataclass(frozen=True)
class PostPage:
    """One page of the post listing."""

    board_name: str
    page: int
    limit: int
    total: int
    rows: list[dict[str, object]]

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.limit) if self.limit else 0
