"""JSON-file backed introduction document."""

from dataclasses import dataclass
from pathlib import Path

from ggdevlog.adapters.json_files import read_json, write_json
from ggdevlog.domain.introduce import IntroduceDocument
from ggdevlog.services.introduce import IntroduceRepository


@dataclass
class JsonIntroduceRepository(IntroduceRepository):
    """Stores the introduction page as ``{"content": ..., "images": [...]}``."""

    path: Path

    def load(self) -> IntroduceDocument:
        data = read_json(self.path, IntroduceDocument().to_payload())
        if not isinstance(data, dict):
            return IntroduceDocument()
        return IntroduceDocument(
            content=data.get("content"), images=list(data.get("images") or [])
        )

    def save(self, document: IntroduceDocument) -> None:
        write_json(self.path, document.to_payload())
