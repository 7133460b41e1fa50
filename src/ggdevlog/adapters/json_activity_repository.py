"""JSON-file backed activity counters."""

import threading
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from ggdevlog.adapters.json_files import read_json, write_json
from ggdevlog.services.activity import ActivityRepository


@dataclass
class JsonActivityRepository(ActivityRepository):
    """Keeps ``{"YYYY-MM-DD": count}`` in a single JSON file."""

    path: Path
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False)

    def load_counts(self) -> dict[str, int]:
        with self._lock:
            return self._read()

    def increment(self, day: date) -> int:
        key = day.isoformat()
        with self._lock:
            counts = self._read()
            counts[key] = counts.get(key, 0) + 1
            write_json(self.path, counts)
            return counts[key]

    def _read(self) -> dict[str, int]:
        data = read_json(self.path, {})
        if not isinstance(data, dict):
            return {}
        return {str(key): int(value) for key, value in data.items()}
