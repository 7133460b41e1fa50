"""Daily visit activity counters."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol


class ActivityRepository(Protocol):
    """Persistence interface for per-day counters."""

    def load_counts(self) -> dict[str, int]:
        """Return counts keyed by ISO date."""

    def increment(self, day: date) -> int:
        """Atomically add one to the day's counter and return the new value."""


def _today() -> date:
    return datetime.now(tz=UTC).date()


@dataclass
class ActivityService:
    """Application service for visit activity."""

    repository: ActivityRepository
    today: Callable[[], date] = _today

    def get_counts(self) -> dict[str, int]:
        return self.repository.load_counts()

    def record_visit(self) -> int:
        """Count one visit for the current UTC day."""
        return self.repository.increment(self.today())
