"""Cache entry model for the in-memory fetch cache."""

from typing import Any

from pydantic import BaseModel


class CacheEntry(BaseModel):
    """A response payload paired with the time it was retrieved."""

    data: Any
    timestamp: float

    def age(self, now: float) -> float:
        """Seconds since this entry was stored."""
        return now - self.timestamp

    def is_fresh(self, now: float, duration: float) -> bool:
        """Check if the entry is still inside the freshness window."""
        return self.age(now) < duration
