from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from .state import TicketStatus

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True, slots=True)
class Ticket:
    """Immutable snapshot of a ticket held by the store."""

    id: UUID
    title: str
    description: str
    status: TicketStatus
    rating: int | None = None

    @property
    def is_rated(self) -> bool:
        return self.rating is not None


def validate_rating(value: int) -> int:
    """Return ``value`` if it is an integer star count in ``[MIN_RATING, MAX_RATING]``."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Rating must be an integer, got {value!r}")
    if not MIN_RATING <= value <= MAX_RATING:
        raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {value}")
    return value
