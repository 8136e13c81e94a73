from __future__ import annotations

from enum import Enum


class TicketStatus(str, Enum):
    """Supported states for a ticket's lifecycle."""

    CREATED = "created"
    UNDER_ASSISTANCE = "under_assistance"
    COMPLETED = "completed"


_LABELS: dict[TicketStatus, str] = {
    TicketStatus.CREATED: "Created",
    TicketStatus.UNDER_ASSISTANCE: "Under Assistance",
    TicketStatus.COMPLETED: "Completed",
}

_COLORS: dict[TicketStatus, str] = {
    TicketStatus.CREATED: "#2196F3",
    TicketStatus.UNDER_ASSISTANCE: "#FF9800",
    TicketStatus.COMPLETED: "#4CAF50",
}


def initial_status() -> TicketStatus:
    return TicketStatus.CREATED


def accepts_rating(status: TicketStatus) -> bool:
    """Only completed tickets may carry a rating."""

    return status is TicketStatus.COMPLETED


def status_label(status: TicketStatus) -> str:
    return _LABELS[status]


def status_color(status: TicketStatus) -> str:
    return _COLORS[status]
