from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable
from uuid import UUID

from ticketboard.tickets.models import MAX_RATING, Ticket
from ticketboard.tickets.state import accepts_rating, status_color, status_label

FILLED_STAR = "★"
EMPTY_STAR = "☆"


@dataclass(frozen=True, slots=True)
class TicketRow:
    """Display-ready projection of a ticket."""

    id: UUID
    title: str
    description: str
    status_label: str
    status_color: str
    show_rating: bool
    stars: str


def show_rating(ticket: Ticket) -> bool:
    return accepts_rating(ticket.status)


def render_stars(rating: int | None) -> str:
    """Render a five position star strip; an absent rating shows no filled stars."""

    filled = max(0, min(rating or 0, MAX_RATING))
    return FILLED_STAR * filled + EMPTY_STAR * (MAX_RATING - filled)


def build_row(ticket: Ticket) -> TicketRow:
    visible = show_rating(ticket)
    return TicketRow(
        id=ticket.id,
        title=ticket.title,
        description=ticket.description,
        status_label=status_label(ticket.status),
        status_color=status_color(ticket.status),
        show_rating=visible,
        stars=render_stars(ticket.rating) if visible else "",
    )


def build_rows(tickets: Iterable[Ticket]) -> list[TicketRow]:
    return [build_row(ticket) for ticket in tickets]
