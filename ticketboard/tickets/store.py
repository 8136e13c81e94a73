from __future__ import annotations

import logging
from dataclasses import replace
from threading import Lock
from typing import Callable, Iterable, Iterator
from uuid import UUID, uuid4

from opentelemetry import trace

from .models import Ticket, validate_rating
from .seed import example_tickets
from .state import TicketStatus, accepts_rating

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class TicketStore:
    """Ordered, in-memory collection of tickets.

    Insertion order is display order. Every mutation keeps the rule that a
    rating is cleared whenever a ticket leaves the completed status. Lookups
    by an unknown id are silent no-ops; the mutators report whether a ticket
    matched so callers can tell the two apart if they care to.

    The board may be shared between UI sessions running on separate threads,
    so each operation holds the store lock from id lookup through the write.

    ``rate`` does not check the ticket status: exposing the rating control only
    for completed tickets is the caller's job.
    """

    def __init__(
        self,
        tickets: Iterable[Ticket] | None = None,
        *,
        id_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        self._tickets: list[Ticket] = list(tickets or ())
        self._id_factory = id_factory
        self._lock = Lock()

    @classmethod
    def with_examples(cls) -> "TicketStore":
        return cls(example_tickets())

    def __len__(self) -> int:
        with self._lock:
            return len(self._tickets)

    def __iter__(self) -> Iterator[Ticket]:
        return iter(self.snapshot())

    def __contains__(self, ticket_id: object) -> bool:
        with self._lock:
            return self._index_of(ticket_id) is not None

    def snapshot(self) -> tuple[Ticket, ...]:
        with self._lock:
            return tuple(self._tickets)

    def get(self, ticket_id: UUID) -> Ticket | None:
        with self._lock:
            index = self._index_of(ticket_id)
            return None if index is None else self._tickets[index]

    def list_tickets(self, *, status: TicketStatus | None = None) -> list[Ticket]:
        with self._lock:
            if status is None:
                return list(self._tickets)
            return [ticket for ticket in self._tickets if ticket.status == status]

    def create(self, title: str, description: str, status: TicketStatus) -> Ticket:
        with tracer.start_as_current_span("tickets.create"):
            ticket = Ticket(
                id=self._id_factory(),
                title=title,
                description=description,
                status=TicketStatus(status),
            )
            with self._lock:
                self._tickets.append(ticket)
            logger.info("Created ticket %s (%s)", ticket.id, ticket.status.value)
            return ticket

    def update(self, ticket_id: UUID, title: str, description: str, status: TicketStatus) -> bool:
        with tracer.start_as_current_span("tickets.update"):
            status = TicketStatus(status)
            with self._lock:
                index = self._index_of(ticket_id)
                if index is None:
                    current = None
                else:
                    current = self._tickets[index]
                    rating = current.rating if accepts_rating(status) else None
                    self._tickets[index] = replace(
                        current,
                        title=title,
                        description=description,
                        status=status,
                        rating=rating,
                    )

            if current is None:
                logger.debug("Update skipped; ticket %s not found", ticket_id)
                return False
            if current.rating is not None and rating is None:
                logger.debug("Cleared rating of ticket %s on move to %s", ticket_id, status.value)
            logger.info("Updated ticket %s (%s)", ticket_id, status.value)
            return True

    def delete(self, ticket_id: UUID) -> bool:
        with tracer.start_as_current_span("tickets.delete"):
            with self._lock:
                index = self._index_of(ticket_id)
                if index is not None:
                    del self._tickets[index]

            if index is None:
                logger.debug("Delete skipped; ticket %s not found", ticket_id)
                return False
            logger.info("Deleted ticket %s", ticket_id)
            return True

    def rate(self, ticket_id: UUID, value: int) -> bool:
        with tracer.start_as_current_span("tickets.rate"):
            value = validate_rating(value)
            with self._lock:
                index = self._index_of(ticket_id)
                if index is not None:
                    self._tickets[index] = replace(self._tickets[index], rating=value)

            if index is None:
                logger.debug("Rating skipped; ticket %s not found", ticket_id)
                return False
            logger.info("Rated ticket %s with %d stars", ticket_id, value)
            return True

    def _index_of(self, ticket_id: object) -> int | None:
        # callers hold self._lock
        for index, ticket in enumerate(self._tickets):
            if ticket.id == ticket_id:
                return index
        return None
