from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from .models import Ticket
from .state import TicketStatus, initial_status
from .store import TicketStore

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = frozenset({"title", "description", "status"})


class SessionMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


@dataclass(slots=True)
class EditSession:
    """Working copy of the fields shown in the ticket form."""

    mode: SessionMode
    ticket_id: UUID | None = None
    title: str = ""
    description: str = ""
    status: TicketStatus = TicketStatus.CREATED


class TicketFormController:
    """Mediate between the ticket form and the store.

    The controller is either closed or holds exactly one open session. Opening a
    new session replaces the current one. ``save`` commits into the store and
    closes; ``cancel`` discards. Neither validates the field values.
    """

    def __init__(self, store: TicketStore) -> None:
        self._store = store
        self._session: EditSession | None = None

    @property
    def session(self) -> EditSession | None:
        return self._session

    @property
    def is_open(self) -> bool:
        return self._session is not None

    def open_for_create(self) -> EditSession:
        self._session = EditSession(mode=SessionMode.CREATE, status=initial_status())
        return self._session

    def open_for_edit(self, ticket: Ticket) -> EditSession:
        self._session = EditSession(
            mode=SessionMode.EDIT,
            ticket_id=ticket.id,
            title=ticket.title,
            description=ticket.description,
            status=ticket.status,
        )
        return self._session

    def set_field(self, name: str, value: str | TicketStatus) -> None:
        if name not in _EDITABLE_FIELDS:
            raise ValueError(f"Unknown ticket form field: {name!r}")
        if self._session is None:
            logger.debug("Ignoring %s change; no form is open", name)
            return
        if name == "status":
            value = TicketStatus(value)
        setattr(self._session, name, value)

    def save(self) -> Ticket | None:
        session = self._session
        if session is None:
            return None

        created: Ticket | None = None
        if session.mode is SessionMode.CREATE:
            created = self._store.create(session.title, session.description, session.status)
        elif session.ticket_id is not None:
            self._store.update(session.ticket_id, session.title, session.description, session.status)
        self._session = None
        return created

    def cancel(self) -> None:
        self._session = None
