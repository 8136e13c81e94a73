"""Ticket domain: models, store and the edit-form controller."""

from .models import MAX_RATING, MIN_RATING, Ticket, validate_rating
from .session import EditSession, SessionMode, TicketFormController
from .state import TicketStatus, accepts_rating, initial_status, status_color, status_label
from .store import TicketStore

__all__ = [
    "MAX_RATING",
    "MIN_RATING",
    "Ticket",
    "validate_rating",
    "EditSession",
    "SessionMode",
    "TicketFormController",
    "TicketStatus",
    "accepts_rating",
    "initial_status",
    "status_color",
    "status_label",
    "TicketStore",
]
