from __future__ import annotations

from uuid import uuid4

from .models import Ticket
from .state import TicketStatus


def example_tickets() -> list[Ticket]:
    """Fixed example set shown on a freshly started board."""

    return [
        Ticket(
            id=uuid4(),
            title="Printer not responding",
            description="The second floor printer shows an offline status.",
            status=TicketStatus.CREATED,
        ),
        Ticket(
            id=uuid4(),
            title="VPN disconnects",
            description="Connection drops every few minutes when working remotely.",
            status=TicketStatus.UNDER_ASSISTANCE,
        ),
        Ticket(
            id=uuid4(),
            title="Password reset",
            description="Locked out of the email account after several attempts.",
            status=TicketStatus.COMPLETED,
            rating=4,
        ),
    ]
