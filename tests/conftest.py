from __future__ import annotations

import pytest

from ticketboard.tickets import TicketFormController, TicketStatus, TicketStore


@pytest.fixture
def store():
    return TicketStore()


@pytest.fixture
def seeded_store():
    store = TicketStore()
    store.create("Printer", "Offline", TicketStatus.CREATED)
    store.create("VPN", "Drops", TicketStatus.UNDER_ASSISTANCE)
    done = store.create("Password", "Locked out", TicketStatus.COMPLETED)
    store.rate(done.id, 4)
    return store


@pytest.fixture
def controller(seeded_store):
    return TicketFormController(seeded_store)
