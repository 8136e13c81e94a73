from __future__ import annotations

import threading
import time
from uuid import UUID

from ticketboard.tickets import Ticket, TicketStatus, TicketStore


class _SlowMatchId(UUID):
    """Ticket id that pauses after matching the watched id, widening lookup-to-write gaps."""

    watched: UUID | None = None
    matched = threading.Event()

    __hash__ = UUID.__hash__

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is True and int(self) == int(type(self).watched) and not type(self).matched.is_set():
            type(self).matched.set()
            time.sleep(0.05)
        return result


def _board(size: int) -> tuple[TicketStore, list[UUID]]:
    ids: list[UUID] = [_SlowMatchId(int=n + 1) for n in range(size)]
    tickets = [Ticket(id=ticket_id, title=f"t{n}", description="", status=TicketStatus.COMPLETED, rating=2)
               for n, ticket_id in enumerate(ids)]
    _SlowMatchId.matched.clear()
    return TicketStore(tickets), ids


def _run_overlapping(first, second) -> None:
    worker = threading.Thread(target=first)
    worker.start()
    assert _SlowMatchId.matched.wait(timeout=5)
    other = threading.Thread(target=second)
    other.start()
    worker.join(timeout=5)
    other.join(timeout=5)


def test_concurrent_deletes_remove_the_requested_tickets():
    store, ids = _board(60)
    _SlowMatchId.watched = ids[50]

    _run_overlapping(lambda: store.delete(ids[50]), lambda: store.delete(ids[10]))

    assert len(store) == 58
    assert ids[50] not in store
    assert ids[10] not in store
    assert ids[51] in store


def test_rate_during_concurrent_delete_targets_the_requested_ticket():
    store, ids = _board(60)
    _SlowMatchId.watched = ids[50]

    _run_overlapping(lambda: store.rate(ids[50], 5), lambda: store.delete(ids[10]))

    assert store.get(ids[50]).rating == 5
    assert store.get(ids[51]).rating == 2
    assert ids[10] not in store


def test_update_during_concurrent_delete_targets_the_requested_ticket():
    store, ids = _board(60)
    _SlowMatchId.watched = ids[50]

    _run_overlapping(
        lambda: store.update(ids[50], "moved", "", TicketStatus.CREATED),
        lambda: store.delete(ids[10]),
    )

    assert store.get(ids[50]).title == "moved"
    assert store.get(ids[50]).rating is None
    assert store.get(ids[51]).title == "t51"
    assert store.get(ids[51]).rating == 2
