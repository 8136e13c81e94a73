from __future__ import annotations

from uuid import uuid4

import pytest

from ticketboard.tickets import Ticket, TicketStatus
from ticketboard.ui.view import build_row, build_rows, render_stars, show_rating


@pytest.mark.parametrize(
    ("rating", "expected"),
    [(None, "☆☆☆☆☆"), (1, "★☆☆☆☆"), (4, "★★★★☆"), (5, "★★★★★")],
)
def test_render_stars(rating, expected):
    assert render_stars(rating) == expected


def test_row_for_completed_ticket_shows_rating():
    ticket = Ticket(id=uuid4(), title="T", description="D", status=TicketStatus.COMPLETED, rating=3)

    row = build_row(ticket)

    assert row.show_rating
    assert row.stars == "★★★☆☆"
    assert row.status_label == "Completed"
    assert row.status_color == "#4CAF50"


def test_completed_without_rating_shows_empty_stars():
    ticket = Ticket(id=uuid4(), title="T", description="D", status=TicketStatus.COMPLETED)

    assert build_row(ticket).stars == "☆☆☆☆☆"


def test_open_ticket_hides_rating():
    ticket = Ticket(id=uuid4(), title="T", description="D", status=TicketStatus.UNDER_ASSISTANCE, rating=2)

    row = build_row(ticket)

    assert not show_rating(ticket)
    assert not row.show_rating
    assert row.stars == ""
    assert row.status_color == "#FF9800"


def test_build_rows_keeps_store_order(seeded_store):
    rows = build_rows(seeded_store.snapshot())
    assert [row.title for row in rows] == ["Printer", "VPN", "Password"]
    assert [row.status_color for row in rows] == ["#2196F3", "#FF9800", "#4CAF50"]
