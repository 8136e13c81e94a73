from __future__ import annotations

from ticketboard.counter import Counter


def test_counter_starts_at_zero():
    assert Counter().count == 0


def test_increment_decrement_reset_sequence():
    counter = Counter()
    counter.increment()
    counter.increment()
    counter.decrement()
    assert counter.count == 1

    assert counter.reset() == 0
    assert counter.count == 0


def test_decrement_has_no_floor():
    counter = Counter()
    assert counter.decrement() == -1
    assert counter.decrement() == -2
