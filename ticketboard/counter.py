from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Counter:
    """Unbounded signed counter starting at zero."""

    count: int = 0

    def increment(self) -> int:
        self.count += 1
        return self.count

    def decrement(self) -> int:
        self.count -= 1
        return self.count

    def reset(self) -> int:
        self.count = 0
        return self.count
