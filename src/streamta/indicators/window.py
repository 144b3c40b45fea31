"""Fixed-capacity circular buffer shared by every windowed indicator.

Performance contract:
- CircularWindow.push(): O(1)
- CircularWindow.slot(): O(1)
- iteration: O(count), oldest value first
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from streamta.indicators.base import check_period


class CircularWindow:
    """
    Ring buffer of the last ``capacity`` scalar values.

    Slots that have not been written yet hold ``fill``. ``push`` returns the
    value it overwrote, which is the oldest live value once the window is
    full and the fill sentinel during warm-up.

    Example:
        >>> w = CircularWindow(3)
        >>> w.push(1.0), w.push(2.0), w.push(3.0)
        (0.0, 0.0, 0.0)
        >>> w.push(4.0)
        1.0
        >>> list(w)
        [2.0, 3.0, 4.0]
    """

    __slots__ = ("capacity", "fill", "_values", "_cursor", "_count")

    def __init__(self, capacity: int, fill: float = 0.0) -> None:
        self.capacity = check_period(capacity, "capacity")
        self.fill = float(fill)
        self._values = np.full(self.capacity, self.fill, dtype=np.float64)
        self._cursor = 0
        self._count = 0

    def push(self, value: float) -> float:
        evicted = float(self._values[self._cursor])
        self._values[self._cursor] = value
        self._cursor = self._cursor + 1 if self._cursor + 1 < self.capacity else 0
        if self._count < self.capacity:
            self._count += 1
        return evicted

    def slot(self, index: int) -> float:
        """Read a physical slot (not chronological)."""
        return float(self._values[index])

    @property
    def cursor(self) -> int:
        """Next slot to be overwritten."""
        return self._cursor

    @property
    def full(self) -> bool:
        return self._count == self.capacity

    @property
    def oldest(self) -> float:
        """Oldest live value, or the fill sentinel when empty."""
        if self.full:
            return float(self._values[self._cursor])
        return float(self._values[0])

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[float]:
        # Before the first wrap the live values sit in slots [0, count).
        if not self.full:
            for i in range(self._count):
                yield float(self._values[i])
            return
        for i in range(self._cursor, self.capacity):
            yield float(self._values[i])
        for i in range(self._cursor):
            yield float(self._values[i])

    def reset(self) -> None:
        self._values.fill(self.fill)
        self._cursor = 0
        self._count = 0
