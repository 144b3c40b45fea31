"""Windowed maximum and minimum.

The slot holding the current extremum is tracked by index. A new value only
displaces it when strictly more extreme; when the tracked slot itself is
overwritten the window is rescanned (O(N), only when the extremum ages out).
"""

from __future__ import annotations

import math
from abc import abstractmethod

from streamta.data.bar import HasHigh, HasLow
from streamta.indicators.base import Indicator, check_period
from streamta.indicators.window import CircularWindow


class _WindowedExtremum(Indicator):
    _sentinel: float

    def __init__(self, period: int = 14) -> None:
        self.period = check_period(period)
        self._window = CircularWindow(self.period, fill=self._sentinel)
        self._best_index: int = 0
        self._value: float | None = None

    @abstractmethod
    def _better(self, a: float, b: float) -> bool:
        ...

    def _rescan(self) -> int:
        best = self._sentinel
        index = 0
        for i in range(self.period):
            v = self._window.slot(i)
            if self._better(v, best):
                best = v
                index = i
        return index

    def update(self, value: float) -> float:
        cursor = self._window.cursor
        self._window.push(value)

        if self._better(value, self._window.slot(self._best_index)):
            self._best_index = cursor
        elif self._best_index == cursor:
            self._best_index = self._rescan()

        self._value = self._window.slot(self._best_index)
        return self._value

    def reset(self) -> None:
        self._window.reset()
        self._best_index = 0
        self._value = None

    @property
    def ready(self) -> bool:
        return self._window.full

    @property
    def value(self) -> float | None:
        return self._value


class Maximum(_WindowedExtremum):
    """Highest value over the last ``period`` updates (bars: high)."""

    name = "MAX"
    _sentinel = -math.inf

    def _better(self, a: float, b: float) -> bool:
        return a > b

    def update_bar(self, bar: HasHigh) -> float:
        return self.update(bar.high)


class Minimum(_WindowedExtremum):
    """Lowest value over the last ``period`` updates (bars: low)."""

    name = "MIN"
    _sentinel = math.inf

    def _better(self, a: float, b: float) -> bool:
        return a < b

    def update_bar(self, bar: HasLow) -> float:
        return self.update(bar.low)
