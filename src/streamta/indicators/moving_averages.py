from __future__ import annotations

from streamta.indicators.base import Indicator, check_period
from streamta.indicators.window import CircularWindow


class SMA(Indicator):
    """Simple Moving Average — streaming, running-sum based.

    During warm-up the sum is divided by the number of values seen so far.
    """

    name = "SMA"

    def __init__(self, period: int = 9) -> None:
        self.period = check_period(period)
        self._window = CircularWindow(self.period)
        self._sum: float = 0.0
        self._value: float | None = None

    def update(self, value: float) -> float:
        evicted = self._window.push(value)
        self._sum = self._sum - evicted + value
        self._value = self._sum / len(self._window)
        return self._value

    def reset(self) -> None:
        self._window.reset()
        self._sum = 0.0
        self._value = None

    @property
    def ready(self) -> bool:
        return self._window.full

    @property
    def value(self) -> float | None:
        return self._value


class EMA(Indicator):
    """Exponential Moving Average seeded with the first input."""

    name = "EMA"

    def __init__(self, period: int = 9) -> None:
        self.period = check_period(period)
        self._k: float = 2.0 / (self.period + 1)
        self._count: int = 0
        self._value: float | None = None

    def update(self, value: float) -> float:
        if self._value is None:
            self._value = value
        else:
            self._value = self._k * value + (1.0 - self._k) * self._value
        if self._count < self.period:
            self._count += 1
        return self._value

    def reset(self) -> None:
        self._count = 0
        self._value = None

    @property
    def k(self) -> float:
        return self._k

    @property
    def ready(self) -> bool:
        return self._count >= self.period

    @property
    def value(self) -> float | None:
        return self._value
