from __future__ import annotations

from streamta.data.bar import HasHLCV, typical_price
from streamta.indicators.base import Indicator, check_period
from streamta.indicators.window import CircularWindow

NEUTRAL_MFI = 50.0


class MFI(Indicator):
    """Money Flow Index — volume-weighted RSI over typical prices.

    Each update stores the raw money flow (typical price * volume) signed by
    the direction of the typical price versus the previous update: positive
    when it rose, negative when it fell, zero when unchanged. The positive
    and negative totals of the last ``period`` flows are kept incrementally.

    The first update has nothing to compare against; it stores a zero flow
    and returns 50.
    """

    name = "MFI"

    def __init__(self, period: int = 14) -> None:
        self.period = check_period(period)
        self._window = CircularWindow(self.period)
        self._prev_tp: float | None = None
        self._pos_total: float = 0.0
        self._neg_total: float = 0.0
        self._value: float | None = None

    def update(self, value: float) -> float:
        """Close-only update: treats value as the typical price with unit volume."""
        return self.update_tpv(value, 1.0)

    def update_bar(self, bar: HasHLCV) -> float:
        return self.update_tpv(typical_price(bar), bar.volume)

    def update_tpv(self, typical_price: float, volume: float) -> float:
        if self._prev_tp is None:
            flow = 0.0
        elif typical_price > self._prev_tp:
            flow = typical_price * volume
        elif typical_price < self._prev_tp:
            flow = -typical_price * volume
        else:
            flow = 0.0
        first = self._prev_tp is None
        self._prev_tp = typical_price

        evicted = self._window.push(flow)
        # Totals are clamped at zero against add/subtract drift.
        if evicted > 0.0:
            self._pos_total = max(self._pos_total - evicted, 0.0)
        elif evicted < 0.0:
            self._neg_total = max(self._neg_total + evicted, 0.0)

        if flow > 0.0:
            self._pos_total += flow
        elif flow < 0.0:
            self._neg_total -= flow

        total = self._pos_total + self._neg_total
        if first or total == 0.0:
            self._value = NEUTRAL_MFI
        else:
            self._value = self._pos_total / total * 100.0
        return self._value

    @property
    def positive_flow(self) -> float:
        return self._pos_total

    @property
    def negative_flow(self) -> float:
        return self._neg_total

    def reset(self) -> None:
        self._window.reset()
        self._prev_tp = None
        self._pos_total = 0.0
        self._neg_total = 0.0
        self._value = None

    @property
    def ready(self) -> bool:
        return self._window.full

    @property
    def value(self) -> float | None:
        return self._value
