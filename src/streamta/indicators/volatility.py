from __future__ import annotations

import math
from dataclasses import dataclass

from streamta.data.bar import HasHLC
from streamta.indicators.base import (
    Indicator,
    IndicatorOutput,
    check_multiplier,
    check_period,
)
from streamta.indicators.extrema import Maximum, Minimum
from streamta.indicators.moving_averages import EMA
from streamta.indicators.window import CircularWindow


class MeanAbsoluteDeviation(Indicator):
    """Mean absolute deviation around the window mean.

    The sum is maintained incrementally, but the deviation itself needs a
    full pass over the live values, so every update costs O(period).
    """

    name = "MAD"

    def __init__(self, period: int = 9) -> None:
        self.period = check_period(period)
        self._window = CircularWindow(self.period)
        self._sum: float = 0.0
        self._value: float | None = None

    def update(self, value: float) -> float:
        evicted = self._window.push(value)
        self._sum = self._sum - evicted + value

        count = len(self._window)
        mean = self._sum / count
        deviation = 0.0
        for v in self._window:
            deviation += abs(v - mean)
        self._value = deviation / count
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


class StandardDeviation(Indicator):
    """Population standard deviation over the window."""

    name = "SD"

    def __init__(self, period: int = 9) -> None:
        self.period = check_period(period)
        self._window = CircularWindow(self.period)
        self._sum: float = 0.0
        self._sum_sq: float = 0.0
        self._value: float | None = None

    def update(self, value: float) -> float:
        evicted = self._window.push(value)
        self._sum = self._sum - evicted + value
        self._sum_sq = self._sum_sq - evicted * evicted + value * value

        count = len(self._window)
        mean = self._sum / count
        variance = self._sum_sq / count - mean * mean
        self._value = math.sqrt(max(variance, 0.0))
        return self._value

    def mean(self) -> float:
        count = len(self._window)
        if count == 0:
            return 0.0
        return self._sum / count

    def reset(self) -> None:
        self._window.reset()
        self._sum = 0.0
        self._sum_sq = 0.0
        self._value = None

    @property
    def ready(self) -> bool:
        return self._window.full

    @property
    def value(self) -> float | None:
        return self._value


@dataclass(frozen=True)
class BollingerBandsOutput(IndicatorOutput):
    average: float
    upper: float
    lower: float


class BollingerBands(Indicator):
    """Bollinger Bands — mean plus/minus ``multiplier`` standard deviations."""

    name = "BB"

    def __init__(self, period: int = 9, multiplier: float = 2.0) -> None:
        self.period = check_period(period)
        self.multiplier = check_multiplier(multiplier)
        self._sd = StandardDeviation(self.period)
        self._value: BollingerBandsOutput | None = None

    def update(self, value: float) -> BollingerBandsOutput:
        sd = self._sd.update(value)
        mean = self._sd.mean()
        self._value = BollingerBandsOutput(
            average=mean,
            upper=mean + sd * self.multiplier,
            lower=mean - sd * self.multiplier,
        )
        return self._value

    def reset(self) -> None:
        self._sd.reset()
        self._value = None

    def params(self) -> tuple[object, ...]:
        return (self.period, self.multiplier)

    @property
    def ready(self) -> bool:
        return self._sd.ready

    @property
    def value(self) -> BollingerBandsOutput | None:
        return self._value

    @property
    def average(self) -> float | None:
        return self._value.average if self._value else None

    @property
    def upper(self) -> float | None:
        return self._value.upper if self._value else None

    @property
    def lower(self) -> float | None:
        return self._value.lower if self._value else None


class TrueRange(Indicator):
    """True range of a bar against the previous close.

    Scalar updates use the absolute change from the previous value.
    """

    name = "TRANGE"
    period = 1

    def __init__(self) -> None:
        self._prev_close: float | None = None
        self._value: float | None = None

    def update(self, value: float) -> float:
        if self._prev_close is None:
            tr = 0.0
        else:
            tr = abs(value - self._prev_close)
        self._prev_close = value
        self._value = tr
        return tr

    def update_bar(self, bar: HasHLC) -> float:
        return self.update_hlc(bar.high, bar.low, bar.close)

    def update_hlc(self, high: float, low: float, close: float) -> float:
        if self._prev_close is None:
            tr = high - low
        else:
            tr = max(
                high - low,
                abs(high - self._prev_close),
                abs(low - self._prev_close),
            )
        self._prev_close = close
        self._value = tr
        return tr

    def reset(self) -> None:
        self._prev_close = None
        self._value = None

    def params(self) -> tuple[object, ...]:
        return ()

    @property
    def ready(self) -> bool:
        return self._value is not None

    @property
    def value(self) -> float | None:
        return self._value


class ATR(Indicator):
    """Average True Range — EMA of the true range."""

    name = "ATR"

    def __init__(self, period: int = 14) -> None:
        self.period = check_period(period)
        self._true_range = TrueRange()
        self._ema = EMA(self.period)

    def update(self, value: float) -> float:
        return self._ema.update(self._true_range.update(value))

    def update_bar(self, bar: HasHLC) -> float:
        return self._ema.update(self._true_range.update_bar(bar))

    def update_hlc(self, high: float, low: float, close: float) -> float:
        return self._ema.update(self._true_range.update_hlc(high, low, close))

    def reset(self) -> None:
        self._true_range.reset()
        self._ema.reset()

    @property
    def ready(self) -> bool:
        return self._ema.ready

    @property
    def value(self) -> float | None:
        return self._ema.value


@dataclass(frozen=True)
class ChandelierExitOutput(IndicatorOutput):
    long: float
    short: float


class ChandelierExit(Indicator):
    """Chandelier Exit: ATR-scaled stops hung from the highest high and lowest low."""

    name = "CE"

    def __init__(self, period: int = 22, multiplier: float = 3.0) -> None:
        self.period = check_period(period)
        self.multiplier = check_multiplier(multiplier)
        self._atr = ATR(self.period)
        self._max = Maximum(self.period)
        self._min = Minimum(self.period)
        self._value: ChandelierExitOutput | None = None

    def update(self, value: float) -> ChandelierExitOutput:
        """For close-only streaming, uses value as high/low/close."""
        return self.update_hlc(value, value, value)

    def update_bar(self, bar: HasHLC) -> ChandelierExitOutput:
        return self.update_hlc(bar.high, bar.low, bar.close)

    def update_hlc(self, high: float, low: float, close: float) -> ChandelierExitOutput:
        atr = self._atr.update_hlc(high, low, close) * self.multiplier
        highest = self._max.update(high)
        lowest = self._min.update(low)
        self._value = ChandelierExitOutput(long=highest - atr, short=lowest + atr)
        return self._value

    def reset(self) -> None:
        self._atr.reset()
        self._max.reset()
        self._min.reset()
        self._value = None

    def params(self) -> tuple[object, ...]:
        return (self.period, self.multiplier)

    @property
    def ready(self) -> bool:
        return self._max.ready

    @property
    def value(self) -> ChandelierExitOutput | None:
        return self._value


class EfficiencyRatio(Indicator):
    """Kaufman's Efficiency Ratio.

    Net change over the window divided by the path length travelled to get
    there. The path is walked oldest-first, starting from the value that was
    evicted by this update. During warm-up it starts from the first value
    pushed, or from zero on the very first update.
    """

    name = "ER"

    def __init__(self, period: int = 14) -> None:
        self.period = check_period(period)
        self._window = CircularWindow(self.period)
        self._value: float | None = None

    def update(self, value: float) -> float:
        first = self._window.oldest
        self._window.push(value)

        volatility = 0.0
        previous = first
        for v in self._window:
            volatility += abs(previous - v)
            previous = v

        if volatility == 0.0:
            self._value = 0.0
        else:
            self._value = abs(first - value) / volatility
        return self._value

    def reset(self) -> None:
        self._window.reset()
        self._value = None

    @property
    def ready(self) -> bool:
        return self._window.full

    @property
    def value(self) -> float | None:
        return self._value
