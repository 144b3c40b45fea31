from __future__ import annotations

from dataclasses import dataclass

from streamta.data.bar import HasHLC, typical_price
from streamta.indicators.base import Indicator, IndicatorOutput, check_period
from streamta.indicators.extrema import Maximum, Minimum
from streamta.indicators.moving_averages import EMA, SMA
from streamta.indicators.volatility import MeanAbsoluteDeviation
from streamta.indicators.window import CircularWindow

# Seed fed to both averages on the first update so the ratio starts at 50.
RSI_SEED = 0.1

CCI_CONSTANT = 0.015


class RSI(Indicator):
    """Relative Strength Index over EMA-smoothed gains and losses."""

    name = "RSI"

    def __init__(self, period: int = 14) -> None:
        self.period = check_period(period)
        self._up_ema = EMA(self.period)
        self._down_ema = EMA(self.period)
        self._prev: float | None = None
        self._value: float | None = None

    def update(self, value: float) -> float:
        up = 0.0
        down = 0.0
        if self._prev is None:
            up = RSI_SEED
            down = RSI_SEED
        elif value > self._prev:
            up = value - self._prev
        else:
            down = self._prev - value
        self._prev = value

        up_avg = self._up_ema.update(up)
        down_avg = self._down_ema.update(down)
        total = up_avg + down_avg
        if total == 0.0:
            self._value = 50.0
        else:
            self._value = 100.0 * up_avg / total
        return self._value

    def reset(self) -> None:
        self._up_ema.reset()
        self._down_ema.reset()
        self._prev = None
        self._value = None

    @property
    def ready(self) -> bool:
        return self._up_ema.ready

    @property
    def value(self) -> float | None:
        return self._value


class CCI(Indicator):
    """Commodity Channel Index.

    Bars: the typical price is measured against its SMA, scaled by the mean
    absolute deviation of the close.
    """

    name = "CCI"

    def __init__(self, period: int = 20) -> None:
        self.period = check_period(period)
        self._sma = SMA(self.period)
        self._mad = MeanAbsoluteDeviation(self.period)
        self._value: float | None = None

    def update(self, value: float) -> float:
        """Uses ``value`` for both the typical price and the close."""
        return self.update_tpc(value, value)

    def update_bar(self, bar: HasHLC) -> float:
        return self.update_tpc(typical_price(bar), bar.close)

    def update_tpc(self, tp: float, close: float) -> float:
        sma = self._sma.update(tp)
        mad = self._mad.update(close)
        if mad == 0.0:
            self._value = 0.0
        else:
            self._value = (tp - sma) / (mad * CCI_CONSTANT)
        return self._value

    def reset(self) -> None:
        self._sma.reset()
        self._mad.reset()
        self._value = None

    @property
    def ready(self) -> bool:
        return self._sma.ready

    @property
    def value(self) -> float | None:
        return self._value


class FastStochastic(Indicator):
    """Fast stochastic %K: position of the close within the window's range."""

    name = "FAST_STOCH"

    def __init__(self, period: int = 14) -> None:
        self.period = check_period(period)
        self._max = Maximum(self.period)
        self._min = Minimum(self.period)
        self._value: float | None = None

    def update(self, value: float) -> float:
        """For close-only streaming, uses value as high/low/close."""
        return self.update_hlc(value, value, value)

    def update_bar(self, bar: HasHLC) -> float:
        return self.update_hlc(bar.high, bar.low, bar.close)

    def update_hlc(self, high: float, low: float, close: float) -> float:
        highest = self._max.update(high)
        lowest = self._min.update(low)
        if highest == lowest:
            self._value = 50.0
        else:
            self._value = (close - lowest) / (highest - lowest) * 100.0
        return self._value

    def reset(self) -> None:
        self._max.reset()
        self._min.reset()
        self._value = None

    @property
    def ready(self) -> bool:
        return self._max.ready

    @property
    def value(self) -> float | None:
        return self._value


class SlowStochastic(Indicator):
    """Fast stochastic smoothed by an EMA."""

    name = "SLOW_STOCH"

    def __init__(self, stoch_period: int = 14, ema_period: int = 3) -> None:
        self.period = check_period(stoch_period, "stoch_period")
        self.ema_period = check_period(ema_period, "ema_period")
        self._fast = FastStochastic(self.period)
        self._ema = EMA(self.ema_period)

    def update(self, value: float) -> float:
        return self._ema.update(self._fast.update(value))

    def update_bar(self, bar: HasHLC) -> float:
        return self._ema.update(self._fast.update_bar(bar))

    def reset(self) -> None:
        self._fast.reset()
        self._ema.reset()

    def params(self) -> tuple[object, ...]:
        return (self.period, self.ema_period)

    @property
    def ready(self) -> bool:
        return self._fast.ready

    @property
    def value(self) -> float | None:
        return self._ema.value


@dataclass(frozen=True)
class PPOOutput(IndicatorOutput):
    ppo: float
    signal: float
    histogram: float


class PPO(Indicator):
    """Percentage Price Oscillator with signal line and histogram."""

    name = "PPO"

    def __init__(self, fast: int = 12, slow: int = 26, signal: int = 9) -> None:
        self.fast_period = check_period(fast, "fast")
        self.slow_period = check_period(slow, "slow")
        self.signal_period = check_period(signal, "signal")
        self.period = self.slow_period
        self._fast_ema = EMA(self.fast_period)
        self._slow_ema = EMA(self.slow_period)
        self._signal_ema = EMA(self.signal_period)
        self._value: PPOOutput | None = None

    def update(self, value: float) -> PPOOutput:
        fast_val = self._fast_ema.update(value)
        slow_val = self._slow_ema.update(value)
        if slow_val == 0.0:
            ppo = 0.0
        else:
            ppo = (fast_val - slow_val) / slow_val * 100.0
        signal = self._signal_ema.update(ppo)
        self._value = PPOOutput(ppo=ppo, signal=signal, histogram=ppo - signal)
        return self._value

    def reset(self) -> None:
        self._fast_ema.reset()
        self._slow_ema.reset()
        self._signal_ema.reset()
        self._value = None

    def params(self) -> tuple[object, ...]:
        return (self.fast_period, self.slow_period, self.signal_period)

    @property
    def ready(self) -> bool:
        return self._slow_ema.ready

    @property
    def value(self) -> PPOOutput | None:
        return self._value

    @property
    def signal_line(self) -> float | None:
        return self._value.signal if self._value else None

    @property
    def histogram(self) -> float | None:
        return self._value.histogram if self._value else None


class ROC(Indicator):
    """Rate of Change against the value ``period`` updates ago, in percent.

    Until that far back exists, the first value fed is the reference.
    """

    name = "ROC"

    def __init__(self, period: int = 9) -> None:
        self.period = check_period(period)
        self._window = CircularWindow(self.period)
        self._value: float | None = None

    def update(self, value: float) -> float:
        if len(self._window) == 0:
            previous = value
        else:
            previous = self._window.oldest
        self._window.push(value)

        if previous == 0.0:
            self._value = 0.0
        else:
            self._value = (value - previous) / previous * 100.0
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
