"""Technical indicator library — streaming, one observation at a time."""

from streamta.indicators.base import Indicator
from streamta.indicators.extrema import Maximum, Minimum
from streamta.indicators.moving_averages import EMA, SMA
from streamta.indicators.oscillators import (
    CCI,
    PPO,
    ROC,
    RSI,
    FastStochastic,
    PPOOutput,
    SlowStochastic,
)
from streamta.indicators.registry import INDICATORS, create_indicator
from streamta.indicators.volatility import (
    ATR,
    BollingerBands,
    BollingerBandsOutput,
    ChandelierExit,
    ChandelierExitOutput,
    EfficiencyRatio,
    MeanAbsoluteDeviation,
    StandardDeviation,
    TrueRange,
)
from streamta.indicators.volume import MFI
from streamta.indicators.window import CircularWindow

__all__ = [
    "Indicator",
    "CircularWindow",
    "SMA",
    "EMA",
    "Maximum",
    "Minimum",
    "MeanAbsoluteDeviation",
    "StandardDeviation",
    "EfficiencyRatio",
    "MFI",
    "RSI",
    "CCI",
    "FastStochastic",
    "SlowStochastic",
    "PPO",
    "PPOOutput",
    "ROC",
    "BollingerBands",
    "BollingerBandsOutput",
    "TrueRange",
    "ATR",
    "ChandelierExit",
    "ChandelierExitOutput",
    "INDICATORS",
    "create_indicator",
]
