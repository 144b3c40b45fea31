"""Name-based construction of indicators, for config-driven pipelines."""

from __future__ import annotations

import inspect
import logging
from typing import Any

from streamta.indicators.base import Indicator
from streamta.indicators.extrema import Maximum, Minimum
from streamta.indicators.moving_averages import EMA, SMA
from streamta.indicators.oscillators import (
    CCI,
    PPO,
    ROC,
    RSI,
    FastStochastic,
    SlowStochastic,
)
from streamta.indicators.volatility import (
    ATR,
    BollingerBands,
    ChandelierExit,
    EfficiencyRatio,
    MeanAbsoluteDeviation,
    StandardDeviation,
    TrueRange,
)
from streamta.indicators.volume import MFI

logger = logging.getLogger(__name__)

INDICATORS: dict[str, type[Indicator]] = {
    cls.name: cls
    for cls in (
        SMA,
        EMA,
        Maximum,
        Minimum,
        MeanAbsoluteDeviation,
        StandardDeviation,
        EfficiencyRatio,
        MFI,
        RSI,
        CCI,
        FastStochastic,
        SlowStochastic,
        PPO,
        ROC,
        BollingerBands,
        TrueRange,
        ATR,
        ChandelierExit,
    )
}


def valid_params(name: str) -> frozenset[str]:
    cls = _lookup(name)
    signature = inspect.signature(cls.__init__)
    return frozenset(p for p in signature.parameters if p != "self")


def create_indicator(name: str, **params: Any) -> Indicator:
    """Build an indicator from its display name, e.g. ``create_indicator("SMA", period=20)``."""
    cls = _lookup(name)
    accepted = valid_params(name)
    unknown = set(params) - accepted
    if unknown:
        raise ValueError(
            f"Unknown parameters for {cls.name}: {sorted(unknown)}, "
            f"accepted: {sorted(accepted)}"
        )
    indicator = cls(**params)
    logger.debug("Created indicator %s", indicator)
    return indicator


def _lookup(name: str) -> type[Indicator]:
    try:
        return INDICATORS[name.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown indicator '{name}'. Available: {sorted(INDICATORS)}"
        ) from None
