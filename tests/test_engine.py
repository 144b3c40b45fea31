from collections.abc import Iterator
from datetime import datetime

import pandas as pd
import pytest

from streamta.core.engine import IndicatorEngine
from streamta.data.bar import Bar
from streamta.data.base import DataFeed
from streamta.indicators.moving_averages import SMA
from streamta.indicators.volatility import BollingerBands
from streamta.indicators.volume import MFI


class MockDataFeed(DataFeed):
    """DataFeed that returns pre-built bars."""

    def __init__(self, bars: list[Bar]) -> None:
        super().__init__("TEST")
        self._bars = bars

    def fetch(self, start: datetime | None = None,
              end: datetime | None = None) -> pd.DataFrame:
        data = [{
            "open": b.open, "high": b.high, "low": b.low,
            "close": b.close, "volume": b.volume,
        } for b in self._bars]
        index = pd.DatetimeIndex([b.timestamp for b in self._bars])
        return pd.DataFrame(data, index=index)


def test_engine_runs_feed(sample_bars):
    engine = IndicatorEngine({
        "sma": SMA(3),
        "bb": BollingerBands(5, 2.0),
        "mfi": MFI(5),
    })
    df = engine.run(MockDataFeed(sample_bars))

    assert len(df) == len(sample_bars)
    assert list(df.columns) == ["sma", "bb.average", "bb.upper", "bb.lower", "mfi"]
    assert df.index[0] == pd.Timestamp(sample_bars[0].timestamp)

    last_closes = [b.close for b in sample_bars[-3:]]
    assert df["sma"].iloc[-1] == pytest.approx(sum(last_closes) / 3)
    assert (df["bb.upper"] >= df["bb.lower"]).all()
    assert df["mfi"].iloc[0] == 50.0


def test_engine_matches_direct_updates(sample_bars):
    engine = IndicatorEngine({"sma": SMA(4)})
    df = engine.run_bars(sample_bars)
    sma = SMA(4)
    assert df["sma"].tolist() == [sma.update_bar(b) for b in sample_bars]


def test_engine_without_timestamps():
    engine = IndicatorEngine({"sma": SMA(2)})
    df = engine.run_bars([Bar(close=1.0), Bar(close=3.0)])
    assert df.index.tolist() == [0, 1]
    assert df["sma"].tolist() == [1.0, 2.0]


def test_engine_reset(sample_bars):
    engine = IndicatorEngine({"sma": SMA(3)})
    first = engine.run_bars(sample_bars)
    engine.reset()
    assert engine.results().empty
    second = engine.run_bars(sample_bars)
    pd.testing.assert_frame_equal(first, second)


def test_engine_requires_indicators():
    with pytest.raises(ValueError):
        IndicatorEngine({})
