import numpy as np
import pandas as pd
import pytest

from streamta.data.bar import Bar


@pytest.fixture
def sample_bars():
    """Generate sample OHLCV bars for testing."""
    dates = pd.date_range("2024-01-01", periods=50, freq="D")
    bars = []
    price = 100.0
    for i, dt in enumerate(dates):
        # Simulate trending then reversing price
        if i < 25:
            price += 0.5
        else:
            price -= 0.5
        if i % 7 == 3:
            price += 1.5
        bars.append(Bar(
            open=price - 0.2,
            high=price + 0.5 + (i % 3) * 0.25,
            low=price - 0.5,
            close=price,
            volume=1_000_000.0 + i * 10_000.0,
            timestamp=dt.to_pydatetime(),
            symbol="TEST",
        ))
    return bars


@pytest.fixture
def random_closes():
    rng = np.random.default_rng(42)
    return list(100 + np.cumsum(rng.normal(0.0, 0.5, 200)))
