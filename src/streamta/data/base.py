from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from datetime import datetime

import pandas as pd

from streamta.data.bar import Bar


class DataFeed(ABC):
    def __init__(self, symbol: str = "") -> None:
        self.symbol = symbol

    @abstractmethod
    def fetch(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> pd.DataFrame:
        """Returns DataFrame with columns: open, high, low, close, volume, indexed by datetime."""
        ...

    def iter_bars(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> Iterator[Bar]:
        df = self.fetch(start, end)
        for ts, row in df.iterrows():
            yield Bar(
                open=float(row["open"]),
                high=float(row["high"]),
                low=float(row["low"]),
                close=float(row["close"]),
                volume=float(row["volume"]),
                timestamp=ts.to_pydatetime(),
                symbol=self.symbol,
            )
