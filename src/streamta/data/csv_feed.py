from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import pandas as pd

from streamta.data.base import DataFeed

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["open", "high", "low", "close", "volume"]


class CsvDataFeed(DataFeed):
    """Loads OHLCV data from a CSV file.

    Expects columns: open, high, low, close, volume (case-insensitive).
    The first column is used as the datetime index.
    """

    def __init__(self, file_path: str | Path, symbol: str = "") -> None:
        super().__init__(symbol or Path(file_path).stem.upper())
        self.file_path = Path(file_path)

    def fetch(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> pd.DataFrame:
        df = pd.read_csv(self.file_path, index_col=0)
        df.columns = [str(c).strip().lower() for c in df.columns]
        missing = set(REQUIRED_COLUMNS) - set(df.columns)
        if missing:
            raise ValueError(
                f"CSV missing required columns. Found: {list(df.columns)}, "
                f"need: {REQUIRED_COLUMNS}"
            )
        df.index = pd.to_datetime(df.index)
        df = df.sort_index()
        if start is not None:
            df = df[df.index >= pd.Timestamp(start)]
        if end is not None:
            df = df[df.index <= pd.Timestamp(end)]
        logger.debug("Loaded %d rows from %s", len(df), self.file_path)
        return df.loc[:, REQUIRED_COLUMNS]
