from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import asdict, is_dataclass
from datetime import datetime

import pandas as pd

from streamta.data.bar import Bar
from streamta.data.base import DataFeed
from streamta.indicators.base import Indicator

logger = logging.getLogger(__name__)


class IndicatorEngine:
    """Feeds bars one at a time through a fixed set of labelled indicators.

    Each indicator receives every bar via ``update_bar``; outputs are collected
    per bar. Multi-valued outputs expand into ``label.field`` columns.
    """

    def __init__(self, indicators: Mapping[str, Indicator]) -> None:
        if not indicators:
            raise ValueError("IndicatorEngine needs at least one indicator")
        self.indicators = dict(indicators)
        self._rows: list[dict[str, float]] = []
        self._index: list[datetime | int] = []

    def on_bar(self, bar: Bar) -> dict[str, float]:
        row: dict[str, float] = {}
        for label, indicator in self.indicators.items():
            _flatten(row, label, indicator.update_bar(bar))
        self._index.append(bar.timestamp if bar.timestamp is not None else len(self._index))
        self._rows.append(row)
        return row

    def run_bars(self, bars: Iterable[Bar]) -> pd.DataFrame:
        logger.info(
            "Streaming bars through %s",
            ", ".join(str(i) for i in self.indicators.values()),
        )
        count = 0
        for bar in bars:
            self.on_bar(bar)
            count += 1
        logger.info("Processed %d bars", count)
        return self.results()

    def run(
        self,
        data_feed: DataFeed,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> pd.DataFrame:
        return self.run_bars(data_feed.iter_bars(start, end))

    def results(self) -> pd.DataFrame:
        return pd.DataFrame(self._rows, index=pd.Index(self._index, name="timestamp"))

    def reset(self) -> None:
        for indicator in self.indicators.values():
            indicator.reset()
        self._rows = []
        self._index = []


def _flatten(row: dict[str, float], label: str, output: object) -> None:
    if is_dataclass(output) and not isinstance(output, type):
        for key, val in asdict(output).items():
            row[f"{label}.{key}"] = val
    else:
        row[label] = output  # type: ignore[assignment]
