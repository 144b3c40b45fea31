#!/usr/bin/env python3
"""Stream an OHLCV CSV through the indicators configured in a TOML file."""

import argparse
from datetime import datetime

import pandas as pd

from streamta.core.config import StreamConfig
from streamta.core.engine import IndicatorEngine
from streamta.core.logging import setup_logging
from streamta.data.csv_feed import CsvDataFeed
from streamta.indicators.registry import create_indicator


def _parse_date(value: str) -> datetime | None:
    return datetime.strptime(value, "%Y-%m-%d") if value else None


def main() -> None:
    parser = argparse.ArgumentParser(description="Run streamta indicators over a CSV")
    parser.add_argument("--config", default="config/default.toml", help="Path to TOML config file")
    parser.add_argument("--csv", dest="feed_path", help="OHLCV CSV file (overrides feed.path)")
    parser.add_argument("--symbol", dest="feed_symbol")
    parser.add_argument("--logging.level", dest="logging_level")
    parser.add_argument("--start", help="Start date YYYY-MM-DD")
    parser.add_argument("--end", help="End date YYYY-MM-DD")
    parser.add_argument("--tail", type=int, default=20, help="Rows to print (0 = all)")
    args = parser.parse_args()

    # Build overrides from CLI args
    overrides: dict[str, object] = {}
    if args.feed_path is not None:
        overrides["feed.path"] = args.feed_path
    if args.feed_symbol is not None:
        overrides["feed.symbol"] = args.feed_symbol
    if args.logging_level is not None:
        overrides["logging.level"] = args.logging_level
    if args.start is not None:
        overrides["feed.start"] = args.start
    if args.end is not None:
        overrides["feed.end"] = args.end

    cfg = StreamConfig.load_with_overrides(args.config, **overrides)
    setup_logging(cfg.logging.level)

    if not cfg.feed.path:
        parser.error("no CSV given: pass --csv or set feed.path in the config")

    indicators = {}
    for spec in cfg.indicators:
        indicator = create_indicator(spec.name, **spec.params)
        indicators[spec.label or str(indicator)] = indicator

    feed = CsvDataFeed(cfg.feed.path, symbol=cfg.feed.symbol)
    engine = IndicatorEngine(indicators)
    results = engine.run(feed, _parse_date(cfg.feed.start), _parse_date(cfg.feed.end))

    if args.tail:
        results = results.tail(args.tail)
    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(f"{feed.symbol}: {len(engine.results())} bars")
        print(results.to_string(float_format=lambda x: f"{x:.4f}"))


if __name__ == "__main__":
    main()
