"""Configuration management for streamta using TOML files + kwargs overrides."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class FeedConfig:
    path: str = ""
    symbol: str = ""
    start: str = ""
    end: str = ""


@dataclass
class IndicatorSpec:
    name: str = "SMA"
    label: str = ""
    params: dict[str, object] = field(default_factory=dict)


def _default_indicators() -> list[IndicatorSpec]:
    return [IndicatorSpec(name="SMA", params={"period": 9})]


@dataclass
class StreamConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)
    indicators: list[IndicatorSpec] = field(default_factory=_default_indicators)

    @staticmethod
    def defaults() -> StreamConfig:
        return StreamConfig()

    @staticmethod
    def load(path: str | Path) -> StreamConfig:
        """Load config from a TOML file. Missing file returns defaults."""
        cfg = StreamConfig()
        p = Path(path)
        if not p.exists():
            return cfg

        with open(p, "rb") as f:
            data = tomllib.load(f)

        _apply_toml(cfg, data)
        return cfg

    @staticmethod
    def load_with_overrides(path: str | Path, **kwargs: object) -> StreamConfig:
        """Load from TOML, then apply keyword overrides.

        Override keys use dot notation mapped to flat names:
          logging.level=DEBUG
          feed.path=data/btc.csv
        """
        cfg = StreamConfig.load(path)
        _apply_overrides(cfg, kwargs)
        return cfg


def _apply_toml(cfg: StreamConfig, data: dict) -> None:
    if "logging" in data:
        lg = data["logging"]
        if "level" in lg:
            cfg.logging.level = str(lg["level"])

    if "feed" in data:
        fd = data["feed"]
        for key in ("path", "symbol", "start", "end"):
            if key in fd:
                setattr(cfg.feed, key, str(fd[key]))

    if "indicators" in data:
        specs = []
        for entry in data["indicators"]:
            if "name" not in entry:
                raise ValueError(f"Indicator entry missing 'name': {entry}")
            specs.append(IndicatorSpec(
                name=str(entry["name"]),
                label=str(entry.get("label", "")),
                params=dict(entry.get("params", {})),
            ))
        cfg.indicators = specs


def _apply_overrides(cfg: StreamConfig, overrides: dict[str, object]) -> None:
    mapping: dict[str, tuple[object, str]] = {
        "logging.level": (cfg.logging, "level"),
        "feed.path": (cfg.feed, "path"),
        "feed.symbol": (cfg.feed, "symbol"),
        "feed.start": (cfg.feed, "start"),
        "feed.end": (cfg.feed, "end"),
    }

    for key, value in overrides.items():
        if key not in mapping:
            raise ValueError(
                f"Unknown config override '{key}'. Available: {sorted(mapping)}"
            )
        obj, attr = mapping[key]
        setattr(obj, attr, str(value))
