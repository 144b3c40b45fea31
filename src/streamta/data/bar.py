from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True, slots=True)
class Bar:
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: float = 0.0
    timestamp: datetime | None = None
    symbol: str = ""


class HasClose(Protocol):
    close: float


class HasHigh(Protocol):
    high: float


class HasLow(Protocol):
    low: float


class HasHLC(Protocol):
    high: float
    low: float
    close: float


class HasHLCV(Protocol):
    high: float
    low: float
    close: float
    volume: float


def typical_price(bar: HasHLC) -> float:
    """Average of high, low and close."""
    return (bar.high + bar.low + bar.close) / 3.0
