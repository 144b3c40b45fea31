from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import astuple
from numbers import Integral, Real
from typing import Any

from streamta.data.bar import HasClose


def check_period(period: int, name: str = "period") -> int:
    """Validate a window size at construction time."""
    if isinstance(period, bool) or not isinstance(period, Integral) or period < 1:
        raise ValueError(f"{name} must be an integer >= 1, got {period!r}")
    return int(period)


def check_multiplier(multiplier: float, name: str = "multiplier") -> float:
    if (
        isinstance(multiplier, bool)
        or not isinstance(multiplier, Real)
        or not math.isfinite(multiplier)
    ):
        raise ValueError(f"{name} must be a finite real number, got {multiplier!r}")
    return float(multiplier)


def format_param(param: object) -> str:
    if isinstance(param, float):
        return f"{param:g}"
    return str(param)


class Indicator(ABC):
    """Base class for all streaming indicators."""

    name: str = ""
    period: int

    @abstractmethod
    def update(self, value: float) -> Any:
        """Feed a new value and return the updated indicator output."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reset indicator state to that of a fresh instance."""
        ...

    @property
    @abstractmethod
    def ready(self) -> bool:
        """True once a full window of data has been fed."""
        ...

    @property
    @abstractmethod
    def value(self) -> Any:
        """Latest output, or None before the first update."""
        ...

    def update_bar(self, bar: HasClose) -> Any:
        """Convenience: feed bar.close and return result."""
        return self.update(bar.close)

    def params(self) -> tuple[object, ...]:
        return (self.period,)

    def __str__(self) -> str:
        params = self.params()
        if not params:
            return self.name
        return f"{self.name}({', '.join(format_param(p) for p in params)})"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class IndicatorOutput:
    """Mixin for multi-valued outputs."""

    def astuple(self) -> tuple[float, ...]:
        return astuple(self)  # type: ignore[call-overload]
