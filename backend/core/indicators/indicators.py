"""Incremental moving-average indicators.

Both indicators keep a history of computed values so that the last
point can be amended (same candle period re-delivered) and crossings
can be checked against the previous value.
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from core.indicators.protocol import Indicator

NAN = float("nan")


class _MovingAverage:
    """Shared bookkeeping for period-based moving averages."""

    name = "MA"

    def __init__(self, period: int):
        if period < 1:
            raise ValueError(f"{self.name} period must be >= 1, got {period}")
        self.period = period
        self._prices: list[float] = []
        self._values: list[float] = []

    def __repr__(self) -> str:
        return f"{self.name}({self.period})"

    def length(self) -> int:
        return len(self._prices)

    def add(self, value: float) -> None:
        self._prices.append(float(value))
        self._values.append(self._calculate(len(self._prices) - 1))

    def update(self, value: float) -> None:
        if not self._prices:
            self.add(value)
            return
        self._prices[-1] = float(value)
        self._values[-1] = self._calculate(len(self._prices) - 1)

    def value(self) -> float:
        return self._values[-1] if self._values else NAN

    def prev(self) -> float:
        return self._values[-2] if len(self._values) > 1 else NAN

    def crossed(self, target: float) -> bool:
        cur = self.value()
        prev = self.prev()
        if not (math.isfinite(cur) and math.isfinite(prev)):
            return False
        return (cur >= target and prev <= target) or (cur <= target and prev >= target)

    def _calculate(self, index: int) -> float:
        raise NotImplementedError


class SMA(_MovingAverage):
    """Simple moving average."""

    name = "MA"

    def _calculate(self, index: int) -> float:
        if index + 1 < self.period:
            return NAN
        window = np.array(self._prices[index + 1 - self.period : index + 1], dtype=np.float64)
        return float(np.mean(window))


class EMA(_MovingAverage):
    """Exponential moving average, seeded with the SMA of the first period."""

    name = "EMA"

    def __init__(self, period: int):
        super().__init__(period)
        self._multiplier = 2.0 / (period + 1)

    def _calculate(self, index: int) -> float:
        if index + 1 < self.period:
            return NAN
        if index + 1 == self.period:
            return float(np.mean(np.array(self._prices[: self.period], dtype=np.float64)))

        prev = self._values[index - 1]
        price = self._prices[index]
        return price * self._multiplier + prev * (1 - self._multiplier)


# Indicator type -> factory
_INDICATORS: dict[str, Callable[[int], Indicator]] = {
    "MA": SMA,
    "SMA": SMA,
    "EMA": EMA,
}


class UnknownIndicatorError(KeyError):
    """Raised when an indicator type is not registered."""


def create_indicator(indicator_type: str, period: int) -> Indicator:
    """Create an empty indicator by type name.

    Raises:
        UnknownIndicatorError: If the type is not registered.
    """
    factory = _INDICATORS.get(indicator_type.upper())
    if factory is None:
        available = ", ".join(sorted(_INDICATORS.keys()))
        raise UnknownIndicatorError(
            f"Unknown indicator type '{indicator_type}'. Available: {available}"
        )
    return factory(period)
