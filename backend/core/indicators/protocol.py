"""Indicator protocol consumed by the crossover core."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Indicator(Protocol):
    """Incremental, stateful indicator.

    Values are fed one point at a time. The last point can be amended
    while its candle period is still forming.
    """

    def length(self) -> int:
        """Number of points accumulated so far (0 = unseeded)."""
        ...

    def add(self, value: float) -> None:
        """Append a new point."""
        ...

    def update(self, value: float) -> None:
        """Replace the most recent point."""
        ...

    def value(self) -> float:
        """Current indicator value (NaN until enough points exist)."""
        ...

    def crossed(self, target: float) -> bool:
        """Check whether the last two values crossed ``target``."""
        ...
