"""MA Crossover algo state models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.indicators import Indicator
from core.models import Candle, IndicatorArgs, MACrossoverArgs

MA_CROSSOVER_ALGO_ID = "ma_crossover"


class Side(str, Enum):
    """Which of the two tracked indicators."""

    LONG = "long"
    SHORT = "short"

    @property
    def last_candle_field(self) -> str:
        """State field holding the last candle seen for this side."""
        return f"last_candle_{self.value}"


class TriggerState(str, Enum):
    """Trigger dispatcher state."""

    ARMED = "armed"
    FIRED = "fired"  # Terminal


@dataclass
class MACrossoverState:
    """Mutable per-instance state of an MA crossover algo order."""

    gid: str
    args: MACrossoverArgs
    long_indicator: Indicator
    short_indicator: Indicator
    last_candle_long: Candle | None = None
    last_candle_short: Candle | None = None
    trigger: TriggerState = TriggerState.ARMED

    def indicator(self, side: Side) -> Indicator:
        return self.long_indicator if side is Side.LONG else self.short_indicator

    def indicator_args(self, side: Side) -> IndicatorArgs:
        return self.args.long if side is Side.LONG else self.args.short

    def last_candle(self, side: Side) -> Candle | None:
        return getattr(self, side.last_candle_field)
