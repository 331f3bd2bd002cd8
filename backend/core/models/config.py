"""MA crossover algo order arguments."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from core.models.candle import CandlePrice

IndicatorType = Literal["EMA", "MA"]
OrderType = Literal["MARKET", "LIMIT"]


class IndicatorArgs(BaseModel):
    """Configuration of one side (long or short) of the crossover."""

    type: IndicatorType = "EMA"
    period: int = 20
    candle_time_frame: str = "1m"
    candle_price: CandlePrice = "close"


class MACrossoverArgs(BaseModel):
    """Arguments for a single MA crossover algo order instance.

    The sign of ``amount`` selects the order side (positive buys,
    negative sells).
    """

    symbol: str
    amount: float
    order_type: OrderType = "MARKET"
    order_price: float | None = None

    # Margin/derivatives flags select the order type prefix
    margin: bool = False
    futures: bool = False
    lev: int = 10

    # Delay (ms) passed along with the order submission
    submit_delay: int = 0

    long: IndicatorArgs
    short: IndicatorArgs

    @property
    def timeframes(self) -> list[str]:
        """Distinct candle timeframes this instance listens to."""
        frames = [self.long.candle_time_frame]
        if self.short.candle_time_frame not in frames:
            frames.append(self.short.candle_time_frame)
        return frames
