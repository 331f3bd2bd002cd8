"""Data models shared by the algo host and strategies."""

from core.models.candle import (
    Candle,
    CandleChannel,
    CandlePrice,
    ChannelFilter,
    EventMeta,
    MalformedChannelKeyError,
)
from core.models.config import IndicatorArgs, IndicatorType, MACrossoverArgs, OrderType
from core.models.order import AtomicOrder

__all__ = [
    "Candle",
    "CandleChannel",
    "CandlePrice",
    "ChannelFilter",
    "EventMeta",
    "MalformedChannelKeyError",
    "IndicatorArgs",
    "IndicatorType",
    "MACrossoverArgs",
    "OrderType",
    "AtomicOrder",
]
