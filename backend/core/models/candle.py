"""Candle (OHLCV) data models and candle channel metadata."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CandlePrice = Literal["open", "high", "low", "close", "volume"]


class Candle(BaseModel):
    """Candle data model as delivered by the market-data feed."""

    model_config = ConfigDict(frozen=True)

    mts: int  # Period start, milliseconds since epoch
    open: float
    close: float
    high: float
    low: float
    volume: float = 0.0

    def price(self, field: CandlePrice) -> float:
        """Get the configured price field of this candle."""
        return getattr(self, field)


class MalformedChannelKeyError(ValueError):
    """Raised when a candle channel key cannot be split into its fields."""


class CandleChannel(BaseModel):
    """Parsed candle channel key (``type:timeframe:symbol``)."""

    model_config = ConfigDict(frozen=True)

    type: str
    timeframe: str
    symbol: str

    @classmethod
    def from_key(cls, key: str) -> CandleChannel:
        """Parse a colon-delimited channel key.

        Raises:
            MalformedChannelKeyError: If the key does not carry a type,
                timeframe and symbol.
        """
        parts = key.split(":") if isinstance(key, str) else []
        if len(parts) < 3 or not parts[1] or not parts[2]:
            raise MalformedChannelKeyError(
                f"Malformed candle channel key {key!r}, expected 'type:timeframe:symbol'"
            )
        # Symbols may carry their own colons (e.g. 'tTESTBTC:TESTUSD')
        return cls(type=parts[0], timeframe=parts[1], symbol=":".join(parts[2:]))

    @property
    def key(self) -> str:
        return f"{self.type}:{self.timeframe}:{self.symbol}"


class ChannelFilter(BaseModel):
    """Subscription filter attached to a managed data channel."""

    key: str


class EventMeta(BaseModel):
    """Source channel information delivered alongside a candle batch."""

    chan_filter: ChannelFilter = Field(alias="chanFilter")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def for_key(cls, key: str) -> EventMeta:
        return cls(chan_filter=ChannelFilter(key=key))

    @property
    def channel(self) -> CandleChannel:
        return CandleChannel.from_key(self.chan_filter.key)
