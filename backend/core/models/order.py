"""Atomic order model submitted by algo orders."""

from pydantic import BaseModel, Field


class AtomicOrder(BaseModel):
    """A single exchange order generated by an algo instance."""

    symbol: str
    type: str  # e.g. "EXCHANGE MARKET", "LIMIT"
    amount: float  # Positive = buy, negative = sell
    price: float | None = None
    lev: int | None = None
    cid: int  # Client order id (ms timestamp)
    gid: str  # Group id of the owning algo instance
    meta: dict = Field(default_factory=dict)
