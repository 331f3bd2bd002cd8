"""Technical indicators (pure math, no I/O)."""

from core.indicators.protocol import Indicator
from core.indicators.indicators import (
    EMA,
    SMA,
    UnknownIndicatorError,
    create_indicator,
)

__all__ = [
    "Indicator",
    "EMA",
    "SMA",
    "UnknownIndicatorError",
    "create_indicator",
]
