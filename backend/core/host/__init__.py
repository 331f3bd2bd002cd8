"""Algo order host runtime (per-instance sequential event handling)."""

from core.host.instance import AlgoInstance, InstanceHelpers
from core.host.host import AlgoHost, InstanceNotFoundError
from core.host.events import (
    EVENT_CANDLES,
    EVENT_SUBMIT_ALL,
    EVENT_STOP,
    EVENT_LIFE_START,
    EVENT_LIFE_STOP,
)

__all__ = [
    "AlgoInstance",
    "InstanceHelpers",
    "AlgoHost",
    "InstanceNotFoundError",
    "EVENT_CANDLES",
    "EVENT_SUBMIT_ALL",
    "EVENT_STOP",
    "EVENT_LIFE_START",
    "EVENT_LIFE_STOP",
]
