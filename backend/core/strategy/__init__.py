"""Algo order plugin system.

Public API:
- AlgoOrder: Protocol that all algo order definitions must implement
- register_algo: Decorator to register an algo class
- create_algo: Factory function to instantiate algos by id
- list_algos: Discover all registered algos

Importing this package auto-registers all built-in algos.
"""

from core.strategy.protocol import (
    AlgoOrder,
    BusCallback,
    EventHandler,
    SaveStateCallback,
    call_handler,
    self_event,
)
from core.strategy.registry import (
    UnknownAlgoError,
    register_algo,
    create_algo,
    list_algos,
)

# Import built-in algos to trigger auto-registration
import core.strategy.ma_crossover  # noqa: F401

__all__ = [
    "AlgoOrder",
    "BusCallback",
    "EventHandler",
    "SaveStateCallback",
    "call_handler",
    "self_event",
    "UnknownAlgoError",
    "register_algo",
    "create_algo",
    "list_algos",
]
