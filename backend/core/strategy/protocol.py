"""Algo order protocol defining the interface all algo orders must implement.

This module provides:
- AlgoOrder: Runtime-checkable Protocol that algo order definitions must satisfy
- Type aliases for the handler and callback functions used by the host
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from core.host.instance import AlgoInstance


# ---------------------------------------------------------------------------
# Callback type aliases
# ---------------------------------------------------------------------------
EventHandler = Callable[..., Awaitable[None]]
BusCallback = Callable[..., Awaitable[None]]
SaveStateCallback = Callable[[str, dict[str, Any]], Awaitable[None]]


# ---------------------------------------------------------------------------
# AlgoOrder Protocol
# ---------------------------------------------------------------------------
@runtime_checkable
class AlgoOrder(Protocol):
    """Protocol that all algo order definitions must implement.

    An algo order definition is stateless; all per-instance data lives in
    the state object returned by ``init_state`` and is owned by the
    ``AlgoInstance`` the host creates around it.
    """

    @property
    def id(self) -> str:
        """Unique algo order identifier (e.g., 'ma_crossover')."""
        ...

    @property
    def name(self) -> str:
        """Human readable name."""
        ...

    @property
    def handlers(self) -> dict[str, EventHandler]:
        """Event name -> coroutine taking ``(instance, *args)``.

        Self-directed events are registered under ``self:<name>``.
        """
        ...

    def parse_args(self, raw: Any) -> Any:
        """Coerce raw (e.g. YAML) arguments into the algo's args model."""
        ...

    def init_state(self, args: Any, gid: str) -> Any:
        """Build the initial state for a new instance."""
        ...

    def declare_channels(self, state: Any) -> list[str]:
        """Data channel keys the instance needs to receive."""
        ...


def self_event(name: str) -> str:
    """Handler key for a self-directed event."""
    return f"self:{name}"


async def call_handler(instance: AlgoInstance, event: str, *args: Any) -> bool:
    """Invoke the instance's handler for ``event``.

    Returns:
        False if the algo has no handler for the event, True otherwise.
    """
    handler = instance.algo.handlers.get(event)
    if handler is None:
        return False
    await handler(instance, *args)
    return True
