"""Algo instance context and the helper handle given to handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from core.host.host import AlgoHost
    from core.strategy.protocol import AlgoOrder

logger = logging.getLogger(__name__)


class InstanceHelpers:
    """Capabilities an instance's handlers use to talk to the outside.

    - debug: instance-scoped debug logging
    - update_state: apply a state patch (awaited before it resolves)
    - emit_self: route an event back into this instance's own handlers
    - emit: route an event to the host bus
    """

    def __init__(self, host: AlgoHost, instance: AlgoInstance):
        self._host = host
        self._instance = instance

    def debug(self, msg: str, *args: Any) -> None:
        logger.debug("[%s] " + msg, self._instance.gid, *args)

    async def update_state(self, patch: dict[str, Any]) -> None:
        """Apply ``patch`` to the instance state, then persist it.

        Raises:
            AttributeError: If the patch names a field the state does not have.
        """
        state = self._instance.state
        for key, value in patch.items():
            if not hasattr(state, key):
                raise AttributeError(
                    f"{type(state).__name__} has no field '{key}' (instance {self._instance.gid})"
                )
            setattr(state, key, value)

        await self._host.save_state(self._instance.gid, patch)

    async def emit_self(self, event: str, *args: Any) -> None:
        await self._host.trigger_self(self._instance, event, *args)

    async def emit(self, event: str, *args: Any) -> None:
        await self._host.emit(self._instance, event, *args)


@dataclass
class AlgoInstance:
    """A live algo order execution context."""

    gid: str
    algo: AlgoOrder
    state: Any
    stopped: bool = False
    h: InstanceHelpers = field(init=False, repr=False)

    def bind(self, host: AlgoHost) -> AlgoInstance:
        self.h = InstanceHelpers(host, self)
        return self
