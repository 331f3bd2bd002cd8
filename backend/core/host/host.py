"""Algo host: runs algo order instances and routes their events.

Each instance owns an asyncio queue drained by a single worker task, so
the handlers of one instance never run concurrently. Different instances
are independent and run side by side.

Bus events emitted by instances:
- exec:order:submit:all (gid, orders, delay): forwarded to listeners
- exec:stop: marks the instance stopped so its worker exits after the
  current event; listeners are called with the instance gid
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any

from core.host.events import EVENT_CANDLES, EVENT_LIFE_START, EVENT_LIFE_STOP, EVENT_STOP
from core.host.instance import AlgoInstance
from core.models import Candle, EventMeta
from core.strategy.protocol import BusCallback, SaveStateCallback, call_handler, self_event
from core.strategy.registry import create_algo

logger = logging.getLogger(__name__)


class InstanceNotFoundError(KeyError):
    """Raised when an event targets a gid with no live instance."""


@dataclass
class _Job:
    event: str
    args: tuple
    done: asyncio.Future | None = None


@dataclass
class _Worker:
    instance: AlgoInstance
    queue: asyncio.Queue = field(default_factory=asyncio.Queue)
    task: asyncio.Task | None = None


class AlgoHost:
    """Hosts algo order instances.

    Usage:
        host = AlgoHost()
        host.on("exec:order:submit:all", submit_orders)

        instance = await host.start_instance("ma_crossover", args)
        await host.on_candles(candles, EventMeta.for_key("trade:1m:tBTCUSD"))
    """

    def __init__(self, save_state: SaveStateCallback | None = None):
        """
        Args:
            save_state: Optional async callback persisting state patches
        """
        self._save_state = save_state
        self._workers: dict[str, _Worker] = {}
        self._listeners: dict[str, list[BusCallback]] = defaultdict(list)

    # ------------------------------------------------------------------
    # Bus listeners
    # ------------------------------------------------------------------

    def on(self, event: str, callback: BusCallback) -> None:
        """Register a listener for a bus event."""
        if callback not in self._listeners[event]:
            self._listeners[event].append(callback)

    def off(self, event: str, callback: BusCallback) -> None:
        """Unregister a listener for a bus event."""
        if callback in self._listeners[event]:
            self._listeners[event].remove(callback)

    # ------------------------------------------------------------------
    # Instance lifecycle
    # ------------------------------------------------------------------

    @property
    def instances(self) -> dict[str, AlgoInstance]:
        return {gid: w.instance for gid, w in self._workers.items()}

    def get_instance(self, gid: str) -> AlgoInstance:
        worker = self._workers.get(gid)
        if worker is None:
            raise InstanceNotFoundError(f"No live algo instance with gid '{gid}'")
        return worker.instance

    async def start_instance(
        self,
        algo_id: str,
        args: Any,
        gid: str | None = None,
    ) -> AlgoInstance:
        """Create an instance of a registered algo and start its worker.

        Args:
            algo_id: Registered algo id (e.g. 'ma_crossover')
            args: Algo args model, or raw mapping coerced by the algo
            gid: Optional group id (random if omitted)
        """
        algo = create_algo(algo_id)
        gid = gid or uuid.uuid4().hex
        if gid in self._workers:
            raise ValueError(f"Algo instance '{gid}' is already running")

        parsed = algo.parse_args(args)
        instance = AlgoInstance(gid=gid, algo=algo, state=algo.init_state(parsed, gid)).bind(self)

        worker = _Worker(instance=instance)
        self._workers[gid] = worker
        worker.task = asyncio.create_task(self._run(worker), name=f"algo-{gid}")

        channels = algo.declare_channels(instance.state)
        logger.info(f"Started {algo.id} instance {gid} on channels {channels}")

        await self.dispatch(gid, EVENT_LIFE_START, wait=True)
        return instance

    async def stop_instance(self, gid: str) -> None:
        """Stop an instance after the event it is currently handling."""
        worker = self._workers.get(gid)
        if worker is None:
            raise InstanceNotFoundError(f"No live algo instance with gid '{gid}'")

        worker.instance.stopped = True
        await worker.queue.put(None)
        if worker.task and worker.task is not asyncio.current_task():
            await worker.task

    async def close(self) -> None:
        """Stop every live instance."""
        for gid in list(self._workers):
            if gid in self._workers:
                await self.stop_instance(gid)

    # ------------------------------------------------------------------
    # Event routing
    # ------------------------------------------------------------------

    async def dispatch(self, gid: str, event: str, *args: Any, wait: bool = False) -> None:
        """Queue an event for one instance.

        Events still queued when the instance stops are dropped; waiting
        callers then return without the event having been handled.

        Args:
            gid: Target instance
            event: Handler event name
            wait: Await handling and re-raise handler errors
        """
        worker = self._workers.get(gid)
        if worker is None or worker.instance.stopped:
            raise InstanceNotFoundError(f"No live algo instance with gid '{gid}'")

        done = asyncio.get_running_loop().create_future() if wait else None
        await worker.queue.put(_Job(event=event, args=args, done=done))
        if done is not None:
            await done

    async def on_candles(
        self,
        candles: list[Candle],
        meta: EventMeta,
        wait: bool = True,
    ) -> None:
        """Fan a candle batch out to every live instance.

        Instances that stop before the batch reaches them are skipped.
        """
        gids = [gid for gid, w in self._workers.items() if not w.instance.stopped]
        await asyncio.gather(*(self._deliver(gid, candles, meta, wait) for gid in gids))

    async def _deliver(self, gid: str, candles: list[Candle], meta: EventMeta, wait: bool) -> None:
        try:
            await self.dispatch(gid, EVENT_CANDLES, candles, meta, wait=wait)
        except InstanceNotFoundError:
            logger.debug(f"[{gid}] stopped, candle batch not delivered")

    async def trigger_self(self, instance: AlgoInstance, event: str, *args: Any) -> None:
        """Run a self-directed event inline on the calling handler's task."""
        handled = await call_handler(instance, self_event(event), *args)
        if not handled:
            logger.warning(f"[{instance.gid}] no handler for self event '{event}'")

    async def emit(self, instance: AlgoInstance, event: str, *args: Any) -> None:
        """Route an instance's bus event to listeners."""
        if event == EVENT_STOP:
            logger.info(f"[{instance.gid}] stop requested by {instance.algo.id}")
            instance.stopped = True
            args = (instance.gid,)

        for callback in list(self._listeners.get(event, [])):
            await callback(*args)

    async def save_state(self, gid: str, patch: dict[str, Any]) -> None:
        if self._save_state:
            await self._save_state(gid, patch)

    # ------------------------------------------------------------------
    # Worker
    # ------------------------------------------------------------------

    async def _run(self, worker: _Worker) -> None:
        instance = worker.instance
        try:
            while True:
                job = await worker.queue.get()
                try:
                    if job is None:
                        break
                    await self._handle(instance, job)
                finally:
                    worker.queue.task_done()

                if instance.stopped:
                    break
        finally:
            await self._teardown(worker)

    async def _handle(self, instance: AlgoInstance, job: _Job) -> None:
        try:
            handled = await call_handler(instance, job.event, *job.args)
            if not handled:
                instance.h.debug("no handler for event '%s'", job.event)
        except Exception as e:
            if job.done is not None and not job.done.done():
                job.done.set_exception(e)
            else:
                logger.exception(f"[{instance.gid}] error handling '{job.event}': {e}")
            return

        if job.done is not None and not job.done.done():
            job.done.set_result(None)

    async def _teardown(self, worker: _Worker) -> None:
        instance = worker.instance
        self._workers.pop(instance.gid, None)

        # Drop events queued behind the stop; their waiters resolve unhandled
        while not worker.queue.empty():
            job = worker.queue.get_nowait()
            worker.queue.task_done()
            if job is not None and job.done is not None and not job.done.done():
                job.done.set_result(None)

        try:
            await call_handler(instance, EVENT_LIFE_STOP)
        except Exception as e:
            logger.exception(f"[{instance.gid}] error handling '{EVENT_LIFE_STOP}': {e}")

        logger.info(f"Stopped {instance.algo.id} instance {instance.gid}")
