"""Main application entry point.

Starts the configured algo instances on an AlgoHost. The market-data feed
(which calls ``host.on_candles``) and the exchange connection (listening
for ``exec:order:submit:all``) are attached by the embedding process.
"""

import asyncio
import logging
import signal
from pathlib import Path

from app.algo_config import AlgoConfig, load_algo_config
from app.config import Settings, get_settings
from core.host import AlgoHost, EVENT_STOP, EVENT_SUBMIT_ALL
from core.models import AtomicOrder
from core.strategy.protocol import BusCallback

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=settings.log_format,
    )

    # Reduce noise from asyncio debug output
    logging.getLogger("asyncio").setLevel(logging.WARNING)


async def log_submitted_orders(gid: str, orders: list[AtomicOrder], delay: int) -> None:
    """Default order listener: log orders when no exchange is attached."""
    for order in orders:
        logger.info(
            f"[{gid}] order ready (no exchange attached): {order.type} "
            f"{order.amount} {order.symbol} cid={order.cid} delay={delay}ms"
        )


async def build_host(
    config: AlgoConfig,
    settings: Settings | None = None,
    submit_orders: BusCallback | None = None,
) -> AlgoHost:
    """Create an AlgoHost and start every enabled configured instance.

    Args:
        config: Algo instances to start
        settings: Application settings (cached settings if omitted)
        submit_orders: Listener for exec:order:submit:all (gid, orders, delay)
    """
    settings = settings or get_settings()
    host = AlgoHost()
    host.on(EVENT_SUBMIT_ALL, submit_orders or log_submitted_orders)

    for entry in config.get_enabled():
        args = dict(entry.args)
        args.setdefault("submit_delay", settings.default_submit_delay)
        await host.start_instance(entry.algo_id, args, gid=entry.gid)

    logger.info(f"Algo host running {len(host.instances)} instances")
    return host


async def run(config_path: Path | None = None) -> None:
    """Run the algo host until SIGINT/SIGTERM or all instances have stopped."""
    settings = get_settings()
    configure_logging(settings)

    if config_path is None and settings.algo_config_path:
        config_path = Path(settings.algo_config_path)
    config = load_algo_config(config_path)
    host = await build_host(config, settings)

    shutdown = asyncio.Event()

    async def _on_stop(gid: str) -> None:
        # Host removes the instance after the current event; last one ends the run
        if all(i.stopped for i in host.instances.values()):
            shutdown.set()

    host.on(EVENT_STOP, _on_stop)
    if not host.instances:
        shutdown.set()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, shutdown.set)
        except NotImplementedError:
            # Windows event loops have no signal handlers
            pass

    await shutdown.wait()
    await host.close()
    logger.info("Shutdown complete")


def main():
    """Run the application."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
