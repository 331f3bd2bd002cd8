"""MA Crossover algo order.

Waits for a short-period moving average to cross a long-period one and
then submits a single atomic order:
- Long/short indicators are fed from candle channels (timeframe and
  price field configurable per side)
- The first crossing submits the order and stops the instance

This module is pure business logic with no I/O dependencies; all I/O goes
through the instance helpers provided by the host.
"""

import logging
from typing import Any

from core.host.events import EVENT_CANDLES, EVENT_SUBMIT_ALL
from core.host.instance import AlgoInstance
from core.indicators import create_indicator
from core.models import Candle, EventMeta, MACrossoverArgs
from core.strategy.ma_crossover.channel import match_sides
from core.strategy.ma_crossover.detector import detect_crossover
from core.strategy.ma_crossover.dispatcher import SUBMIT_ORDER_EVENT, fire_trigger
from core.strategy.ma_crossover.models import MA_CROSSOVER_ALGO_ID, MACrossoverState
from core.strategy.ma_crossover.orders import generate_order
from core.strategy.ma_crossover.sequencer import sequence_side
from core.strategy.protocol import EventHandler, self_event
from core.strategy.registry import register_algo

logger = logging.getLogger(__name__)

CANDLE_CHANNEL_TYPE = "trade"


@register_algo(MA_CROSSOVER_ALGO_ID)
class MACrossover:
    """Moving average crossover algo order definition.

    Handlers:
    - data:managed:candles: update indicators, fire on crossover
    - self:submit_order: generate and submit the atomic order
    """

    @property
    def id(self) -> str:
        return MA_CROSSOVER_ALGO_ID

    @property
    def name(self) -> str:
        return "MA Crossover"

    @property
    def handlers(self) -> dict[str, EventHandler]:
        return {
            EVENT_CANDLES: self.on_data_managed_candles,
            self_event(SUBMIT_ORDER_EVENT): self.on_self_submit_order,
        }

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def parse_args(self, raw: Any) -> MACrossoverArgs:
        if isinstance(raw, MACrossoverArgs):
            return raw
        return MACrossoverArgs.model_validate(raw)

    def init_state(self, args: MACrossoverArgs, gid: str) -> MACrossoverState:
        """Create empty long/short indicators for a new instance."""
        return MACrossoverState(
            gid=gid,
            args=args,
            long_indicator=create_indicator(args.long.type, args.long.period),
            short_indicator=create_indicator(args.short.type, args.short.period),
        )

    def declare_channels(self, state: MACrossoverState) -> list[str]:
        """Candle channel keys for the long and short timeframes."""
        return [
            f"{CANDLE_CHANNEL_TYPE}:{tf}:{state.args.symbol}"
            for tf in state.args.timeframes
        ]

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    async def on_data_managed_candles(
        self,
        instance: AlgoInstance,
        candles: list[Candle],
        meta: EventMeta,
    ) -> None:
        """Update the indicators from a candle batch and check for a crossover.

        Args:
            instance: The algo instance
            candles: Candle batch, most recent first
            meta: Source channel information
        """
        state: MACrossoverState = instance.state
        sides = match_sides(state.args, meta)
        if not sides:
            return

        updated = False
        for side in sides:
            if await sequence_side(instance, side, candles):
                updated = True

        if not updated:
            return

        if detect_crossover(state.long_indicator, state.short_indicator):
            await fire_trigger(instance)

    async def on_self_submit_order(self, instance: AlgoInstance) -> None:
        """Submit the configured atomic order."""
        state: MACrossoverState = instance.state
        order = generate_order(state)

        logger.info(
            f"[{instance.gid}] submitting {order.type} {order.amount} {order.symbol}"
            + (f" @ {order.price}" if order.price is not None else "")
        )
        await instance.h.emit(EVENT_SUBMIT_ALL, instance.gid, [order], state.args.submit_delay)
