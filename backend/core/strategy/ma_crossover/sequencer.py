"""Indicator sequencing: seed, append or amend from a candle batch.

Candle batches arrive most-recent-first. An empty indicator is seeded
with the whole batch (oldest first); after that only the latest candle
is used, amending the last point when its timestamp matches the last
candle seen for that side (the period is still forming) and appending
otherwise.
"""

from __future__ import annotations

from enum import Enum

from core.host.instance import AlgoInstance
from core.indicators import Indicator
from core.models import Candle, CandlePrice
from core.strategy.ma_crossover.models import MACrossoverState, Side


class UpdateOp(str, Enum):
    """Operation applied to an indicator for one batch."""

    SEED = "seed"
    APPEND = "append"
    AMEND = "amend"


def choose_update(
    indicator: Indicator,
    candle: Candle,
    last_candle: Candle | None,
) -> UpdateOp:
    """Decide how ``candle`` (the latest of a batch) updates ``indicator``."""
    if indicator.length() == 0:
        return UpdateOp.SEED
    if last_candle is None:
        return UpdateOp.APPEND
    if last_candle.mts == candle.mts:
        return UpdateOp.AMEND
    return UpdateOp.APPEND


def apply_update(
    indicator: Indicator,
    candles: list[Candle],
    price_field: CandlePrice,
    last_candle: Candle | None,
) -> UpdateOp | None:
    """Feed a most-recent-first candle batch into ``indicator``.

    Returns:
        The operation applied, or None for an empty batch.
    """
    if not candles:
        return None

    latest = candles[0]
    op = choose_update(indicator, latest, last_candle)

    if op is UpdateOp.SEED:
        for candle in reversed(candles):
            indicator.add(candle.price(price_field))
    elif op is UpdateOp.AMEND:
        indicator.update(latest.price(price_field))
    else:
        indicator.add(latest.price(price_field))

    return op


async def sequence_side(instance: AlgoInstance, side: Side, candles: list[Candle]) -> bool:
    """Update one side's indicator and persist its last seen candle.

    The state update is awaited so the next batch for this instance sees
    the new last candle.

    Returns:
        True if the indicator was updated.
    """
    state: MACrossoverState = instance.state
    indicator = state.indicator(side)
    price_field = state.indicator_args(side).candle_price

    op = apply_update(indicator, candles, price_field, state.last_candle(side))
    if op is None:
        instance.h.debug("empty %s candle batch, nothing to update", side.value)
        return False

    latest = candles[0]
    if op is UpdateOp.SEED:
        instance.h.debug(
            "seeded %s indicator with %d candle prices", side.value, len(candles)
        )
    else:
        instance.h.debug(
            "%s %s indicator with candle price %f [mts=%d]",
            "amended" if op is UpdateOp.AMEND else "appended",
            side.value,
            latest.price(price_field),
            latest.mts,
        )

    await instance.h.update_state({side.last_candle_field: latest})
    return True
