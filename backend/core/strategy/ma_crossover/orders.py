"""Atomic order generation for the MA crossover algo."""

from __future__ import annotations

import time

from core.models import AtomicOrder
from core.strategy.ma_crossover.models import MA_CROSSOVER_ALGO_ID, MACrossoverState


def _order_type(order_type: str, margin: bool, futures: bool) -> str:
    """Exchange-wallet orders carry the 'EXCHANGE ' prefix."""
    if margin or futures:
        return order_type
    return f"EXCHANGE {order_type}"


def generate_order(state: MACrossoverState, cid: int | None = None) -> AtomicOrder:
    """Build the order submitted when the crossover fires.

    Args:
        state: Instance state holding the algo args and gid
        cid: Client order id (defaults to the current ms timestamp)
    """
    args = state.args

    return AtomicOrder(
        symbol=args.symbol,
        type=_order_type(args.order_type, args.margin, args.futures),
        amount=args.amount,
        price=args.order_price if args.order_type == "LIMIT" else None,
        lev=args.lev if args.futures else None,
        cid=cid if cid is not None else int(time.time() * 1000),
        gid=state.gid,
        meta={"algo_id": MA_CROSSOVER_ALGO_ID},
    )
