"""Candle channel filtering for the MA crossover algo."""

from core.models import EventMeta, MACrossoverArgs
from core.strategy.ma_crossover.models import Side


def match_sides(args: MACrossoverArgs, meta: EventMeta) -> list[Side]:
    """Return the sides a candle batch on ``meta``'s channel updates.

    Batches for other symbols, or for timeframes neither side uses, match
    nothing. Both sides match when they share a timeframe.

    Raises:
        MalformedChannelKeyError: If the channel key cannot be parsed.
    """
    channel = meta.channel

    if channel.symbol != args.symbol:
        return []

    return [
        side
        for side, side_args in ((Side.LONG, args.long), (Side.SHORT, args.short))
        if channel.timeframe == side_args.candle_time_frame
    ]
