"""MA Crossover algo order package.

Importing this package triggers algo registration via the
@register_algo decorator on MACrossover.
"""

from core.strategy.ma_crossover.algo import MACrossover
from core.strategy.ma_crossover.channel import match_sides
from core.strategy.ma_crossover.detector import detect_crossover
from core.strategy.ma_crossover.dispatcher import SUBMIT_ORDER_EVENT, fire_trigger
from core.strategy.ma_crossover.models import (
    MA_CROSSOVER_ALGO_ID,
    MACrossoverState,
    Side,
    TriggerState,
)
from core.strategy.ma_crossover.orders import generate_order
from core.strategy.ma_crossover.sequencer import (
    UpdateOp,
    apply_update,
    choose_update,
    sequence_side,
)

__all__ = [
    "MACrossover",
    "MA_CROSSOVER_ALGO_ID",
    "MACrossoverState",
    "Side",
    "TriggerState",
    "SUBMIT_ORDER_EVENT",
    "UpdateOp",
    "apply_update",
    "choose_update",
    "detect_crossover",
    "fire_trigger",
    "generate_order",
    "match_sides",
    "sequence_side",
]
