"""Fire-once trigger: submit the order, then stop the instance."""

import logging

from core.host.events import EVENT_STOP
from core.host.instance import AlgoInstance
from core.strategy.ma_crossover.models import MACrossoverState, TriggerState

logger = logging.getLogger(__name__)

SUBMIT_ORDER_EVENT = "submit_order"


async def fire_trigger(instance: AlgoInstance) -> bool:
    """Transition ARMED -> FIRED and emit the order and stop signals.

    The state is marked FIRED before anything is emitted so a crossing
    seen again (while teardown is pending) cannot submit a second order.
    The stop is emitted even if submitting the order raises; the error
    still propagates to the caller.

    Returns:
        True if this call fired the trigger, False if it had already fired.
    """
    state: MACrossoverState = instance.state
    if state.trigger is TriggerState.FIRED:
        instance.h.debug("crossover already triggered, ignoring")
        return False

    await instance.h.update_state({"trigger": TriggerState.FIRED})
    logger.info(f"[{instance.gid}] crossover detected on {state.args.symbol}, submitting order")

    try:
        await instance.h.emit_self(SUBMIT_ORDER_EVENT)
    finally:
        await instance.h.emit(EVENT_STOP)
    return True
