"""Crossover detection between the long and short indicators."""

import math

from core.indicators import Indicator


def _is_ready(value) -> bool:
    """Check if an indicator value is a finite number."""
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def detect_crossover(long_indicator: Indicator, short_indicator: Indicator) -> bool:
    """Check whether the short indicator crossed the long indicator's value.

    Not-ready indicators (NaN/None values) never report a crossing and the
    crossing predicate is not evaluated for them. The direction of the
    crossing is up to the short indicator's ``crossed`` implementation.
    """
    long_value = long_indicator.value()
    short_value = short_indicator.value()

    if not (_is_ready(long_value) and _is_ready(short_value)):
        return False

    return bool(short_indicator.crossed(long_value))
