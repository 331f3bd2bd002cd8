"""Tests for incremental moving-average indicators."""

import math

import pytest

from core.indicators import (
    EMA,
    SMA,
    Indicator,
    UnknownIndicatorError,
    create_indicator,
)


class TestSMA:
    """Tests for the simple moving average."""

    def test_nan_until_period_filled(self):
        indicator = SMA(3)
        indicator.add(1)
        indicator.add(2)

        assert indicator.length() == 2
        assert math.isnan(indicator.value())

    def test_value_is_window_mean(self):
        indicator = SMA(3)
        for price in [1, 2, 3, 4]:
            indicator.add(price)

        assert indicator.value() == pytest.approx(3.0)
        assert indicator.prev() == pytest.approx(2.0)

    def test_update_replaces_last_point(self):
        indicator = SMA(3)
        for price in [1, 2, 3]:
            indicator.add(price)

        indicator.update(6)

        assert indicator.length() == 3
        assert indicator.value() == pytest.approx(3.0)

    def test_update_on_empty_adds(self):
        indicator = SMA(1)
        indicator.update(5)

        assert indicator.length() == 1
        assert indicator.value() == 5

    def test_invalid_period(self):
        with pytest.raises(ValueError):
            SMA(0)


class TestEMA:
    """Tests for the exponential moving average."""

    def test_seeded_with_sma(self):
        indicator = EMA(3)
        for price in [1, 2, 3]:
            indicator.add(price)

        assert indicator.value() == pytest.approx(2.0)

    def test_exponential_step(self):
        indicator = EMA(3)  # multiplier = 0.5
        for price in [1, 2, 3, 4]:
            indicator.add(price)

        assert indicator.value() == pytest.approx(3.0)

    def test_update_recomputes_from_previous_value(self):
        indicator = EMA(3)
        for price in [1, 2, 3, 4]:
            indicator.add(price)

        indicator.update(6)

        assert indicator.length() == 4
        assert indicator.value() == pytest.approx(4.0)


class TestCrossed:
    """Tests for the crossing predicate."""

    def test_not_crossed_with_single_value(self):
        indicator = SMA(1)
        indicator.add(10)

        assert indicator.crossed(5) is False

    def test_crossed_upwards(self):
        indicator = SMA(1)
        indicator.add(9)
        indicator.add(11)

        assert indicator.crossed(10) is True

    def test_crossed_downwards(self):
        indicator = SMA(1)
        indicator.add(11)
        indicator.add(9)

        assert indicator.crossed(10) is True

    def test_not_crossed_same_side(self):
        indicator = SMA(1)
        indicator.add(11)
        indicator.add(12)

        assert indicator.crossed(10) is False

    def test_not_crossed_while_warming_up(self):
        indicator = SMA(2)
        indicator.add(9)
        indicator.add(11)

        # Previous value is NaN
        assert indicator.crossed(9.5) is False


class TestFactory:
    """Tests for create_indicator."""

    def test_create_by_type(self):
        assert isinstance(create_indicator("EMA", 10), EMA)
        assert isinstance(create_indicator("MA", 10), SMA)
        assert isinstance(create_indicator("sma", 10), SMA)

    def test_satisfies_protocol(self):
        assert isinstance(create_indicator("EMA", 5), Indicator)

    def test_unknown_type(self):
        with pytest.raises(UnknownIndicatorError, match="Unknown indicator type"):
            create_indicator("WMA", 10)
