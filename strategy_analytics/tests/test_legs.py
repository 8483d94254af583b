"""Tests for single-leg expiration value and P/L."""

import pytest

from strategy_analytics.analytics.legs import intrinsic_value, leg_profit_loss, stock_profit_loss
from strategy_analytics.config import AnalyticsConfig
from strategy_analytics.models.leg import OptionLeg, StockPosition


class TestIntrinsicValue:
    """Test suite for intrinsic_value."""

    def test_call_in_the_money(self):
        assert intrinsic_value('call', 100.0, 112.5) == pytest.approx(12.5)

    def test_call_out_of_the_money(self):
        assert intrinsic_value('call', 100.0, 90.0) == 0.0

    def test_put_in_the_money(self):
        assert intrinsic_value('put', 100.0, 92.0) == pytest.approx(8.0)

    def test_put_out_of_the_money(self):
        assert intrinsic_value('put', 100.0, 101.0) == 0.0

    def test_at_strike_is_zero(self):
        assert intrinsic_value('call', 100.0, 100.0) == 0.0
        assert intrinsic_value('put', 100.0, 100.0) == 0.0


class TestLegProfitLoss:
    """Test suite for leg_profit_loss."""

    def test_long_call_profit(self):
        leg = OptionLeg('call', 'long', 100.0, 5.0)
        # (20 - 5) * 100
        assert leg_profit_loss(leg, 120.0) == pytest.approx(1500.0)

    def test_long_call_expires_worthless(self):
        leg = OptionLeg('call', 'long', 100.0, 5.0)
        assert leg_profit_loss(leg, 80.0) == pytest.approx(-500.0)

    def test_short_put_loss_with_quantity(self):
        leg = OptionLeg('put', 'short', 100.0, 3.0, quantity=2)
        # (3 - 10) * 100 * 2
        assert leg_profit_loss(leg, 90.0) == pytest.approx(-1400.0)

    def test_short_put_keeps_premium(self):
        leg = OptionLeg('put', 'short', 100.0, 3.0)
        assert leg_profit_loss(leg, 105.0) == pytest.approx(300.0)

    def test_long_and_short_mirror(self):
        long_leg = OptionLeg('put', 'long', 95.0, 2.0)
        short_leg = OptionLeg('put', 'short', 95.0, 2.0)

        for price in (80.0, 93.0, 95.0, 110.0):
            assert leg_profit_loss(long_leg, price) == pytest.approx(-leg_profit_loss(short_leg, price))

    def test_custom_multiplier(self):
        leg = OptionLeg('call', 'long', 100.0, 5.0)
        config = AnalyticsConfig(contract_multiplier=10)

        assert leg_profit_loss(leg, 120.0, config) == pytest.approx(150.0)


class TestStockProfitLoss:
    """Test suite for stock_profit_loss."""

    def test_gain(self):
        assert stock_profit_loss(StockPosition(shares=100, cost_basis=500.0), 520.0) == pytest.approx(2000.0)

    def test_loss(self):
        assert stock_profit_loss(StockPosition(shares=200, cost_basis=50.0), 45.0) == pytest.approx(-1000.0)
