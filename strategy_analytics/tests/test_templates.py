"""Tests for strategy templates."""

import pytest

from strategy_analytics.analytics.aggregator import aggregate_strategy
from strategy_analytics.analytics.greeks import estimate_greeks
from strategy_analytics.builders.templates import STRATEGY_TEMPLATES, build_template_legs
from strategy_analytics.models.leg import MarketContext
from strategy_analytics.utils.error_handling import InvalidInputError


@pytest.fixture
def market():
    return MarketContext(underlying_price=185.0, days_to_expiry=30)


class TestBuildTemplateLegs:
    """Test suite for build_template_legs."""

    @pytest.mark.parametrize("key", sorted(STRATEGY_TEMPLATES))
    def test_every_template_builds(self, key, market):
        legs = build_template_legs(key, market)

        assert len(legs) == len(STRATEGY_TEMPLATES[key].legs)
        for leg in legs:
            assert leg.quantity == 1
            assert leg.greeks == estimate_greeks(leg, market)

    def test_iron_butterfly(self, market):
        legs = build_template_legs('iron-butterfly', market)

        assert [(l.option_type, l.side, l.strike, l.premium) for l in legs] == [
            ('put', 'long', 175.0, pytest.approx(1.5)),
            ('put', 'short', 185.0, pytest.approx(5.0)),
            ('call', 'short', 185.0, pytest.approx(5.0)),
            ('call', 'long', 195.0, pytest.approx(1.5)),
        ]

    def test_covered_call_template(self, market):
        (leg,) = build_template_legs('covered-call', market)

        assert leg.side == 'short'
        assert leg.strike == pytest.approx(190.0)
        assert leg.premium == pytest.approx(4.0)

    def test_custom_base_premium(self, market):
        (leg,) = build_template_legs('long-call', market, base_premium=8.0)
        assert leg.premium == pytest.approx(8.0)

    def test_bull_call_spread_is_bullish(self, market):
        legs = build_template_legs('bull-call-spread', market)
        assert aggregate_strategy(legs, market).direction == "bullish"

    def test_iron_butterfly_is_credit(self, market):
        legs = build_template_legs('iron-butterfly', market)
        metrics = aggregate_strategy(legs, market)

        assert metrics.is_credit
        assert metrics.net_cost == pytest.approx(-700.0)

    def test_unknown_template_raises(self, market):
        with pytest.raises(InvalidInputError, match="Unknown strategy template"):
            build_template_legs('butterfly-of-doom', market)
