"""Tests for wheel candidate analysis."""

import pytest

from strategy_analytics.analytics.wheel import (
    analyze_cash_secured_put,
    analyze_covered_call,
    annualized_return,
    covered_call_strike,
    downside_protection,
    estimate_premium,
    round_to_increment,
    strike_increment,
    wheel_strike_ladder,
)
from strategy_analytics.models.leg import MarketContext
from strategy_analytics.scoring.scorer import ScoringConfig, score_candidate


class TestCashSecuredPut:
    """Test suite for analyze_cash_secured_put."""

    @pytest.fixture
    def candidate(self):
        market = MarketContext(underlying_price=100.0, days_to_expiry=30)
        return analyze_cash_secured_put(95.0, 2.00, -0.25, market, theta=-0.04)

    def test_economics(self, candidate):
        assert candidate.kind == 'csp'
        assert candidate.capital_required == pytest.approx(9500.0)
        assert candidate.max_profit == pytest.approx(200.0)
        assert candidate.breakeven == pytest.approx(93.0)
        assert candidate.risk_reward == pytest.approx(200.0 / 9500.0)
        assert candidate.theta == -0.04

    def test_annualized_return(self, candidate):
        assert candidate.annualized_return == pytest.approx(200.0 / 9500.0 * (365 / 30) * 100)

    def test_probability_proxy(self, candidate):
        assert candidate.prob_profit == pytest.approx(75.0)

    def test_score(self, candidate):
        # 25.61 + 18.75 + 20 + 15 + 7 = 86.36
        assert candidate.score == 86
        assert candidate.recommendation == "excellent"

    def test_score_matches_rubric(self, candidate):
        assert candidate.result == score_candidate(candidate.to_candidate_metrics())

    def test_zero_strike_guarded(self):
        candidate = analyze_cash_secured_put(0.0, 1.0, -0.2, MarketContext(100.0, 30))

        assert candidate.annualized_return == 0.0
        assert candidate.risk_reward == 0.0

    def test_zero_dte_counts_as_one_day(self):
        candidate = analyze_cash_secured_put(95.0, 2.00, -0.25, MarketContext(100.0, 0))
        assert candidate.annualized_return == pytest.approx(200.0 / 9500.0 * 365 * 100)

    def test_custom_scoring(self):
        strict = ScoringConfig(excellent_threshold=95, good_threshold=90, neutral_threshold=85)
        candidate = analyze_cash_secured_put(
            95.0, 2.00, -0.25, MarketContext(100.0, 30), scoring=strict,
        )

        assert candidate.score == 86
        assert candidate.recommendation == "neutral"


class TestCoveredCall:
    """Test suite for analyze_covered_call."""

    @pytest.fixture
    def candidate(self):
        market = MarketContext(underlying_price=100.0, days_to_expiry=30)
        return analyze_covered_call(105.0, 1.50, 0.30, market)

    def test_economics(self, candidate):
        assert candidate.kind == 'cc'
        assert candidate.capital_required == pytest.approx(10000.0)
        # Premium plus the gain up to the strike
        assert candidate.max_profit == pytest.approx(650.0)
        assert candidate.breakeven == pytest.approx(98.5)
        assert candidate.risk_reward == pytest.approx(0.015)

    def test_annualized_return_on_premium_only(self, candidate):
        assert candidate.annualized_return == pytest.approx(18.25)

    def test_probability_of_keeping_shares(self, candidate):
        assert candidate.prob_profit == pytest.approx(70.0)

    def test_score(self, candidate):
        # 18.25 + 17.5 + 20 + 15 + 4 = 74.75
        assert candidate.score == 75
        assert candidate.recommendation == "excellent"

    def test_downside_protection(self, candidate):
        assert candidate.downside_protection == pytest.approx(1.5)

    def test_csp_has_no_downside_protection(self):
        candidate = analyze_cash_secured_put(95.0, 2.00, -0.25, MarketContext(100.0, 30))
        assert candidate.downside_protection == 0.0

    def test_breakeven_below_spot(self):
        candidate = analyze_covered_call(510.0, 2.50, 0.30, MarketContext(500.0, 30))
        assert candidate.breakeven == pytest.approx(497.50)


class TestAnnualizedReturn:
    """Test suite for annualized_return."""

    def test_simple(self):
        assert annualized_return(100.0, 10000.0, 365) == pytest.approx(1.0)

    def test_no_capital(self):
        assert annualized_return(100.0, 0.0, 30) == 0.0


class TestStrikeLadder:
    """Test suite for wheel_strike_ladder."""

    def test_increment_tiers(self):
        assert strike_increment(500.0) == 5.0
        assert strike_increment(100.0) == 2.5
        assert strike_increment(75.0) == 2.5
        assert strike_increment(50.0) == 1.0

    def test_ladder_above_100(self):
        ladder = wheel_strike_ladder(500.0)

        assert len(ladder) == 11
        assert ladder[0] == pytest.approx(475.0)
        assert ladder[5] == pytest.approx(500.0)
        assert ladder[-1] == pytest.approx(525.0)

    def test_ladder_rounds_base(self):
        ladder = wheel_strike_ladder(101.2)
        assert ladder[5] == pytest.approx(100.0)

    def test_ladder_mid_priced(self):
        ladder = wheel_strike_ladder(76.0, steps=2)
        assert ladder == pytest.approx([70.0, 72.5, 75.0, 77.5, 80.0])

    def test_ladder_low_priced(self):
        ladder = wheel_strike_ladder(42.3, steps=3)
        assert ladder == pytest.approx([39.0, 40.0, 41.0, 42.0, 43.0, 44.0, 45.0])

    def test_ladder_ascending(self):
        ladder = wheel_strike_ladder(187.0)
        assert ladder == sorted(ladder)

    def test_round_to_increment_half_up(self):
        assert round_to_increment(102.5, 5.0) == pytest.approx(105.0)
        assert round_to_increment(102.4, 5.0) == pytest.approx(100.0)


class TestCoveredCallStrike:
    """Test suite for covered_call_strike."""

    def test_default_delta(self):
        # 500 * 1.025 = 512.5, already on the $2.50 grid
        assert covered_call_strike(500.0) == pytest.approx(512.5)

    def test_rounds_to_nearest_two_fifty(self):
        # 187 * 1.025 = 191.675
        assert covered_call_strike(187.0, 0.25) == pytest.approx(192.5)

    def test_higher_delta_is_closer_to_money(self):
        assert covered_call_strike(100.0, 0.30) == pytest.approx(100.0)
        assert covered_call_strike(100.0, 0.20) == pytest.approx(105.0)


class TestDownsideProtection:
    """Test suite for downside_protection."""

    def test_percent_of_spot(self):
        assert downside_protection(2.50, 500.0) == pytest.approx(0.5)

    def test_zero_price_guarded(self):
        assert downside_protection(2.50, 0.0) == 0.0


class TestEstimatePremium:
    """Test suite for estimate_premium."""

    def test_quoted_premium_wins(self):
        assert estimate_premium('put', -0.25, quoted=2.10) == pytest.approx(2.10)

    def test_put_fallback_uses_abs_delta(self):
        assert estimate_premium('put', -0.25) == pytest.approx(1.25)

    def test_call_fallback(self):
        assert estimate_premium('call', 0.30) == pytest.approx(1.5)

    def test_zero_quote_falls_back(self):
        assert estimate_premium('call', 0.30, quoted=0.0) == pytest.approx(1.5)

    def test_no_delta_gives_zero(self):
        assert estimate_premium('put', None) == 0.0
        assert estimate_premium('call', 0.0) == 0.0
