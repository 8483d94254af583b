"""Wheel strategy candidate analysis (cash-secured puts and covered calls).

Per-contract economics for one strike, scored with the wheel rubric. Premium,
delta and theta come from the caller's quote; nothing is fetched here.
"""

import logging
import math
from typing import List

from ..config.analytics_config import DEFAULT_CONFIG, AnalyticsConfig
from ..models.leg import MarketContext
from ..models.metrics import CandidateMetrics
from ..models.wheel import WheelCandidate
from ..scoring.scorer import ScoringConfig, score_candidate
from ..utils.error_handling import safe_divide
from .breakeven import StrategyShape, probability_of_profit, solve_breakeven

logger = logging.getLogger("strategy_analytics.wheel")


def _effective_dte(days_to_expiry: int) -> int:
    # Expiring today still counts as one day for annualizing
    return max(days_to_expiry, 1)


def annualized_return(profit: float, capital: float, days_to_expiry: int, days_per_year: float = 365.0) -> float:
    """Simple (non-compounded) annualized return in percent; 0.0 without capital."""
    return safe_divide(profit, capital) * (days_per_year / _effective_dte(days_to_expiry)) * 100


def analyze_cash_secured_put(
    strike: float,
    premium: float,
    delta: float,
    market: MarketContext,
    theta: float = 0.0,
    scoring: ScoringConfig | None = None,
    config: AnalyticsConfig | None = None,
) -> WheelCandidate:
    """Evaluate selling one cash-secured put.

    Args:
        strike: Put strike
        premium: Premium received per share
        delta: Put delta from the quote (sign ignored)
        market: Underlying price and days to expiry
        theta: Theta from the quote, carried through for display
        scoring: Rubric configuration
        config: Analytics constants

    Returns:
        Scored WheelCandidate
    """
    config = config or DEFAULT_CONFIG
    multiplier = config.contract_multiplier
    dte = market.days_to_expiry

    capital_required = strike * multiplier
    max_profit = premium * multiplier

    candidate_metrics = CandidateMetrics(
        annualized_return=annualized_return(max_profit, capital_required, dte, config.days_per_year),
        prob_profit=probability_of_profit('put', delta),
        delta=delta,
        days_to_expiry=dte,
        risk_reward=safe_divide(max_profit, capital_required),
    )

    candidate = WheelCandidate(
        kind='csp',
        strike=strike,
        premium=premium,
        delta=delta,
        theta=theta,
        days_to_expiry=dte,
        capital_required=capital_required,
        max_profit=max_profit,
        annualized_return=candidate_metrics.annualized_return,
        breakeven=solve_breakeven(StrategyShape.SINGLE_PUT, strike=strike, premium=premium),
        prob_profit=candidate_metrics.prob_profit,
        risk_reward=candidate_metrics.risk_reward,
        result=score_candidate(candidate_metrics, scoring),
    )
    logger.debug("Analyzed %r", candidate)
    return candidate


def analyze_covered_call(
    strike: float,
    premium: float,
    delta: float,
    market: MarketContext,
    theta: float = 0.0,
    scoring: ScoringConfig | None = None,
    config: AnalyticsConfig | None = None,
) -> WheelCandidate:
    """Evaluate selling one covered call against 100 shares bought at spot.

    Max profit includes the gain up to the strike; annualized return and
    risk/reward count the premium only. Downside protection is the premium
    as a percent of spot.
    """
    config = config or DEFAULT_CONFIG
    multiplier = config.contract_multiplier
    spot = market.underlying_price
    dte = market.days_to_expiry

    capital_required = spot * multiplier
    premium_income = premium * multiplier
    max_profit = premium_income + (strike - spot) * multiplier

    candidate_metrics = CandidateMetrics(
        annualized_return=annualized_return(premium_income, capital_required, dte, config.days_per_year),
        prob_profit=probability_of_profit('call', delta),
        delta=delta,
        days_to_expiry=dte,
        risk_reward=safe_divide(premium_income, capital_required),
    )

    candidate = WheelCandidate(
        kind='cc',
        strike=strike,
        premium=premium,
        delta=delta,
        theta=theta,
        days_to_expiry=dte,
        capital_required=capital_required,
        max_profit=max_profit,
        annualized_return=candidate_metrics.annualized_return,
        breakeven=solve_breakeven(StrategyShape.SINGLE_CALL, underlying_price=spot, premium=premium),
        prob_profit=candidate_metrics.prob_profit,
        risk_reward=candidate_metrics.risk_reward,
        result=score_candidate(candidate_metrics, scoring),
        downside_protection=downside_protection(premium, spot),
    )
    logger.debug("Analyzed %r", candidate)
    return candidate


def downside_protection(premium: float, underlying_price: float) -> float:
    """Premium as a percent of the share price; 0.0 without a price."""
    return safe_divide(premium, underlying_price) * 100


def estimate_premium(option_type: str, delta: float | None, quoted: float | None = None) -> float:
    """Quoted premium, or a rough |delta| * 5 stand-in when none is quoted.

    A missing or zero quote falls back to the estimate; a missing or zero
    delta then gives 0.0. Calls use the delta as quoted.

    Example:
        >>> estimate_premium('put', -0.25)
        1.25
        >>> estimate_premium('put', -0.25, quoted=2.10)
        2.1
    """
    if quoted:
        return quoted
    if not delta:
        return 0.0
    if option_type == 'put':
        return abs(delta) * 5
    return delta * 5


def round_to_increment(value: float, increment: float) -> float:
    """Nearest multiple of ``increment``, halves rounded up."""
    return math.floor(value / increment + 0.5) * increment


def covered_call_strike(underlying_price: float, target_delta: float = 0.25) -> float:
    """Approximate call strike for a target delta, on the $2.50 grid.

    Higher deltas land closer to the money: spot * (1 + (0.30 - delta) * 0.5).
    """
    return round_to_increment(underlying_price * (1 + (0.30 - target_delta) * 0.5), 2.5)


def strike_increment(underlying_price: float) -> float:
    """Strike spacing used for the ladder: $5 above $100, $2.50 above $50, else $1."""
    if underlying_price > 100:
        return 5.0
    if underlying_price > 50:
        return 2.5
    return 1.0


def wheel_strike_ladder(underlying_price: float, steps: int = 5) -> List[float]:
    """Strikes around spot for scanning: ``steps`` below, the nearest, ``steps`` above.

    Strikes at or below spot are put candidates, at or above are call candidates.
    """
    increment = strike_increment(underlying_price)
    base = round_to_increment(underlying_price, increment)
    return [base + i * increment for i in range(-steps, steps + 1)]
