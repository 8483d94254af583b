"""Strategy-level aggregation of leg economics and Greeks."""

import logging
from typing import Sequence

from ..config.analytics_config import DEFAULT_CONFIG, AnalyticsConfig
from ..models.leg import Greeks, MarketContext, OptionLeg
from ..models.metrics import Direction, StrategyMetrics
from ..utils.error_handling import safe_divide
from .breakeven import breakevens_from_curve
from .greeks import estimate_greeks
from .payoff import evaluate_payoff_curve

logger = logging.getLogger("strategy_analytics.aggregator")


def classify_direction(net_delta: float, threshold: float = 0.1) -> Direction:
    """Bullish above +threshold, bearish below -threshold, neutral otherwise."""
    if net_delta > threshold:
        return "bullish"
    if net_delta < -threshold:
        return "bearish"
    return "neutral"


def aggregate_strategy(
    legs: Sequence[OptionLeg],
    market: MarketContext,
    config: AnalyticsConfig | None = None,
) -> StrategyMetrics:
    """Combine legs into net cost, max risk, net Greeks and direction.

    Args:
        legs: Option legs (may be empty)
        market: Market snapshot used for Greeks and breakevens
        config: Analytics constants

    Returns:
        StrategyMetrics; all zero and neutral when there are no legs

    Note:
        ``max_risk`` is the total debit paid, which is exact for long-only
        strategies. Defined-risk credit spreads have their own formulas
        (see analytics.spreads).
    """
    config = config or DEFAULT_CONFIG
    multiplier = config.contract_multiplier

    total_debit = 0.0
    total_credit = 0.0
    net_greeks = Greeks.zero()

    for leg in legs:
        leg_value = leg.premium * multiplier * leg.quantity
        if leg.is_long:
            total_debit += leg_value
        else:
            total_credit += leg_value
        net_greeks = net_greeks + estimate_greeks(leg, market, config)

    net_cost = total_debit - total_credit
    max_risk = total_debit

    return_on_risk = 0.0
    if total_credit > total_debit:
        return_on_risk = safe_divide(-net_cost, max_risk)

    break_evens: tuple[float, ...] = ()
    if legs:
        curve = evaluate_payoff_curve(legs, market, config=config)
        break_evens = tuple(breakevens_from_curve(curve))

    metrics = StrategyMetrics(
        total_debit=total_debit,
        total_credit=total_credit,
        net_cost=net_cost,
        max_risk=max_risk,
        net_greeks=net_greeks,
        direction=classify_direction(net_greeks.delta, config.direction_threshold),
        break_evens=break_evens,
        return_on_risk=return_on_risk,
    )
    logger.debug("Aggregated %d legs: %r", len(legs), metrics)
    return metrics
