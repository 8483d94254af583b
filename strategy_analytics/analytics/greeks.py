"""Heuristic Greeks estimation from moneyness and time to expiry.

These are deliberately rough approximations for strategy-builder display,
not Black-Scholes values:

    moneyness = (strike - spot) / spot
    call delta = clamp(0.5 - 2 * moneyness, 0.01, 0.99)
    put delta  = clamp(-0.5 - 2 * moneyness, -0.99, -0.01)
    gamma      = exp(-10 * moneyness^2) * 0.05
    theta      =  spot * vol * sqrt(T) * 0.01   (negative for short legs)
    vega       =  spot * sqrt(T) * 0.01         (negative for short legs)

Delta is negated for short legs; every value is multiplied by quantity.
"""

import logging
import math
from dataclasses import replace
from typing import List, Sequence

from ..config.analytics_config import DEFAULT_CONFIG, AnalyticsConfig
from ..models.leg import Greeks, MarketContext, OptionLeg

logger = logging.getLogger("strategy_analytics.greeks")


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def moneyness(strike: float, underlying_price: float) -> float:
    """Normalized distance of the strike from the underlying.

    Positive when the strike is above spot (OTM call / ITM put).
    """
    return (strike - underlying_price) / underlying_price


def estimate_delta(option_type: str, money: float) -> float:
    """Unsigned-by-side, single-contract delta from moneyness."""
    if option_type == 'call':
        return _clamp(0.5 - money * 2, 0.01, 0.99)
    return _clamp(-0.5 - money * 2, -0.99, -0.01)


def estimate_greeks(
    leg: OptionLeg,
    market: MarketContext,
    config: AnalyticsConfig | None = None,
) -> Greeks:
    """Estimate a leg's Greeks, scaled by quantity and side.

    Args:
        leg: Option leg to evaluate
        market: Underlying price and days to expiry
        config: Constants to use (defaults to the packaged configuration)

    Returns:
        Greeks for the whole leg

    Note:
        No input validation is done; a NaN or zero price yields NaN values.
        Use utils.error_handling.validate_market beforehand if needed.
    """
    config = config or DEFAULT_CONFIG
    spot = market.underlying_price
    vol = market.volatility if market.volatility is not None else config.volatility

    money = moneyness(leg.strike, spot)
    time_sqrt = math.sqrt(market.days_to_expiry / config.days_per_year)
    quantity = leg.quantity

    delta = estimate_delta(leg.option_type, money)
    if leg.is_short:
        delta = -delta
    delta *= quantity

    gamma = math.exp(-money * money * config.gamma_decay) * config.gamma_peak * quantity

    # Long legs show positive theta and vega, short legs negative
    theta_sign = 1 if leg.is_short else -1
    vega_sign = -1 if leg.is_short else 1

    theta = -spot * vol * time_sqrt * config.greek_scale * theta_sign * quantity
    vega = spot * time_sqrt * config.greek_scale * vega_sign * quantity

    return Greeks(delta=delta, gamma=gamma, theta=theta, vega=vega)


def with_greeks(
    leg: OptionLeg,
    market: MarketContext,
    config: AnalyticsConfig | None = None,
) -> OptionLeg:
    """Return a copy of the leg with freshly estimated Greeks attached."""
    return replace(leg, greeks=estimate_greeks(leg, market, config))


def evaluate_legs(
    legs: Sequence[OptionLeg],
    market: MarketContext,
    config: AnalyticsConfig | None = None,
) -> List[OptionLeg]:
    """Re-derive Greeks for every leg against one market snapshot.

    Always recomputes; any Greeks already attached are replaced.
    """
    evaluated = [with_greeks(leg, market, config) for leg in legs]
    logger.debug("Estimated Greeks for %d legs at spot %s", len(evaluated), market.underlying_price)
    return evaluated
