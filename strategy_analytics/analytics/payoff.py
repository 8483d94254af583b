"""Profit/loss curves at expiration.

Curves are finite lists produced eagerly over a symmetric price sweep and are
rebuilt from scratch on every call.
"""

import logging
import math
from typing import List, Sequence

import numpy as np

from ..config.analytics_config import DEFAULT_CONFIG, AnalyticsConfig
from ..models.leg import MarketContext, OptionLeg, StockPosition
from ..models.payoff import PayoffPoint, RangeSpec
from ..models.spreads import IronCondorSpec, PMCCSpec
from ..utils.error_handling import safe_divide
from .legs import intrinsic_value, leg_profit_loss, stock_profit_loss

logger = logging.getLogger("strategy_analytics.payoff")


def price_grid(underlying_price: float, range_spec: RangeSpec) -> List[float]:
    """Evenly spaced settlement prices, rounded to cents, ascending.

    Args:
        underlying_price: Current underlying price (centre of the sweep)
        range_spec: Sweep half-width and number of samples

    Returns:
        List of ``range_spec.points`` prices from low to high inclusive
    """
    low, high = range_spec.bounds(underlying_price)
    grid = np.round(np.linspace(low, high, range_spec.points), 2)
    return [float(p) for p in grid]


def payoff_at(
    legs: Sequence[OptionLeg],
    price: float,
    *,
    net_credit: float = 0.0,
    stock: StockPosition | None = None,
    config: AnalyticsConfig | None = None,
) -> float:
    """Total profit/loss of legs (plus optional stock and credit) at one price."""
    total = sum(leg_profit_loss(leg, price, config) for leg in legs)
    if stock is not None:
        total += stock_profit_loss(stock, price)
    return total + net_credit


def evaluate_payoff_curve(
    legs: Sequence[OptionLeg],
    market: MarketContext,
    range_spec: RangeSpec | None = None,
    *,
    net_credit: float = 0.0,
    stock: StockPosition | None = None,
    config: AnalyticsConfig | None = None,
) -> List[PayoffPoint]:
    """Profit/loss of a multi-leg strategy across a price sweep.

    Args:
        legs: Option legs (may be empty)
        market: Market snapshot; only the underlying price is used
        range_spec: Sweep to use (defaults to ±25% of spot)
        net_credit: Strategy-level credit added once per point
        stock: Optional share position, e.g. the stock side of a covered call
        config: Analytics constants

    Returns:
        PayoffPoints in ascending price order
    """
    config = config or DEFAULT_CONFIG
    range_spec = range_spec or config.default_range

    curve = [
        PayoffPoint(
            price=price,
            profit_loss=payoff_at(legs, price, net_credit=net_credit, stock=stock, config=config),
        )
        for price in price_grid(market.underlying_price, range_spec)
    ]
    logger.debug(
        "Payoff curve for %d legs: %d points over ±%.0f%%",
        len(legs), len(curve), range_spec.pct * 100,
    )
    return curve


def iron_condor_payoff_at(
    spec: IronCondorSpec,
    price: float,
    net_credit: float,
    config: AnalyticsConfig | None = None,
) -> float:
    """Profit/loss of an iron condor at one price.

    The condor is modelled as two verticals that each only lose money, with
    the net credit collected up front added once.
    """
    multiplier = (config or DEFAULT_CONFIG).contract_multiplier
    scale = multiplier * spec.contracts
    pl = 0.0

    # Put spread
    if price <= spec.put_buy_strike:
        pl -= spec.put_spread_width * scale
    elif price <= spec.put_sell_strike:
        pl -= (spec.put_sell_strike - price) * scale

    # Call spread
    if price >= spec.call_buy_strike:
        pl -= spec.call_spread_width * scale
    elif price >= spec.call_sell_strike:
        pl -= (price - spec.call_sell_strike) * scale

    return pl + net_credit


def iron_condor_payoff_curve(
    spec: IronCondorSpec,
    market: MarketContext,
    range_spec: RangeSpec | None = None,
    config: AnalyticsConfig | None = None,
) -> List[PayoffPoint]:
    """Iron condor payoff curve over a narrower sweep (±15% by default)."""
    config = config or DEFAULT_CONFIG
    range_spec = range_spec or config.condor_range
    net_credit = spec.credit_per_share * config.contract_multiplier * spec.contracts

    return [
        PayoffPoint(price=price, profit_loss=iron_condor_payoff_at(spec, price, net_credit, config))
        for price in price_grid(market.underlying_price, range_spec)
    ]


def covered_call_payoff_curve(
    strike: float,
    premium: float,
    market: MarketContext,
    contracts: int = 1,
    range_spec: RangeSpec | None = None,
    config: AnalyticsConfig | None = None,
) -> List[PayoffPoint]:
    """Shares bought at spot plus one short call per 100 shares.

    Upside is capped at (premium + strike - spot) * 100 per contract.
    """
    config = config or DEFAULT_CONFIG
    short_call = OptionLeg(option_type='call', side='short', strike=strike,
                           premium=premium, quantity=contracts)
    stock = StockPosition(shares=contracts * config.contract_multiplier,
                          cost_basis=market.underlying_price)
    return evaluate_payoff_curve([short_call], market, range_spec, stock=stock, config=config)


def pmcc_payoff_at(
    spec: PMCCSpec,
    price: float,
    leaps_extrinsic: float,
    config: AnalyticsConfig | None = None,
) -> float:
    """Poor man's covered call P/L at the short call's expiration.

    The LEAPS keeps part of its extrinsic value, decayed by the square root of
    the fraction of its life remaining.
    """
    multiplier = (config or DEFAULT_CONFIG).contract_multiplier
    remaining_dte = spec.leaps_dte - spec.short_dte
    extrinsic_ratio = math.sqrt(max(0.0, safe_divide(remaining_dte, spec.leaps_dte)))

    leaps_value = intrinsic_value('call', spec.leaps_strike, price) + leaps_extrinsic * extrinsic_ratio
    short_value = intrinsic_value('call', spec.short_strike, price)

    per_share = (leaps_value - spec.leaps_premium) - (short_value - spec.short_premium)
    return per_share * multiplier * spec.contracts


def pmcc_payoff_curve(
    spec: PMCCSpec,
    market: MarketContext,
    range_spec: RangeSpec | None = None,
    config: AnalyticsConfig | None = None,
) -> List[PayoffPoint]:
    """Poor man's covered call payoff curve over a wider sweep (±30% by default)."""
    config = config or DEFAULT_CONFIG
    range_spec = range_spec or config.pmcc_range
    leaps_extrinsic = spec.leaps_premium - intrinsic_value('call', spec.leaps_strike, market.underlying_price)

    return [
        PayoffPoint(price=price, profit_loss=pmcc_payoff_at(spec, price, leaps_extrinsic, config))
        for price in price_grid(market.underlying_price, range_spec)
    ]
