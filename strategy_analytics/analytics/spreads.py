"""Defined-risk spread calculators: iron condor and poor man's covered call."""

import logging
import math
from typing import List, Tuple

from ..config.analytics_config import DEFAULT_CONFIG, AnalyticsConfig
from ..models.leg import OptionLeg
from ..models.spreads import IronCondorMetrics, IronCondorSpec, PMCCMetrics, PMCCSpec
from ..utils.error_handling import safe_divide
from .breakeven import StrategyShape, solve_breakeven
from .legs import intrinsic_value
from .wheel import round_to_increment

logger = logging.getLogger("strategy_analytics.spreads")

# Heuristic probability-of-profit band for iron condors (percent)
CONDOR_POP_FLOOR = 30.0
CONDOR_POP_CEILING = 95.0
CONDOR_POP_SCALE = 500.0

# PMCC strikes are placed on a $5 grid
PMCC_STRIKE_INCREMENT = 5.0


def iron_condor_legs(spec: IronCondorSpec) -> List[OptionLeg]:
    """The four raw legs of an iron condor, long put first."""
    qty = spec.contracts
    return [
        OptionLeg('put', 'long', spec.put_buy_strike, spec.put_buy_premium, qty),
        OptionLeg('put', 'short', spec.put_sell_strike, spec.put_sell_premium, qty),
        OptionLeg('call', 'short', spec.call_sell_strike, spec.call_sell_premium, qty),
        OptionLeg('call', 'long', spec.call_buy_strike, spec.call_buy_premium, qty),
    ]


def iron_condor_metrics(
    spec: IronCondorSpec,
    underlying_price: float,
    config: AnalyticsConfig | None = None,
) -> IronCondorMetrics:
    """Risk/reward summary of an iron condor.

    Max risk is bounded by the wider wing only, since price can finish
    beyond one short strike but not both:

        max_risk = max(put_width, call_width) * 100 * contracts - net_credit

    Args:
        spec: Strikes, premiums and contract count
        underlying_price: Current underlying price
        config: Analytics constants

    Returns:
        IronCondorMetrics (percent figures are 0.0 when max risk is 0)
    """
    multiplier = (config or DEFAULT_CONFIG).contract_multiplier
    scale = multiplier * spec.contracts

    net_credit = spec.credit_per_share * scale
    max_risk = max(spec.put_spread_width, spec.call_spread_width) * scale - net_credit

    breakevens = solve_breakeven(
        StrategyShape.CONDOR,
        short_put_strike=spec.put_sell_strike,
        short_call_strike=spec.call_sell_strike,
        net_credit=net_credit,
        contracts=spec.contracts,
    )
    profit_zone_width = breakevens.width

    prob_profit = min(
        CONDOR_POP_CEILING,
        max(CONDOR_POP_FLOOR, safe_divide(profit_zone_width, underlying_price) * CONDOR_POP_SCALE),
    )

    metrics = IronCondorMetrics(
        net_credit=net_credit,
        max_risk=max_risk,
        max_profit=net_credit,
        break_even_lower=breakevens.lower,
        break_even_upper=breakevens.upper,
        profit_zone_width=profit_zone_width,
        prob_profit=prob_profit,
        return_on_risk=safe_divide(net_credit, max_risk) * 100,
        return_on_capital=safe_divide(net_credit, max_risk + net_credit) * 100,
    )
    logger.debug("Iron condor %r: credit=%.2f max_risk=%.2f", spec, net_credit, max_risk)
    return metrics


def pmcc_metrics(
    spec: PMCCSpec,
    underlying_price: float,
    config: AnalyticsConfig | None = None,
) -> PMCCMetrics:
    """Cost, income and assignment figures for a poor man's covered call.

    Income assumes the short call is re-sold every cycle for the same premium.
    """
    config = config or DEFAULT_CONFIG
    scale = config.contract_multiplier * spec.contracts

    leaps_cost = spec.leaps_premium * scale
    short_credit = spec.short_premium * scale
    net_debit = leaps_cost - short_credit

    leaps_intrinsic = intrinsic_value('call', spec.leaps_strike, underlying_price)
    leaps_extrinsic = spec.leaps_premium - leaps_intrinsic

    max_profit_per_cycle = short_credit
    cycles_per_year = safe_divide(config.days_per_year, spec.short_dte)
    annual_income_estimate = max_profit_per_cycle * cycles_per_year
    annualized_roi = safe_divide(annual_income_estimate, leaps_cost) * 100

    breakeven = solve_breakeven(
        StrategyShape.PMCC,
        leaps_strike=spec.leaps_strike,
        leaps_premium=spec.leaps_premium,
        short_premium=spec.short_premium,
    )

    stock_cost = underlying_price * scale
    capital_savings = stock_cost - leaps_cost
    spread_width = spec.short_strike - spec.leaps_strike

    return PMCCMetrics(
        leaps_cost=leaps_cost,
        short_credit=short_credit,
        net_debit=net_debit,
        leaps_intrinsic=leaps_intrinsic,
        leaps_extrinsic=leaps_extrinsic,
        max_profit_per_cycle=max_profit_per_cycle,
        cycles_per_year=math.floor(cycles_per_year),
        annual_income_estimate=annual_income_estimate,
        annualized_roi=annualized_roi,
        breakeven=breakeven,
        max_loss=net_debit,
        stock_cost=stock_cost,
        capital_savings=capital_savings,
        capital_savings_pct=safe_divide(capital_savings, stock_cost) * 100,
        assignment_risk=spec.short_strike > spec.leaps_strike,
        spread_width=spread_width,
        max_profit_if_assigned=spread_width * scale - net_debit + short_credit,
    )


def pmcc_strikes(
    underlying_price: float,
    leaps_delta: float = 0.75,
    short_delta: float = 0.25,
) -> Tuple[float, float]:
    """Approximate LEAPS and short call strikes for target deltas.

    LEAPS:  spot * (1 - (leaps_delta - 0.5) * 0.4)
    Short:  spot * (1 + (0.5 - short_delta) * 0.3)

    Both are rounded to the nearest $5.

    Returns:
        Tuple of (leaps_strike, short_strike)

    Example:
        >>> pmcc_strikes(185.0)
        (165.0, 200.0)
    """
    leaps_strike = underlying_price * (1 - (leaps_delta - 0.5) * 0.4)
    short_strike = underlying_price * (1 + (0.5 - short_delta) * 0.3)
    return (
        round_to_increment(leaps_strike, PMCC_STRIKE_INCREMENT),
        round_to_increment(short_strike, PMCC_STRIKE_INCREMENT),
    )
