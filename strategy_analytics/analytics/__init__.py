"""Greeks estimation, leg evaluation, payoff curves, aggregation and breakevens."""

from .aggregator import aggregate_strategy, classify_direction
from .breakeven import (
    StrategyShape,
    breakevens_from_curve,
    probability_of_profit,
    solve_breakeven,
)
from .greeks import estimate_greeks, evaluate_legs, with_greeks
from .legs import intrinsic_value, leg_profit_loss, stock_profit_loss
from .payoff import (
    covered_call_payoff_curve,
    evaluate_payoff_curve,
    iron_condor_payoff_curve,
    payoff_at,
    pmcc_payoff_curve,
    price_grid,
)
from .spreads import iron_condor_legs, iron_condor_metrics, pmcc_metrics, pmcc_strikes
from .wheel import (
    analyze_cash_secured_put,
    analyze_covered_call,
    covered_call_strike,
    downside_protection,
    estimate_premium,
    wheel_strike_ladder,
)

__all__ = [
    "aggregate_strategy",
    "classify_direction",
    "StrategyShape",
    "breakevens_from_curve",
    "probability_of_profit",
    "solve_breakeven",
    "estimate_greeks",
    "evaluate_legs",
    "with_greeks",
    "intrinsic_value",
    "leg_profit_loss",
    "stock_profit_loss",
    "covered_call_payoff_curve",
    "evaluate_payoff_curve",
    "iron_condor_payoff_curve",
    "payoff_at",
    "pmcc_payoff_curve",
    "price_grid",
    "iron_condor_legs",
    "iron_condor_metrics",
    "pmcc_metrics",
    "pmcc_strikes",
    "analyze_cash_secured_put",
    "analyze_covered_call",
    "covered_call_strike",
    "downside_protection",
    "estimate_premium",
    "wheel_strike_ladder",
]
