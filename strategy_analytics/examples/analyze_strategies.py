#!/usr/bin/env python3
"""Example: evaluate a few strategies end to end.

This script demonstrates the analytics pipeline:
1. Load configuration
2. Build legs from a template and aggregate them
3. Generate payoff curves
4. Evaluate an iron condor
5. Scan and rank wheel candidates
"""

import argparse

from strategy_analytics.analytics.aggregator import aggregate_strategy
from strategy_analytics.analytics.payoff import evaluate_payoff_curve, iron_condor_payoff_curve
from strategy_analytics.analytics.spreads import iron_condor_metrics
from strategy_analytics.analytics.wheel import (
    analyze_cash_secured_put,
    analyze_covered_call,
    estimate_premium,
    wheel_strike_ladder,
)
from strategy_analytics.analytics.greeks import estimate_greeks
from strategy_analytics.builders.templates import build_template_legs
from strategy_analytics.models import IronCondorSpec, MarketContext, OptionLeg
from strategy_analytics.output.console import (
    print_condor_summary,
    print_header,
    print_payoff_table,
    print_strategy_summary,
    print_wheel_candidates,
)
from strategy_analytics.scoring.scorer import rank_candidates
from strategy_analytics.utils.config_loader import load_config
from strategy_analytics.utils.logging_config import setup_logging


def main():
    """Run the example analysis."""
    parser = argparse.ArgumentParser(description="Options strategy analytics example")
    parser.add_argument("--config", help="YAML config file (defaults to packaged params)")
    parser.add_argument("--price", type=float, default=500.0, help="Underlying price")
    parser.add_argument("--dte", type=int, default=30, help="Days to expiry")
    parser.add_argument("--template", default="iron-butterfly", help="Strategy template key")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    setup_logging(log_level=args.log_level)
    analytics_config, scoring_config = load_config(args.config)
    market = MarketContext(underlying_price=args.price, days_to_expiry=args.dte)

    # -------------------------------------------------------------------------
    # 1. Template strategy
    # -------------------------------------------------------------------------
    print_header(f"Template: {args.template}", market.underlying_price)
    legs = build_template_legs(args.template, market, analytics_config)
    metrics = aggregate_strategy(legs, market, analytics_config)
    print_strategy_summary(legs, metrics)
    print_payoff_table(evaluate_payoff_curve(legs, market, config=analytics_config))

    # -------------------------------------------------------------------------
    # 2. Iron condor
    # -------------------------------------------------------------------------
    print_header("Iron Condor", market.underlying_price)
    spot = market.underlying_price
    spec = IronCondorSpec(
        put_buy_strike=spot * 0.97, put_sell_strike=spot * 0.98,
        call_sell_strike=spot * 1.02, call_buy_strike=spot * 1.03,
        put_buy_premium=1.50, put_sell_premium=2.50,
        call_sell_premium=2.50, call_buy_premium=1.50,
    )
    print_condor_summary(iron_condor_metrics(spec, spot, analytics_config))
    print_payoff_table(iron_condor_payoff_curve(spec, market, config=analytics_config))

    # -------------------------------------------------------------------------
    # 3. Wheel scan (deltas from the heuristic estimator, no quoted premiums)
    # -------------------------------------------------------------------------
    print_header("Wheel Scan", spot)
    candidates = []
    for strike in wheel_strike_ladder(spot):
        if strike <= spot:
            put = OptionLeg('put', 'long', strike, 0.0)
            delta = estimate_greeks(put, market, analytics_config).delta
            candidates.append(analyze_cash_secured_put(
                strike, estimate_premium('put', delta), delta, market,
                scoring=scoring_config, config=analytics_config,
            ))
        if strike >= spot:
            call = OptionLeg('call', 'long', strike, 0.0)
            delta = estimate_greeks(call, market, analytics_config).delta
            candidates.append(analyze_covered_call(
                strike, estimate_premium('call', delta), delta, market,
                scoring=scoring_config, config=analytics_config,
            ))

    print_wheel_candidates(rank_candidates(candidates, top_n=10))


if __name__ == "__main__":
    main()
