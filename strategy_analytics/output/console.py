"""Console output formatter for strategy analytics results."""

from typing import List, Sequence

from ..models.leg import OptionLeg
from ..models.metrics import StrategyMetrics
from ..models.payoff import PayoffPoint
from ..models.spreads import IronCondorMetrics
from ..models.wheel import WheelCandidate


def print_header(title: str, spot_price: float):
    """Print a section header.

    Args:
        title: Heading text
        spot_price: Current underlying price
    """
    print("\n" + "=" * 80)
    print(f"  {title.upper()}")
    print(f"  Underlying: ${spot_price:.2f}")
    print("=" * 80)


def print_strategy_summary(legs: Sequence[OptionLeg], metrics: StrategyMetrics):
    """Print legs and aggregate metrics of a multi-leg strategy.

    Args:
        legs: Strategy legs (Greeks shown when attached)
        metrics: Output of aggregate_strategy
    """
    print("\nLegs:")
    print("-" * 80)
    print(f"{'Side':<6} {'Type':<5} {'Strike':>8} {'Prem':>6} {'Qty':>4} "
          f"{'Delta':>7} {'Gamma':>7} {'Theta':>7} {'Vega':>7}")
    for leg in legs:
        g = leg.greeks
        greeks_str = (f"{g.delta:>7.3f} {g.gamma:>7.4f} {g.theta:>7.2f} {g.vega:>7.2f}"
                      if g is not None else f"{'-':>7} {'-':>7} {'-':>7} {'-':>7}")
        print(f"{leg.side:<6} {leg.option_type:<5} {leg.strike:>8.2f} {leg.premium:>6.2f} "
              f"{leg.quantity:>4} {greeks_str}")

    kind = "Net Credit" if metrics.is_credit else "Net Debit"
    print(f"\n  {kind}: ${abs(metrics.net_cost):.2f}")
    print(f"  Max Risk: ${metrics.max_risk:.2f}")
    if metrics.break_evens:
        print("  Breakeven: " + ", ".join(f"${b:.2f}" for b in metrics.break_evens))
    print(f"  Net Greeks: Δ={metrics.net_delta:.3f} Γ={metrics.net_gamma:.4f} "
          f"Θ={metrics.net_theta:.2f} V={metrics.net_vega:.2f}")
    print(f"  Direction: {metrics.direction}")


def print_payoff_table(curve: Sequence[PayoffPoint], every: int = 10):
    """Print a sampled payoff table.

    Args:
        curve: Payoff curve in ascending price order
        every: Print one row per ``every`` points (last point always printed)
    """
    if not curve:
        print("No payoff data.")
        return

    print(f"\n{'Price':>10} {'P/L':>12}")
    print("-" * 23)
    last = len(curve) - 1
    for i, point in enumerate(curve):
        if i % every == 0 or i == last:
            print(f"{point.price:>10.2f} {point.profit_loss:>12.2f}")


def print_condor_summary(metrics: IronCondorMetrics):
    """Print iron condor risk/reward figures."""
    print("\nIron Condor:")
    print(f"  Net Credit:        ${metrics.net_credit:.2f}")
    print(f"  Max Risk:          ${metrics.max_risk:.2f}")
    print(f"  Breakevens:        ${metrics.break_even_lower:.2f} - ${metrics.break_even_upper:.2f}")
    print(f"  Profit Zone Width: ${metrics.profit_zone_width:.2f}")
    print(f"  Prob. of Profit:   {metrics.prob_profit:.0f}% (estimate)")
    print(f"  Return on Risk:    {metrics.return_on_risk:.1f}%")
    print(f"  Return on Capital: {metrics.return_on_capital:.1f}%")


def print_wheel_candidates(candidates: List[WheelCandidate]):
    """Print scored wheel candidates as a table.

    Args:
        candidates: Candidates, typically already ranked
    """
    if not candidates:
        print("No candidates found.")
        return

    print("\nWheel Candidates:")
    print("-" * 90)
    print(f"{'Type':<4} {'Strike':>8} {'Prem':>6} {'Delta':>6} {'DTE':>4} "
          f"{'Ann%':>7} {'PoP%':>6} {'B/E':>9} {'Score':>6} {'Rating':<10}")
    for c in candidates:
        print(f"{c.kind.upper():<4} {c.strike:>8.2f} {c.premium:>6.2f} {abs(c.delta):>6.2f} "
              f"{c.days_to_expiry:>4} {c.annualized_return:>7.1f} {c.prob_profit:>6.1f} "
              f"{c.breakeven:>9.2f} {c.score:>6} {c.recommendation:<10}")
