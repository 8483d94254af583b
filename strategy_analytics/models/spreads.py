"""Iron condor and poor man's covered call data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IronCondorSpec:
    """Iron condor built as a bull put spread plus a bear call spread.

    Convention (precondition, not validated):
        put_buy_strike < put_sell_strike < call_sell_strike < call_buy_strike

    Premiums are per share; ``contracts`` applies to every leg.
    """

    put_buy_strike: float
    put_sell_strike: float
    call_sell_strike: float
    call_buy_strike: float

    put_buy_premium: float
    put_sell_premium: float
    call_sell_premium: float
    call_buy_premium: float

    contracts: int = 1

    @property
    def put_spread_width(self) -> float:
        """Width of put spread in dollars."""
        return self.put_sell_strike - self.put_buy_strike

    @property
    def call_spread_width(self) -> float:
        """Width of call spread in dollars."""
        return self.call_buy_strike - self.call_sell_strike

    @property
    def credit_per_share(self) -> float:
        return (self.put_sell_premium - self.put_buy_premium
                + self.call_sell_premium - self.call_buy_premium)

    def __repr__(self) -> str:
        return (f"IronCondorSpec(P[{self.put_buy_strike:g}/{self.put_sell_strike:g}] "
                f"C[{self.call_sell_strike:g}/{self.call_buy_strike:g}] x{self.contracts})")


@dataclass(frozen=True)
class IronCondorMetrics:
    """Risk/reward summary of an iron condor (dollar amounts for all contracts)."""

    net_credit: float
    max_risk: float
    max_profit: float
    break_even_lower: float
    break_even_upper: float
    profit_zone_width: float
    prob_profit: float          # Heuristic, 30-95
    return_on_risk: float       # Percent
    return_on_capital: float    # Percent


@dataclass(frozen=True)
class PMCCSpec:
    """Poor man's covered call: long LEAPS call plus a short near-term call."""

    leaps_strike: float
    leaps_premium: float
    leaps_dte: int
    short_strike: float
    short_premium: float
    short_dte: int
    contracts: int = 1


@dataclass(frozen=True)
class PMCCMetrics:
    """Cost, income and risk figures for a poor man's covered call."""

    leaps_cost: float
    short_credit: float
    net_debit: float
    leaps_intrinsic: float
    leaps_extrinsic: float
    max_profit_per_cycle: float
    cycles_per_year: int
    annual_income_estimate: float
    annualized_roi: float
    breakeven: float
    max_loss: float
    stock_cost: float
    capital_savings: float
    capital_savings_pct: float
    assignment_risk: bool
    spread_width: float
    max_profit_if_assigned: float
