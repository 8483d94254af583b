"""Strategy-level metrics and scoring data models."""

from dataclasses import dataclass
from typing import Literal

from .leg import Greeks

Direction = Literal["bullish", "bearish", "neutral"]
Recommendation = Literal["excellent", "good", "neutral", "poor"]


@dataclass(frozen=True)
class StrategyMetrics:
    """Aggregate economics and risk of a set of legs.

    ``net_cost`` is positive when the trader pays a debit and negative when a
    credit is received. All dollar amounts include the contract multiplier.
    """

    total_debit: float
    total_credit: float
    net_cost: float
    max_risk: float
    net_greeks: Greeks
    direction: Direction
    break_evens: tuple[float, ...] = ()
    return_on_risk: float = 0.0

    @property
    def is_credit(self) -> bool:
        return self.total_credit > self.total_debit

    @property
    def net_delta(self) -> float:
        return self.net_greeks.delta

    @property
    def net_gamma(self) -> float:
        return self.net_greeks.gamma

    @property
    def net_theta(self) -> float:
        return self.net_greeks.theta

    @property
    def net_vega(self) -> float:
        return self.net_greeks.vega

    def __repr__(self) -> str:
        kind = "Credit" if self.is_credit else "Debit"
        return (f"StrategyMetrics({kind}=${abs(self.net_cost):.2f} "
                f"MaxRisk=${self.max_risk:.2f} Δ={self.net_delta:.3f} {self.direction})")


@dataclass(frozen=True)
class BreakevenRange:
    """Lower and upper breakeven of a two-sided credit strategy."""

    lower: float
    upper: float

    @property
    def width(self) -> float:
        return self.upper - self.lower


@dataclass(frozen=True)
class CandidateMetrics:
    """Inputs to the wheel scoring rubric.

    Attributes:
        annualized_return: Annualized return in percent (25.0 = 25%)
        prob_profit: Probability of profit in percent (0-100)
        delta: Option delta (sign ignored by the scorer)
        days_to_expiry: Days to expiration
        risk_reward: Max profit divided by capital at risk (0.02 = 2%)
    """

    annualized_return: float = 0.0
    prob_profit: float = 0.0
    delta: float = 0.0
    days_to_expiry: int = 0
    risk_reward: float = 0.0


@dataclass(frozen=True)
class ScoreResult:
    """0-100 score and its recommendation tier."""

    score: int
    recommendation: Recommendation
