"""Wheel strategy candidate data model."""

from dataclasses import dataclass
from typing import Literal

from .metrics import CandidateMetrics, ScoreResult

WheelKind = Literal["csp", "cc"]


@dataclass(frozen=True)
class WheelCandidate:
    """A cash-secured put or covered call evaluated for the wheel.

    All dollar values are per contract (100 shares).
    """

    kind: WheelKind
    strike: float
    premium: float
    delta: float
    theta: float
    days_to_expiry: int

    capital_required: float
    max_profit: float
    annualized_return: float    # Percent
    breakeven: float
    prob_profit: float          # Percent, delta proxy
    risk_reward: float

    result: ScoreResult

    # Premium as a percent of spot; covered calls only
    downside_protection: float = 0.0

    @property
    def score(self) -> int:
        return self.result.score

    @property
    def recommendation(self) -> str:
        return self.result.recommendation

    def to_candidate_metrics(self) -> CandidateMetrics:
        return CandidateMetrics(
            annualized_return=self.annualized_return,
            prob_profit=self.prob_profit,
            delta=self.delta,
            days_to_expiry=self.days_to_expiry,
            risk_reward=self.risk_reward,
        )

    def __repr__(self) -> str:
        label = "CSP" if self.kind == "csp" else "CC"
        return (f"WheelCandidate({label} {self.strike:g} @ {self.premium:.2f} "
                f"Ann={self.annualized_return:.1f}% PoP={self.prob_profit:.0f}% "
                f"Score={self.score} {self.recommendation})")
