"""Scoring and ranking of wheel candidates.

Additive rubric, each factor capped:

    annualized return   up to 30   min(return, 30)
    probability profit  up to 25   prob / 100 * 25
    |delta| sweet spot  up to 20   banded, best in [0.20, 0.35]
    DTE sweet spot      up to 15   banded, best in [30, 45]
    risk/reward         up to 10   stepped thresholds

Bands and tier cut-offs are inclusive at the lower bound.
"""

import logging
import math
from typing import Any, Dict, List, Sequence, Tuple

from ..models.metrics import CandidateMetrics, Recommendation, ScoreResult
from ..models.wheel import WheelCandidate
from ..utils.error_handling import ConfigurationError

logger = logging.getLogger("strategy_analytics.scorer")

# (low, high, points) checked in order; first match wins
DEFAULT_DELTA_BANDS: Tuple[Tuple[float, float, float], ...] = (
    (0.20, 0.35, 20.0),
    (0.15, 0.40, 15.0),
    (0.10, 0.50, 10.0),
)
DEFAULT_DTE_BANDS: Tuple[Tuple[float, float, float], ...] = (
    (30, 45, 15.0),
    (21, 60, 10.0),
    (14, 90, 5.0),
)
# (minimum, points) checked in order
DEFAULT_RISK_REWARD_STEPS: Tuple[Tuple[float, float], ...] = (
    (0.03, 10.0),
    (0.02, 7.0),
    (0.01, 4.0),
)


class ScoringConfig:
    """Configuration for rubric caps, bands and recommendation tiers."""

    def __init__(
        self,
        return_cap: float = 30.0,
        prob_profit_weight: float = 25.0,
        delta_bands: Sequence[Tuple[float, float, float]] = DEFAULT_DELTA_BANDS,
        delta_fallback: float = 5.0,
        dte_bands: Sequence[Tuple[float, float, float]] = DEFAULT_DTE_BANDS,
        dte_fallback: float = 0.0,
        risk_reward_steps: Sequence[Tuple[float, float]] = DEFAULT_RISK_REWARD_STEPS,
        excellent_threshold: int = 75,
        good_threshold: int = 55,
        neutral_threshold: int = 35,
    ):
        """Initialize scoring configuration.

        Args:
            return_cap: Points cap for annualized return (percent maps 1:1 to points)
            prob_profit_weight: Points awarded at 100% probability of profit
            delta_bands: (low, high, points) bands for |delta|
            delta_fallback: Points when |delta| is outside every band
            dte_bands: (low, high, points) bands for days to expiry
            dte_fallback: Points when DTE is outside every band
            risk_reward_steps: (minimum, points) steps for risk/reward
            excellent_threshold: Lowest score rated excellent
            good_threshold: Lowest score rated good
            neutral_threshold: Lowest score rated neutral

        Raises:
            ConfigurationError: If tier thresholds are not descending
        """
        if not excellent_threshold >= good_threshold >= neutral_threshold:
            raise ConfigurationError(
                f"Tier thresholds must descend: {excellent_threshold}, "
                f"{good_threshold}, {neutral_threshold}"
            )

        self.return_cap = return_cap
        self.prob_profit_weight = prob_profit_weight
        self.delta_bands = tuple(tuple(b) for b in delta_bands)
        self.delta_fallback = delta_fallback
        self.dte_bands = tuple(tuple(b) for b in dte_bands)
        self.dte_fallback = dte_fallback
        self.risk_reward_steps = tuple(tuple(s) for s in risk_reward_steps)
        self.excellent_threshold = excellent_threshold
        self.good_threshold = good_threshold
        self.neutral_threshold = neutral_threshold

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "ScoringConfig":
        """Create ScoringConfig from dictionary (e.g., from YAML).

        Args:
            config: Dictionary with ``caps``, ``bands`` and ``tiers`` sections

        Returns:
            ScoringConfig instance
        """
        caps = config.get('caps', {})
        bands = config.get('bands', {})
        tiers = config.get('tiers', {})

        return cls(
            return_cap=caps.get('annualized_return', 30.0),
            prob_profit_weight=caps.get('prob_profit', 25.0),
            delta_bands=bands.get('delta', DEFAULT_DELTA_BANDS),
            delta_fallback=bands.get('delta_fallback', 5.0),
            dte_bands=bands.get('dte', DEFAULT_DTE_BANDS),
            dte_fallback=bands.get('dte_fallback', 0.0),
            risk_reward_steps=bands.get('risk_reward', DEFAULT_RISK_REWARD_STEPS),
            excellent_threshold=tiers.get('excellent', 75),
            good_threshold=tiers.get('good', 55),
            neutral_threshold=tiers.get('neutral', 35),
        )


DEFAULT_SCORING = ScoringConfig()


def _band_points(value: float, bands: Sequence[Tuple[float, float, float]], fallback: float) -> float:
    for low, high, points in bands:
        if low <= value <= high:
            return points
    return fallback


def _step_points(value: float, steps: Sequence[Tuple[float, float]]) -> float:
    for minimum, points in steps:
        if value >= minimum:
            return points
    return 0.0


def recommendation_for(score: int, config: ScoringConfig | None = None) -> Recommendation:
    """Map a score to its tier; each threshold is inclusive (75 is excellent)."""
    config = config or DEFAULT_SCORING
    if score >= config.excellent_threshold:
        return "excellent"
    if score >= config.good_threshold:
        return "good"
    if score >= config.neutral_threshold:
        return "neutral"
    return "poor"


def score_components(metrics: CandidateMetrics, config: ScoringConfig | None = None) -> Dict[str, float]:
    """Points earned by each rubric factor, before rounding.

    Exposed so a caller can show how a score was built up.
    """
    config = config or DEFAULT_SCORING
    return {
        'annualized_return': min(metrics.annualized_return, config.return_cap),
        'prob_profit': (metrics.prob_profit / 100) * config.prob_profit_weight,
        'delta': _band_points(abs(metrics.delta), config.delta_bands, config.delta_fallback),
        'days_to_expiry': _band_points(metrics.days_to_expiry, config.dte_bands, config.dte_fallback),
        'risk_reward': _step_points(metrics.risk_reward, config.risk_reward_steps),
    }


def score_candidate(metrics: CandidateMetrics, config: ScoringConfig | None = None) -> ScoreResult:
    """Score a candidate trade 0-100 and classify it.

    Args:
        metrics: Annualized return, probability of profit, delta, DTE, risk/reward
        config: Rubric configuration

    Returns:
        ScoreResult with the integer score and recommendation tier

    Example:
        >>> score_candidate(CandidateMetrics(30, 100, 0.25, 35, 0.05))
        ScoreResult(score=100, recommendation='excellent')
    """
    config = config or DEFAULT_SCORING
    total = sum(score_components(metrics, config).values())

    # Round half up, then keep within 0-100 (a negative return can pull it below 0)
    score = max(0, min(100, math.floor(total + 0.5)))
    return ScoreResult(score=score, recommendation=recommendation_for(score, config))


def rank_candidates(
    candidates: List[WheelCandidate],
    top_n: int | None = None,
) -> List[WheelCandidate]:
    """Sort wheel candidates by score, highest first.

    Ties keep their input order (the sort is stable).
    """
    ranked = sorted(candidates, key=lambda c: c.score, reverse=True)

    if top_n is not None:
        return ranked[:top_n]
    return ranked
