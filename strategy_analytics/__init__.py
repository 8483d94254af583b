"""Options strategy analytics.

Heuristic Greeks, expiration payoff curves, strategy aggregation,
breakevens and wheel candidate scoring.
"""

from .analytics.aggregator import aggregate_strategy
from .analytics.breakeven import StrategyShape, probability_of_profit, solve_breakeven
from .analytics.greeks import estimate_greeks
from .analytics.payoff import evaluate_payoff_curve
from .config import AnalyticsConfig
from .models import CandidateMetrics, MarketContext, OptionLeg, RangeSpec, ScoreResult
from .scoring.scorer import ScoringConfig, score_candidate

__version__ = "0.1.0"

__all__ = [
    "estimate_greeks",
    "evaluate_payoff_curve",
    "aggregate_strategy",
    "solve_breakeven",
    "score_candidate",
    "probability_of_profit",
    "StrategyShape",
    "AnalyticsConfig",
    "ScoringConfig",
    "OptionLeg",
    "MarketContext",
    "RangeSpec",
    "CandidateMetrics",
    "ScoreResult",
]
