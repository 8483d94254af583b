"""Core data models for options strategy analytics."""

from .leg import Greeks, MarketContext, OptionLeg, StockPosition
from .metrics import BreakevenRange, CandidateMetrics, ScoreResult, StrategyMetrics
from .payoff import PayoffPoint, RangeSpec
from .spreads import IronCondorMetrics, IronCondorSpec, PMCCMetrics, PMCCSpec
from .wheel import WheelCandidate

__all__ = [
    "Greeks",
    "MarketContext",
    "OptionLeg",
    "StockPosition",
    "PayoffPoint",
    "RangeSpec",
    "StrategyMetrics",
    "BreakevenRange",
    "CandidateMetrics",
    "ScoreResult",
    "IronCondorSpec",
    "IronCondorMetrics",
    "PMCCSpec",
    "PMCCMetrics",
    "WheelCandidate",
]
