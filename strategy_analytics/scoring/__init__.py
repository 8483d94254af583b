"""Wheel candidate scoring."""

from .scorer import ScoringConfig, rank_candidates, recommendation_for, score_candidate

__all__ = ["ScoringConfig", "score_candidate", "recommendation_for", "rank_candidates"]
