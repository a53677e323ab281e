"""Data models for the strategy recommendation engine."""

from strategy_engine.models.profile import ContentProfile, InterviewProfile
from strategy_engine.models.report import RecommendationReport
from strategy_engine.models.scores import ContentScoreResult, ScoringRecommendation
from strategy_engine.models.strategy import (
    IdealFor,
    Implementation,
    MatchBreakdown,
    ScoredStrategy,
    StrategyDefinition,
)

__all__ = [
    "ContentProfile",
    "ContentScoreResult",
    "IdealFor",
    "Implementation",
    "InterviewProfile",
    "MatchBreakdown",
    "RecommendationReport",
    "ScoredStrategy",
    "ScoringRecommendation",
    "StrategyDefinition",
]
