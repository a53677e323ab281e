"""Composed recommendation payload handed to downstream renderers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from strategy_engine.models.scores import ContentScoreResult
from strategy_engine.models.strategy import ScoredStrategy

FRAMEWORK_METHOD = "evidence-based-framework"


class RecommendationReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    request_id: str | None = None
    strategies: list[ScoredStrategy]
    content_scores: ContentScoreResult
    method: str = FRAMEWORK_METHOD
    total_strategies_analyzed: int = 0
