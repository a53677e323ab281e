"""Pydantic models for Content Score Calculator output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ScoringRecommendation(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    category: str  # "Content Suitability" | "Engagement Potential" | "Learning Effectiveness"
    priority: str  # "High" | "Medium"
    recommendation: str
    expected_improvement: str  # e.g. "+15-20 points"


class ContentScoreResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    content_suitability: int = Field(ge=0, le=100)
    engagement_potential: int = Field(ge=0, le=100)
    learning_effectiveness: int = Field(ge=0, le=100)
    overall_score: int = Field(ge=0, le=100)  # unweighted mean of the three
    recommendations: list[ScoringRecommendation] = []
