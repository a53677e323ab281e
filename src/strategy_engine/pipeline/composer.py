"""Recommendation Composer - merges ranked strategies with content scores."""

from __future__ import annotations

import logging
from typing import Any

from strategy_engine.catalog.loader import StrategyCatalog, default_catalog, load_catalog
from strategy_engine.config import AppConfig
from strategy_engine.models.profile import ContentProfile, InterviewProfile
from strategy_engine.models.report import RecommendationReport
from strategy_engine.pipeline.ranker import DEFAULT_MAX_RECOMMENDATIONS, rank_strategies
from strategy_engine.scoring.content_scores import calculate_content_scores

logger = logging.getLogger(__name__)


def compose_recommendations(
    content: ContentProfile,
    interview: InterviewProfile,
    *,
    max_recommendations: int | None = DEFAULT_MAX_RECOMMENDATIONS,
    catalog: StrategyCatalog | None = None,
    request_id: str | None = None,
) -> RecommendationReport:
    """Build the full recommendation payload for one request."""
    if catalog is None:
        catalog = default_catalog()

    scores = calculate_content_scores(content, interview)
    strategies = rank_strategies(content, interview, max_recommendations, catalog=catalog)

    return RecommendationReport(
        request_id=request_id,
        strategies=strategies,
        content_scores=scores,
        total_strategies_analyzed=len(catalog),
    )


def profiles_from_payload(payload: dict[str, Any]) -> tuple[ContentProfile, InterviewProfile]:
    """Validate an upstream request body into the two input profiles.

    Accepts ``contentAnalysis``/``smeInterview`` (or their snake_case forms);
    either block may be missing, in which case every field takes its default.
    """
    content_raw = payload.get("contentAnalysis", payload.get("content_analysis")) or {}
    interview_raw = payload.get("smeInterview", payload.get("sme_interview")) or {}
    return ContentProfile.model_validate(content_raw), InterviewProfile.model_validate(interview_raw)


class RecommendationComposer:
    """Composer bound to an application config and its catalog."""

    def __init__(self, config: AppConfig | None = None, *, catalog: StrategyCatalog | None = None):
        self.config = config or AppConfig()
        if catalog is None:
            catalog_path = self.config.catalog.resolved_path
            catalog = load_catalog(catalog_path) if catalog_path else default_catalog()
        self.catalog = catalog
        self.max_recommendations = self.config.ranking.max_recommendations

    def compose(
        self,
        content: ContentProfile,
        interview: InterviewProfile,
        *,
        max_recommendations: int | None = None,
        request_id: str | None = None,
    ) -> RecommendationReport:
        limit = max_recommendations if max_recommendations is not None else self.max_recommendations
        logger.info("Composing recommendations (request=%s, max=%d)", request_id, limit)
        return compose_recommendations(
            content,
            interview,
            max_recommendations=limit,
            catalog=self.catalog,
            request_id=request_id,
        )

    def compose_from_payload(
        self,
        payload: dict[str, Any],
        *,
        max_recommendations: int | None = None,
    ) -> RecommendationReport:
        content, interview = profiles_from_payload(payload)
        request_id = payload.get("requestId", payload.get("request_id"))
        return self.compose(
            content,
            interview,
            max_recommendations=max_recommendations,
            request_id=None if request_id is None else str(request_id),
        )
