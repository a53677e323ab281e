"""Strategy Ranker - scores the whole catalog and keeps the top N."""

from __future__ import annotations

import logging

from strategy_engine.catalog.loader import StrategyCatalog, default_catalog
from strategy_engine.models.profile import ContentProfile, InterviewProfile
from strategy_engine.models.strategy import ScoredStrategy
from strategy_engine.scoring.strategy_match import score_strategy

logger = logging.getLogger(__name__)

DEFAULT_MAX_RECOMMENDATIONS = 5


def rank_strategies(
    content: ContentProfile,
    interview: InterviewProfile,
    max_recommendations: int | None = DEFAULT_MAX_RECOMMENDATIONS,
    *,
    catalog: StrategyCatalog | None = None,
) -> list[ScoredStrategy]:
    """Rank catalog strategies by composite match score, best first.

    Ties keep catalog order (``sorted`` is stable). ``max_recommendations``
    below 1 is treated as 1; None means the default of 5.
    """
    if catalog is None:
        catalog = default_catalog()
    if max_recommendations is None:
        max_recommendations = DEFAULT_MAX_RECOMMENDATIONS
    limit = max(1, int(max_recommendations))

    matches = [score_strategy(strategy, content, interview) for strategy in catalog]
    matches = sorted(matches, key=lambda m: m.score, reverse=True)[:limit]

    logger.info("Ranked %d strategies, returning top %d", len(catalog), len(matches))

    return [
        ScoredStrategy(
            rank=position,
            strategy_name=match.strategy.name,
            score=match.score,
            reasoning=match.reasoning,
            description=match.strategy.description,
            icon=match.strategy.icon,
            color=match.strategy.color,
            use_cases=match.strategy.use_cases,
            implementation=match.strategy.implementation,
            ideal_for=match.strategy.ideal_for,
            breakdown=match.breakdown,
        )
        for position, match in enumerate(matches, start=1)
    ]
