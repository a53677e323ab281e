"""Strategy Match Scorer - scores one catalog strategy against the content and
SME-interview profiles and explains the match."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from strategy_engine.models.profile import COMPLEXITY_LEVELS, ContentProfile, InterviewProfile
from strategy_engine.models.strategy import MatchBreakdown, StrategyDefinition
from strategy_engine.scoring import tables
from strategy_engine.scoring.content_scores import clamp
from strategy_engine.scoring.tables import contains_any, keyword_points

logger = logging.getLogger(__name__)

CONTENT_WEIGHT = 0.40
SME_WEIGHT = 0.35
FEASIBILITY_WEIGHT = 0.15
INNOVATION_WEIGHT = 0.10

ANY_LEVEL = "any level"


@dataclass(frozen=True)
class StrategyMatch:
    """Composite score for one strategy, with its explanation."""

    strategy: StrategyDefinition
    score: float
    reasoning: str
    breakdown: MatchBreakdown


def complexity_bands(label: str) -> frozenset[str] | None:
    """Parse a strategy complexity label into bands; None means any level.

    >>> sorted(complexity_bands("low-to-medium"))
    ['low', 'medium']
    """
    label = label.strip().lower()
    if not label or label == ANY_LEVEL:
        return None
    return frozenset(level for level in COMPLEXITY_LEVELS if level in label)


def _is_adjacent(level: str, bands: frozenset[str]) -> bool:
    index = COMPLEXITY_LEVELS.index(level)
    return any(abs(COMPLEXITY_LEVELS.index(band) - index) == 1 for band in bands)


def complexity_alignment(strategy: StrategyDefinition, level: str) -> float:
    bands = complexity_bands(strategy.ideal_for.complexity)
    if bands is None:
        return 25
    if level in bands:
        return 30
    if _is_adjacent(level, bands):
        return 15
    return 0


def content_match(strategy: StrategyDefinition, content: ContentProfile) -> float:
    score = 0.0
    topics_text = content.topics_text
    content_type = content.content_type_text or "document"

    if strategy.content_type_match:
        best = max(
            (
                affinity
                for phrase, affinity in strategy.content_type_match.items()
                if phrase in topics_text or phrase in content_type
            ),
            default=0,
        )
        score += best / 100 * 50

    score += complexity_alignment(strategy, content.complexity_level)

    name = strategy.name.lower()
    for topic_keyword, name_keywords in tables.CONTENT_KEYWORD_FAMILIES.items():
        if topic_keyword in topics_text and contains_any(name, name_keywords):
            score += 15

    content_types = [ct.lower() for ct in strategy.ideal_for.content_types]
    if "any content" in content_types or len(content_types) > 4:
        score += 10

    return clamp(score)


def detected_preferences(interview: InterviewProfile) -> list[str]:
    """Names of the SME preference signals present in the answers."""
    text = interview.answers_text
    return [
        signal
        for signal, (phrases, _) in tables.SME_PREFERENCE_SIGNALS.items()
        if contains_any(text, phrases)
    ]


def sme_match(strategy: StrategyDefinition, interview: InterviewProfile) -> float:
    name = strategy.name.lower()
    score = 0.0
    for signal in detected_preferences(interview):
        _, name_keyword = tables.SME_PREFERENCE_SIGNALS[signal]
        if name_keyword in name:
            score += 20
    score += interview.completion_percentage * 0.3
    return clamp(score)


def feasibility(strategy: StrategyDefinition, content: ContentProfile) -> float:
    score = 50.0
    duration = strategy.implementation.duration.lower()
    low_complexity = content.complexity_level == "low"

    if contains_any(duration, tables.INTENSIVE_DURATION_MARKERS) and content.file_count > 10:
        score += 20
    if contains_any(duration, tables.SHORT_DURATION_MARKERS) and low_complexity:
        score += 30
    if tables.HEAVY_SIMULATION_FORMAT in strategy.implementation.formats and low_complexity:
        score -= 20  # overkill for simple content

    return clamp(score)


def innovation_bonus(strategy: StrategyDefinition) -> float:
    return clamp(keyword_points(strategy.name.lower(), tables.INNOVATION_BONUSES))


def build_reasoning(
    strategy: StrategyDefinition,
    content: ContentProfile,
    interview: InterviewProfile,
) -> str:
    answers = interview.answers_text
    parts = ["This strategy is recommended because: "]

    topics = content.reasoning_topics
    if topics:
        focus = " and ".join(topics[:2])
        parts.append(
            f"Your content focuses on {focus}, which aligns well with {strategy.name.lower()}. "
        )
    if "interactive" in answers:
        parts.append("Your emphasis on interactive learning makes this strategy particularly suitable. ")
    if "practical" in answers:
        parts.append("The practical, hands-on approach you prefer is well-served by this strategy. ")
    if contains_any(answers, ("busy", "time")):
        parts.append("This strategy accommodates time constraints mentioned in your responses. ")

    parts.append(f"{strategy.lead_sentence}.")
    return "".join(parts)


def score_strategy(
    strategy: StrategyDefinition,
    content: ContentProfile,
    interview: InterviewProfile,
) -> StrategyMatch:
    """Weighted composite: content 40%, SME 35%, feasibility 15%, innovation 10%."""
    breakdown = MatchBreakdown(
        content_match=content_match(strategy, content),
        sme_match=sme_match(strategy, interview),
        feasibility=feasibility(strategy, content),
        innovation_bonus=innovation_bonus(strategy),
    )
    score = clamp(
        breakdown.content_match * CONTENT_WEIGHT
        + breakdown.sme_match * SME_WEIGHT
        + breakdown.feasibility * FEASIBILITY_WEIGHT
        + breakdown.innovation_bonus * INNOVATION_WEIGHT
    )
    logger.debug("%s: %.2f (%s)", strategy.name, score, breakdown)
    return StrategyMatch(
        strategy=strategy,
        score=score,
        reasoning=build_reasoning(strategy, content, interview),
        breakdown=breakdown,
    )
