"""Content Score Calculator - content suitability, engagement potential and
learning effectiveness scores, plus fixed-text improvement recommendations."""

from __future__ import annotations

import logging
import math

from strategy_engine.models.profile import ContentProfile, InterviewProfile
from strategy_engine.models.scores import ContentScoreResult, ScoringRecommendation
from strategy_engine.scoring import tables
from strategy_engine.scoring.tables import contains_any, keyword_points, lookup

logger = logging.getLogger(__name__)

HIGH_PRIORITY_BELOW = 70
MEDIUM_PRIORITY_BELOW = 85

# category -> {priority: (recommendation, expected improvement)}
RECOMMENDATION_TEXT: dict[str, dict[str, tuple[str, str]]] = {
    "Content Suitability": {
        "High": (
            "Enhance content structure and organization. Consider breaking complex topics "
            "into smaller, digestible modules.",
            "+15-20 points",
        ),
        "Medium": (
            "Add more detailed examples and clarify technical terminology to improve "
            "content accessibility.",
            "+10-15 points",
        ),
    },
    "Engagement Potential": {
        "High": (
            "Incorporate interactive elements such as scenarios, simulations, or gamification "
            "to boost learner engagement.",
            "+20-25 points",
        ),
        "Medium": (
            "Add multimedia elements and real-world case studies to enhance learner "
            "connection to the material.",
            "+10-15 points",
        ),
    },
    "Learning Effectiveness": {
        "High": (
            "Define clear learning objectives and add formative assessments throughout the "
            "course to track progress.",
            "+18-22 points",
        ),
        "Medium": (
            "Include more practical application exercises and peer collaboration opportunities.",
            "+10-15 points",
        ),
    },
}


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def topic_count_points(count: int) -> float:
    if 3 <= count <= 8:
        return 15
    if 2 <= count <= 10:
        return 12
    if count >= 1:
        return 8
    return 0


def format_variety(file_count: int) -> float:
    if file_count > 5:
        return 80
    if file_count > 2:
        return 75
    if file_count > 1:
        return 70
    return 60


def content_suitability(content: ContentProfile) -> float:
    """Quality 40%, content-type fit 25%, complexity 20%, topic volume up to 15 pts."""
    quality = sum(content.quality_readings()) / 4
    type_fit = lookup(tables.CONTENT_TYPE_SUITABILITY, content.content_type_text)
    complexity = tables.COMPLEXITY_SUITABILITY[content.complexity_level]

    score = (
        clamp(quality) * 0.4
        + clamp(type_fit) * 0.25
        + clamp(complexity) * 0.2
        + topic_count_points(len(content.topics))
    )
    return clamp(score)


def engagement_potential(content: ContentProfile, interview: InterviewProfile) -> float:
    domain = lookup(tables.DOMAIN_ENGAGEMENT, content.engagement_domain)

    interactivity = 60 + keyword_points(content.topics_text, tables.INTERACTIVITY_BONUSES)

    sme_alignment = (
        70
        + keyword_points(interview.answers_text, tables.SME_ENGAGEMENT_BONUSES)
        + interview.completion_percentage / 100 * 10
    )

    complexity = tables.COMPLEXITY_ENGAGEMENT[content.complexity_level]
    variety = format_variety(content.file_count)

    score = (
        clamp(domain) * 0.3
        + clamp(interactivity) * 0.25
        + clamp(sme_alignment) * 0.2
        + clamp(complexity) * 0.15
        + clamp(variety) * 0.1
    )
    return clamp(score)


def learning_effectiveness(content: ContentProfile, interview: InterviewProfile) -> float:
    topic_count = len(content.topics)
    content_type = content.content_type_text

    # Learning objectives clarity
    objectives = 70
    if 3 <= topic_count <= 8:
        objectives += 15
    elif topic_count >= 2:
        objectives += 10
    if contains_any(content_type, ("training", "procedure")):
        objectives += 10

    # Structure and progression
    structure = 75 + tables.COMPLEXITY_STRUCTURE_BONUS[content.complexity_level]
    structure += (content.overall_quality - 70) * 0.3

    application = 65 + keyword_points(content.topics_text, tables.PRACTICAL_APPLICATION_BONUSES)

    assessment = max(70, lookup(tables.DOMAIN_ASSESSMENT, content.assessment_domain))

    sme_support = 75 + keyword_points(interview.answers_text, tables.SME_SUPPORT_BONUSES)

    retention = 70
    if content.complexity_level == "medium":
        retention += 10
    if contains_any(content_type, ("practical", "applied")):
        retention += 10
    if content.file_count > 1:
        retention += 5

    score = (
        clamp(objectives) * 0.25
        + clamp(structure) * 0.2
        + clamp(application) * 0.2
        + clamp(assessment) * 0.15
        + clamp(sme_support) * 0.1
        + clamp(retention) * 0.1
    )
    return clamp(score)


def _priority(score: float) -> str | None:
    if score < HIGH_PRIORITY_BELOW:
        return "High"
    if score < MEDIUM_PRIORITY_BELOW:
        return "Medium"
    return None


def generate_scoring_recommendations(
    content_suitability: float,
    engagement_potential: float,
    learning_effectiveness: float,
) -> list[ScoringRecommendation]:
    """Fixed-text suggestions for every sub-score below 85."""
    recommendations = []
    for category, score in (
        ("Content Suitability", content_suitability),
        ("Engagement Potential", engagement_potential),
        ("Learning Effectiveness", learning_effectiveness),
    ):
        priority = _priority(score)
        if priority is None:
            continue
        text, improvement = RECOMMENDATION_TEXT[category][priority]
        recommendations.append(
            ScoringRecommendation(
                category=category,
                priority=priority,
                recommendation=text,
                expected_improvement=improvement,
            )
        )
    return recommendations


def calculate_content_scores(
    content: ContentProfile,
    interview: InterviewProfile,
) -> ContentScoreResult:
    """Score content quality along three dimensions.

    Sub-scores are rounded half-up; the overall score is the rounded mean of
    the three reported sub-scores, and recommendations are generated from the
    reported values so they always agree with what the caller sees.
    """
    suitability = round_half_up(content_suitability(content))
    engagement = round_half_up(engagement_potential(content, interview))
    effectiveness = round_half_up(learning_effectiveness(content, interview))
    overall = round_half_up((suitability + engagement + effectiveness) / 3)

    logger.debug(
        "Content scores: suitability=%d engagement=%d effectiveness=%d overall=%d",
        suitability, engagement, effectiveness, overall,
    )

    return ContentScoreResult(
        content_suitability=suitability,
        engagement_potential=engagement,
        learning_effectiveness=effectiveness,
        overall_score=overall,
        recommendations=generate_scoring_recommendations(suitability, engagement, effectiveness),
    )
