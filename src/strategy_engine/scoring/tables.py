"""Lookup tables behind the scoring heuristics.

Keyword tables are ``(phrases, points)`` pairs: points are awarded once when
any phrase occurs (case-insensitive substring) in the text being scanned.
"""

from __future__ import annotations

from types import MappingProxyType

KeywordBonuses = tuple[tuple[tuple[str, ...], float], ...]

# --- Content Score Calculator -------------------------------------------------

CONTENT_TYPE_SUITABILITY = MappingProxyType({
    "technical documentation": 90,
    "business training": 95,
    "compliance training": 88,
    "process documentation": 85,
    "software training": 92,
    "healthcare training": 87,
    "safety protocols": 90,
    "product training": 88,
    "leadership development": 85,
    "sales training": 90,
})

DOMAIN_ENGAGEMENT = MappingProxyType({
    "technical training": 85,
    "business training": 80,
    "compliance training": 70,
    "healthcare training": 90,
    "software training": 88,
    "sales training": 92,
    "leadership development": 85,
    "safety training": 82,
    "product training": 78,
    "customer service": 88,
})

DOMAIN_ASSESSMENT = MappingProxyType({
    "technical training": 90,
    "compliance training": 95,
    "software training": 88,
    "healthcare training": 92,
    "business training": 85,
    "sales training": 88,
    "safety training": 90,
})

DEFAULT_LOOKUP_SCORE = 75

COMPLEXITY_SUITABILITY = MappingProxyType({"low": 85, "medium": 90, "high": 80})
COMPLEXITY_ENGAGEMENT = MappingProxyType({"low": 75, "medium": 85, "high": 80})
COMPLEXITY_STRUCTURE_BONUS = MappingProxyType({"low": 10, "medium": 15, "high": 5})

# Scanned against joined topics
INTERACTIVITY_BONUSES: KeywordBonuses = (
    (("process", "procedure"), 10),
    (("software", "application"), 15),
    (("decision", "problem solving"), 12),
    (("scenario", "case study"), 10),
    (("hands-on", "practical"), 8),
)

PRACTICAL_APPLICATION_BONUSES: KeywordBonuses = (
    (("process", "procedure"), 15),
    (("software", "tool"), 12),
    (("technique", "method"), 10),
    (("best practice", "guideline"), 8),
    (("case study", "example"), 10),
)

# Scanned against joined interview answers
SME_ENGAGEMENT_BONUSES: KeywordBonuses = (
    (("interactive", "engaging"), 15),
    (("hands-on", "practical"), 12),
    (("scenario", "real-world"), 10),
    (("visual", "multimedia"), 8),
    (("gamifi", "competition"), 10),
    (("social", "collaboration"), 8),
)

SME_SUPPORT_BONUSES: KeywordBonuses = (
    (("objective", "goal"), 10),
    (("assess", "measure"), 10),
    (("skill", "competenc"), 8),
    (("performance", "result"), 8),
    (("apply", "practice"), 5),
)

# --- Strategy Match Scorer ----------------------------------------------------

# Topic keyword -> strategy-name keywords it favours
CONTENT_KEYWORD_FAMILIES = MappingProxyType({
    "technical": ("simulation", "virtual", "hands-on"),
    "software": ("microlearning", "guided", "simulation"),
    "leadership": ("case", "scenario", "exploration"),
    "compliance": ("assessment", "scenario", "case"),
    "sales": ("gamification", "guided", "story"),
    "onboarding": ("guided", "microlearning", "gamification"),
    "process": ("guided", "microlearning", "collaborative"),
})

# Preference signal -> (answer phrases, strategy-name keyword)
SME_PREFERENCE_SIGNALS = MappingProxyType({
    "interactive": (("interactive", "engage"), "gamification"),
    "practical": (("practical", "hands-on"), "scenario"),
    "assessment": (("assess", "test"), "assessment"),
    "scenarios": (("scenario", "real-world"), "case"),
    "mobile": (("mobile", "flexible"), "mobile"),
    "collaboration": (("team", "group"), "collaborative"),
    "time_constrained": (("busy", "quick"), "micro"),
    "gamified": (("motivat", "reward"), "gamification"),
    "story_based": (("story", "narrative"), "story"),
})

INNOVATION_BONUSES: KeywordBonuses = (
    (("adaptive",), 30),
    (("virtual", "simulation"), 25),
    (("ai", "intelligent"), 20),
)

INTENSIVE_DURATION_MARKERS = ("intensive", "extended")
SHORT_DURATION_MARKERS = ("short",)
HEAVY_SIMULATION_FORMAT = "3D simulations"


def contains_any(text: str, phrases: tuple[str, ...]) -> bool:
    return any(p in text for p in phrases)


def keyword_points(text: str, bonuses: KeywordBonuses) -> float:
    """Sum the points of every keyword group found in ``text``."""
    return sum(points for phrases, points in bonuses if contains_any(text, phrases))


def lookup(table: MappingProxyType, key: str, default: float = DEFAULT_LOOKUP_SCORE) -> float:
    return table.get(key, default)
