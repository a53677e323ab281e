"""Tests for the strategy match scorer."""

import pytest

from strategy_engine.catalog.loader import default_catalog
from strategy_engine.models.profile import ContentProfile, InterviewProfile
from strategy_engine.models.strategy import IdealFor, Implementation
from strategy_engine.scoring.strategy_match import (
    build_reasoning,
    complexity_alignment,
    complexity_bands,
    content_match,
    detected_preferences,
    feasibility,
    innovation_bonus,
    score_strategy,
    sme_match,
)


@pytest.fixture
def catalog():
    return default_catalog()


class TestComplexity:
    def test_bands(self):
        assert complexity_bands("low-to-medium") == {"low", "medium"}
        assert complexity_bands("high") == {"high"}
        assert complexity_bands("any level") is None

    @pytest.mark.parametrize(
        "strategy_level, content_level, points",
        [
            ("any level", "low", 25),
            ("low-to-medium", "medium", 30),
            ("medium-to-high", "high", 30),
            ("high", "medium", 15),
            ("medium", "low", 15),
            ("low-to-medium", "high", 15),
            ("high", "low", 0),
            ("low", "high", 0),
        ],
    )
    def test_alignment(self, strategy_factory, strategy_level, content_level, points):
        strategy = strategy_factory("S", "Plain", ideal_for=IdealFor(complexity=strategy_level))
        assert complexity_alignment(strategy, content_level) == points


class TestContentMatch:
    def test_affinity_from_topics(self, catalog, software_content):
        # software training 95 -> 47.5, medium exact 30, software family 15
        microlearning = catalog.by_key("MICROLEARNING")
        assert content_match(microlearning, software_content) == pytest.approx(92.5)

    def test_affinity_from_content_type(self, catalog):
        content = ContentProfile(primary_content_type="Compliance Training", complexity_level="low")
        assessment = catalog.by_key("ASSESSMENT_DRIVEN")
        # 95 -> 47.5, any level 25
        assert content_match(assessment, content) == pytest.approx(72.5)

    def test_keyword_family_per_family(self, catalog):
        # "software" and "process" both favour guided learning
        content = ContentProfile(topics=["software", "process"], complexity_level="low")
        guided = catalog.by_key("GUIDED_LEARNING")
        # low vs medium adjacent 15, two families 15 each
        assert content_match(guided, content) == pytest.approx(15 + 15 + 15)

    def test_keyword_family_once_per_family(self, catalog):
        # "software" matches both "microlearning" and "simulation" keywords but counts once
        content = ContentProfile(topics=["software"], complexity_level="high")
        simulation = catalog.by_key("SIMULATION_VIRTUAL_LABS")
        content_only = ContentProfile(topics=["history"], complexity_level="high")
        diff = content_match(simulation, content) - content_match(simulation, content_only)
        assert diff == pytest.approx(15)

    def test_versatility_needs_exact_entry(self, catalog, empty_content):
        adaptive = catalog.by_key("ADAPTIVE_LEARNING")
        # "any content requiring personalization" is not the bare "any content" entry
        assert content_match(adaptive, empty_content) == pytest.approx(25)

    def test_any_content_entry_is_versatile(self, strategy_factory, empty_content):
        strategy = strategy_factory(
            "S", "Plain", ideal_for=IdealFor(content_types=("Any content",), complexity="high")
        )
        assert content_match(strategy, empty_content) == pytest.approx(15 + 10)

    def test_many_content_types_are_versatile(self, strategy_factory, empty_content):
        strategy = strategy_factory(
            "S", "Plain", ideal_for=IdealFor(content_types=("a", "b", "c", "d", "e"), complexity="high")
        )
        assert content_match(strategy, empty_content) == pytest.approx(15 + 10)


class TestSmeMatch:
    def test_preference_detection(self, software_interview):
        assert detected_preferences(software_interview) == [
            "interactive",
            "practical",
            "scenarios",
            "mobile",
            "collaboration",
        ]

    def test_floor_without_answers(self, catalog, empty_interview):
        assert all(sme_match(s, empty_interview) == 0 for s in catalog)

    def test_signal_matches_name(self, catalog):
        interview = InterviewProfile(answers={"0": "Learners are busy and need quick refreshers"})
        assert sme_match(catalog.by_key("MICROLEARNING"), interview) == 20
        assert sme_match(catalog.by_key("MOBILE_LEARNING"), interview) == 0

    def test_two_signals_same_strategy(self, catalog):
        interview = InterviewProfile(answers={"0": "interactive with rewards"}, completion_percentage=50)
        assert sme_match(catalog.by_key("GAMIFICATION"), interview) == pytest.approx(40 + 15)

    def test_completion_only(self, catalog):
        interview = InterviewProfile(completion_percentage=100)
        assert sme_match(catalog.by_key("SOCIAL_LEARNING"), interview) == pytest.approx(30)


class TestFeasibility:
    def test_base(self, catalog, empty_content):
        assert feasibility(catalog.by_key("STORY_BASED"), empty_content) == 50

    def test_intensive_with_many_files(self, catalog):
        content = ContentProfile(file_count=11, complexity_level="high")
        assert feasibility(catalog.by_key("SIMULATION_VIRTUAL_LABS"), content) == 70
        assert feasibility(catalog.by_key("SPACED_LEARNING"), content) == 70

    def test_short_for_low_complexity(self, catalog):
        content = ContentProfile(complexity_level="low")
        assert feasibility(catalog.by_key("MOBILE_LEARNING"), content) == 80

    def test_simulation_overkill_for_low_complexity(self, catalog):
        content = ContentProfile(complexity_level="low")
        assert feasibility(catalog.by_key("SIMULATION_VIRTUAL_LABS"), content) == 30

    def test_custom_formats(self, strategy_factory):
        strategy = strategy_factory(
            "S", "Plain", implementation=Implementation(formats=("3D simulations",), duration="short")
        )
        assert feasibility(strategy, ContentProfile(complexity_level="low")) == 60


class TestInnovationBonus:
    def test_catalog_bonuses(self, catalog):
        assert innovation_bonus(catalog.by_key("ADAPTIVE_LEARNING")) == 30
        assert innovation_bonus(catalog.by_key("SIMULATION_VIRTUAL_LABS")) == 25
        assert innovation_bonus(catalog.by_key("STORY_BASED")) == 0

    def test_additive(self, strategy_factory):
        strategy = strategy_factory("S", "Adaptive Virtual Intelligent Tutor")
        assert innovation_bonus(strategy) == 75


class TestReasoning:
    def test_full_template(self, catalog):
        content = ContentProfile(topics=["patient", "clinical", "safety"])
        interview = InterviewProfile(answers={"0": "Interactive and practical, we are busy"})
        reasoning = build_reasoning(catalog.by_key("MICROLEARNING"), content, interview)
        assert reasoning == (
            "This strategy is recommended because: "
            "Your content focuses on patient and clinical, which aligns well with microlearning strategy. "
            "Your emphasis on interactive learning makes this strategy particularly suitable. "
            "The practical, hands-on approach you prefer is well-served by this strategy. "
            "This strategy accommodates time constraints mentioned in your responses. "
            "Delivers content in small, focused bursts (5-10 minutes) perfect for busy professionals "
            "or quick skill updates."
        )

    def test_empty_topics_no_answers(self, catalog, empty_interview):
        content = ContentProfile(topics=[])
        reasoning = build_reasoning(catalog.by_key("SOCIAL_LEARNING"), content, empty_interview)
        assert reasoning == (
            "This strategy is recommended because: "
            "Incorporates informal learning via social media, forums, and communities of practice."
        )

    def test_missing_topics_read_as_content(self, catalog, empty_content, empty_interview):
        reasoning = build_reasoning(catalog.by_key("SOCIAL_LEARNING"), empty_content, empty_interview)
        assert reasoning.startswith(
            "This strategy is recommended because: "
            "Your content focuses on content, which aligns well with social learning strategy. "
        )

    def test_single_topic(self, catalog, empty_interview):
        content = ContentProfile(topics=["onboarding"])
        reasoning = build_reasoning(catalog.by_key("GUIDED_LEARNING"), content, empty_interview)
        assert "Your content focuses on onboarding, which aligns" in reasoning


class TestScoreStrategy:
    def test_weighted_composite(self, catalog, software_content, software_interview):
        match = score_strategy(catalog.by_key("MICROLEARNING"), software_content, software_interview)
        b = match.breakdown
        assert (b.content_match, b.feasibility, b.innovation_bonus) == (pytest.approx(92.5), 50, 0)
        assert b.sme_match == pytest.approx(25.5)
        assert match.score == pytest.approx(92.5 * 0.4 + 25.5 * 0.35 + 50 * 0.15)

    def test_bounds_for_every_strategy(self, catalog):
        content = ContentProfile(
            topics=["technical software leadership compliance sales onboarding process"],
            primary_content_type="compliance training sales training",
            complexity_level="low",
            file_count=20,
        )
        interview = InterviewProfile(
            answers={"0": "interactive practical assess scenario mobile team busy reward story"},
            completion_percentage=100,
        )
        for strategy in catalog:
            match = score_strategy(strategy, content, interview)
            assert 0 <= match.score <= 100
            for term in match.breakdown.model_dump().values():
                assert 0 <= term <= 100
