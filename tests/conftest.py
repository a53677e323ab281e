"""Shared test fixtures."""

from __future__ import annotations

import pytest

from strategy_engine.catalog.loader import StrategyCatalog
from strategy_engine.models.profile import ContentProfile, InterviewProfile
from strategy_engine.models.strategy import IdealFor, Implementation, StrategyDefinition


@pytest.fixture
def healthcare_content() -> ContentProfile:
    return ContentProfile(
        topics=["patient", "clinical", "safety"],
        complexity_level="high",
        primary_content_type="healthcare training",
        file_count=3,
    )


@pytest.fixture
def simulation_interview() -> InterviewProfile:
    return InterviewProfile(
        answers={
            "0": "Nurses need hands-on simulation before they touch real equipment",
            "1": "We want interactive, real-world scenarios with visual feedback",
        },
        completion_percentage=100,
    )


@pytest.fixture
def software_content() -> ContentProfile:
    return ContentProfile(
        topics=["software training", "technical skills", "programming"],
        complexity_level="medium",
        primary_content_type="technical documentation",
        file_count=5,
    )


@pytest.fixture
def software_interview() -> InterviewProfile:
    return InterviewProfile(
        answers={
            "0": "Our team needs hands-on practice with the new software tools",
            "1": "We prefer interactive learning that we can do at our own pace",
            "2": "Mobile accessibility is important for our field workers",
            "3": "We need practical scenarios that match real-world situations",
        },
        completion_percentage=85,
    )


@pytest.fixture
def empty_content() -> ContentProfile:
    return ContentProfile()


@pytest.fixture
def empty_interview() -> InterviewProfile:
    return InterviewProfile()


def make_strategy(key: str, name: str, **overrides) -> StrategyDefinition:
    fields = {
        "key": key,
        "name": name,
        "description": f"{name} description. Second sentence.",
        "use_cases": ("Use case",),
        "ideal_for": IdealFor(
            learner_types=("all levels",),
            content_types=("procedures",),
            time_constraints="flexible",
            complexity="medium",
        ),
        "implementation": Implementation(
            formats=("online modules",),
            duration="20 minutes",
            delivery="online",
        ),
    }
    fields.update(overrides)
    return StrategyDefinition(**fields)


@pytest.fixture
def twin_catalog() -> StrategyCatalog:
    """Three strategies; the first and last are scored identically."""
    return StrategyCatalog([
        make_strategy("ALPHA", "Alpha Method"),
        make_strategy("BETA", "Beta Method", ideal_for=IdealFor(complexity="low")),
        make_strategy("GAMMA", "Gamma Method"),
    ])


@pytest.fixture
def strategy_factory():
    return make_strategy
