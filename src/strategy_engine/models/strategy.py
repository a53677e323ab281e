"""Pydantic models for catalog strategies and ranked strategy output."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

_FROZEN_CAMEL = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class IdealFor(BaseModel):
    model_config = _FROZEN_CAMEL

    learner_types: tuple[str, ...] = ()
    content_types: tuple[str, ...] = ()
    time_constraints: str = ""
    complexity: str = "any level"  # "low", "low-to-medium", "high", "any level", ...


class Implementation(BaseModel):
    model_config = _FROZEN_CAMEL

    formats: tuple[str, ...] = ()
    duration: str = ""
    delivery: str = ""


class StrategyDefinition(BaseModel):
    """One instructional-design strategy from the catalog."""

    model_config = _FROZEN_CAMEL

    key: str
    name: str
    description: str
    use_cases: tuple[str, ...] = ()
    ideal_for: IdealFor = Field(default_factory=IdealFor)
    implementation: Implementation = Field(default_factory=Implementation)
    content_type_match: Mapping[str, int] | None = None  # phrase -> affinity 0-100, read-only
    icon: str = ""
    color: str = ""

    @field_validator("content_type_match")
    @classmethod
    def _check_affinities(cls, value: Mapping[str, int] | None) -> Mapping[str, int] | None:
        if value is None:
            return None
        for phrase, affinity in value.items():
            if not 0 <= affinity <= 100:
                raise ValueError(f"affinity for {phrase!r} must be within 0-100, got {affinity}")
        return MappingProxyType({phrase.lower(): affinity for phrase, affinity in value.items()})

    @field_serializer("content_type_match")
    def _dump_affinities(self, value: Mapping[str, int] | None) -> dict[str, int] | None:
        return None if value is None else dict(value)

    @property
    def lead_sentence(self) -> str:
        """Description text up to the first period."""
        return self.description.split(".")[0]


class MatchBreakdown(BaseModel):
    """The four clamped sub-terms behind a composite match score."""

    model_config = _FROZEN_CAMEL

    content_match: float
    sme_match: float
    feasibility: float
    innovation_bonus: float


class ScoredStrategy(BaseModel):
    """A ranked strategy recommendation."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    rank: int
    strategy_name: str
    score: float = Field(ge=0, le=100)
    reasoning: str
    description: str = ""
    icon: str = ""
    color: str = ""
    use_cases: tuple[str, ...] = ()
    implementation: Implementation = Field(default_factory=Implementation)
    ideal_for: IdealFor = Field(default_factory=IdealFor)
    breakdown: MatchBreakdown | None = None
