"""Pydantic models for the content and SME-interview profiles fed to the engine.

Both profiles are tolerant of sparse or messy upstream payloads: missing
fields take documented defaults and malformed values are coerced (and logged)
rather than rejected.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

logger = logging.getLogger(__name__)

COMPLEXITY_LEVELS = ("low", "medium", "high")
DEFAULT_COMPLEXITY = "medium"
NEUTRAL_QUALITY = 75.0

# Keys of the upstream ``qualityAssessment`` block -> flat field names
_QUALITY_ASSESSMENT_KEYS = {
    "clarity": "clarity",
    "completeness": "completeness",
    "structure": "structure",
    "currency": "currency",
    "overallScore": "quality_score",
    "overall_score": "quality_score",
}

_TOPIC_KEYS = ("topics", "extractedTopics", "extracted_topics")


def _coerce_number(value: Any, field_name: str) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric %s: %r", field_name, value)
        return None
    if not math.isfinite(number):
        logger.warning("Ignoring non-finite %s: %r", field_name, value)
        return None
    return number


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


class ContentProfile(BaseModel):
    """Structured summary of the uploaded content."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    topics: tuple[str, ...] = Field(
        default=(), validation_alias=AliasChoices("topics", "extractedTopics", "extracted_topics")
    )
    complexity_level: str = Field(
        default=DEFAULT_COMPLEXITY, validation_alias=AliasChoices("complexity_level", "complexityLevel")
    )
    primary_content_type: str = Field(
        default="", validation_alias=AliasChoices("primary_content_type", "primaryContentType")
    )
    content_domain: str | None = Field(
        default=None, validation_alias=AliasChoices("content_domain", "contentDomain")
    )
    classified_content_type: str | None = Field(
        default=None, validation_alias=AliasChoices("classified_content_type", "classifiedContentType")
    )
    file_count: int = Field(default=1, validation_alias=AliasChoices("file_count", "fileCount"))
    clarity: float | None = None
    completeness: float | None = None
    structure: float | None = None
    currency: float | None = None
    quality_score: float | None = Field(
        default=None, validation_alias=AliasChoices("quality_score", "qualityScore")
    )

    @model_validator(mode="before")
    @classmethod
    def _flatten_upstream_blocks(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        # null topics count as missing
        data = {k: v for k, v in data.items() if not (k in _TOPIC_KEYS and v is None)}

        classification = data.get("domainClassification") or data.get("domain_classification")
        if isinstance(classification, dict) and not (
            data.get("classified_content_type") or data.get("classifiedContentType")
        ):
            data["classified_content_type"] = classification.get("contentType") or classification.get(
                "content_type"
            )

        assessment = data.get("qualityAssessment") or data.get("quality_assessment")
        if not isinstance(assessment, dict):
            return data
        data = {k: v for k, v in data.items() if k not in ("qualityAssessment", "quality_assessment")}
        for src, dest in _QUALITY_ASSESSMENT_KEYS.items():
            if assessment.get(src) is not None and data.get(dest) is None:
                data[dest] = assessment[src]
        return data

    @field_validator("topics", mode="before")
    @classmethod
    def _coerce_topics(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,) if value.strip() else ()
        if not isinstance(value, (list, tuple)):
            logger.warning("Ignoring topics of unexpected type %s", type(value).__name__)
            return ()
        return tuple(str(t) for t in value if t is not None)

    @field_validator("complexity_level", mode="before")
    @classmethod
    def _normalize_complexity(cls, value: Any) -> str:
        level = str(value).strip().lower() if value is not None else ""
        if level not in COMPLEXITY_LEVELS:
            if level:
                logger.warning("Unknown complexity level %r, using %s", value, DEFAULT_COMPLEXITY)
            return DEFAULT_COMPLEXITY
        return level

    @field_validator("primary_content_type", mode="before")
    @classmethod
    def _coerce_content_type(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("content_domain", "classified_content_type", mode="before")
    @classmethod
    def _coerce_domain(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)

    @field_validator("file_count", mode="before")
    @classmethod
    def _coerce_file_count(cls, value: Any) -> int:
        number = _coerce_number(value, "file_count")
        if number is None or number < 0:
            return 1
        return int(number)

    @field_validator("clarity", "completeness", "structure", "currency", "quality_score", mode="before")
    @classmethod
    def _coerce_quality(cls, value: Any, info: ValidationInfo) -> float | None:
        number = _coerce_number(value, info.field_name)
        return None if number is None else _clamp(number)

    @property
    def topics_text(self) -> str:
        """Topics joined into one lowercase string for keyword detection."""
        return " ".join(self.topics).lower()

    @property
    def content_type_text(self) -> str:
        return self.primary_content_type.strip().lower()

    @property
    def reasoning_topics(self) -> tuple[str, ...]:
        """Topics quoted in explanations; ``("content",)`` when none were supplied."""
        if "topics" not in self.model_fields_set:
            return ("content",)
        return self.topics

    @property
    def engagement_domain(self) -> str:
        """Domain label for the engagement table.

        Falls back to the classifier's content type, then the primary content type.
        """
        for label in (self.content_domain, self.classified_content_type):
            if label:
                return label.strip().lower()
        return self.content_type_text

    @property
    def assessment_domain(self) -> str:
        return (self.content_domain or "").strip().lower()

    @property
    def overall_quality(self) -> float:
        return NEUTRAL_QUALITY if self.quality_score is None else self.quality_score

    def quality_readings(self) -> tuple[float, float, float, float]:
        """Clarity, completeness, structure and currency with defaults applied."""
        clarity = self.clarity if self.clarity is not None else self.quality_score
        readings = (clarity, self.completeness, self.structure, self.currency)
        return tuple(NEUTRAL_QUALITY if r is None else r for r in readings)


class InterviewProfile(BaseModel):
    """SME interview answers and how much of the interview was completed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    answers: dict[str, str] = Field(default_factory=dict)
    completion_percentage: float = Field(
        default=0.0, validation_alias=AliasChoices("completion_percentage", "completionPercentage")
    )

    @field_validator("answers", mode="before")
    @classmethod
    def _coerce_answers(cls, value: Any) -> dict[str, str]:
        if value is None:
            return {}
        if isinstance(value, (list, tuple)):
            value = dict(enumerate(value))
        if not isinstance(value, dict):
            logger.warning("Ignoring answers of unexpected type %s", type(value).__name__)
            return {}
        return {str(k): str(v) for k, v in value.items() if v is not None}

    @field_validator("completion_percentage", mode="before")
    @classmethod
    def _coerce_completion(cls, value: Any) -> float:
        number = _coerce_number(value, "completion_percentage")
        return 0.0 if number is None else _clamp(number)

    @property
    def answers_text(self) -> str:
        """All answers joined into one lowercase string for keyword detection."""
        return " ".join(self.answers.values()).lower()
