"""Pydantic schemas for assessment operations.

Responses are serialized with camelCase field names for the web
front end; requests accept either camelCase or snake_case.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mindscore.models.assessment import (
    AgeGroup,
    AssessmentType,
    RecommendationPriority,
    RiskLevel,
    SeverityBand,
)


class CamelModel(BaseModel):
    """Base schema with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OptionRead(CamelModel):
    """Response option."""

    value: int
    label: str


class QuestionRead(CamelModel):
    """Catalog question."""

    id: str
    text: str
    category: str
    options: list[OptionRead]


class CatalogRead(CamelModel):
    """Question catalog for one assessment type and age group."""

    assessment_type: AssessmentType
    age_group: AgeGroup
    title: str
    description: str
    instructions: str
    timeframe: str
    max_score: int
    scoring_info: dict[str, str]
    questions: list[QuestionRead]


class AssessmentSubmit(CamelModel):
    """Schema for submitting questionnaire answers.

    Answers are validated by the scoring engine, not here, so that
    malformed input (missing, null, not an array, wrong length or
    out-of-range values) is rejected with a 400 and a precise message.
    """

    answers: Any = Field(None, description="One response (0-3) per catalog question")
    age_group: str = Field("adult", description="child, teen, adult or senior")
    demographics: dict[str, Any] | None = None


class RecommendationRead(CamelModel):
    """Clinical recommendation."""

    priority: RecommendationPriority
    category: str
    title: str
    description: str
    action: str


class ExerciseRead(CamelModel):
    """Exercise suggestion."""

    name: str
    duration: str
    image_url: str


class ActivityRead(CamelModel):
    """Therapeutic activity suggestion."""

    type: str
    title: str
    description: str
    duration: str | None = None
    image_url: str | None = None
    exercises: list[ExerciseRead] = []


class ClinicalNotesRead(CamelModel):
    """Clinical notes for clinician review."""

    assessment: str
    score: str
    symptoms: list[str]
    risk_factors: list[str]
    recommendations: list[str]


class AssessmentResultResponse(CamelModel):
    """Result returned after a successful submission."""

    assessment_id: str
    assessment_type: AssessmentType
    age_group: AgeGroup
    total_score: int
    max_score: int
    severity: SeverityBand
    risk_level: RiskLevel
    color: str
    suicidal_ideation: bool
    interpretation: str
    recommendations: list[RecommendationRead]
    clinical_notes: ClinicalNotesRead
    next_steps: list[str]
    activities: list[ActivityRead]
    score_version: str


class AssessmentRecordRead(CamelModel):
    """Stored assessment as returned by history and lookup endpoints."""

    id: str
    assessment_type: AssessmentType
    age_group: AgeGroup
    answers: list[int]
    total_score: int
    max_score: int
    severity: SeverityBand
    risk_level: RiskLevel
    suicidal_ideation: bool
    recommendations: list[RecommendationRead]
    clinical_notes: ClinicalNotesRead
    demographics: dict[str, Any]
    score_version: str
    created_at: datetime


class AssessmentHistoryResponse(CamelModel):
    """Page of a user's stored assessments."""

    assessments: list[AssessmentRecordRead]


class TrendPoint(CamelModel):
    """Single point in a score series."""

    date: datetime
    score: int
    severity: SeverityBand


class TrendSeries(CamelModel):
    """Score series with summary statistics."""

    assessments: list[TrendPoint]
    trend: str
    average_score: float
    latest_severity: SeverityBand | None = None


class AnalyticsResponse(CamelModel):
    """Per-type score analytics over a timeframe."""

    depression: TrendSeries
    anxiety: TrendSeries
    timeframe: str
    total_assessments: int
