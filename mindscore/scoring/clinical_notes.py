"""Clinical notes summarising a scored assessment.

Notes are a reporting convenience layered on top of the raw answers:
items answered 2 or higher are listed as notable symptoms, and a
positive self-harm answer is recorded as a risk factor.
"""

from dataclasses import dataclass, field
from typing import Any

from mindscore.models.assessment import AgeGroup, AssessmentType, SeverityBand
from mindscore.scoring.scorer import AnswerSet

NOTABLE_SYMPTOM_THRESHOLD = 2

ASSESSMENT_NAMES = {
    AssessmentType.DEPRESSION: "Depression Screening",
    AssessmentType.ANXIETY: "Anxiety Screening",
}

# (under 18, over 65) wording per assessment type
AGE_CONSIDERATIONS = {
    AssessmentType.DEPRESSION: (
        "Consider adolescent-specific treatment approaches",
        "Consider geriatric depression considerations",
    ),
    AssessmentType.ANXIETY: (
        "Consider adolescent anxiety treatment approaches",
        "Consider late-life anxiety considerations",
    ),
}


@dataclass
class ClinicalNotes:
    """Structured notes for clinician review."""

    assessment: str
    score: str
    symptoms: list[str] = field(default_factory=list)
    risk_factors: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)


def _demographic_age(demographics: dict[str, Any] | None) -> int | float | None:
    if not demographics:
        return None
    age = demographics.get("age")
    if isinstance(age, bool) or not isinstance(age, (int, float)):
        return None
    return age


def generate_clinical_notes(
    answers: AnswerSet,
    total: int,
    severity: SeverityBand,
    demographics: dict[str, Any] | None = None,
) -> ClinicalNotes:
    """Generate clinical notes for a validated answer set.

    Args:
        answers: Validated answers, carrying their catalog
        total: Total score
        severity: Severity band of the total
        demographics: Optional demographics; only "age" is used

    Returns:
        ClinicalNotes
    """
    catalog = answers.catalog
    name = ASSESSMENT_NAMES[catalog.assessment_type]

    if catalog.age_group == AgeGroup.ADULT:
        assessment = f"{name} ({catalog.title})"
    else:
        assessment = f"{name} ({catalog.age_group.value.capitalize()} version)"

    notes = ClinicalNotes(
        assessment=assessment,
        score=f"Total score: {total}/{catalog.max_score} ({severity.value})",
    )

    for question, value in zip(catalog.questions, answers.values):
        if value >= NOTABLE_SYMPTOM_THRESHOLD:
            notes.symptoms.append(f"{question.category}: {question.text} (Score: {value})")

    self_harm_value = answers.self_harm_value
    if self_harm_value:
        notes.risk_factors.append(f"Suicidal ideation present (Score: {self_harm_value})")

    age = _demographic_age(demographics)
    if age is not None:
        under_18, over_65 = AGE_CONSIDERATIONS[catalog.assessment_type]
        if age < 18:
            notes.recommendations.append(under_18)
        elif age > 65:
            notes.recommendations.append(over_65)

    return notes
