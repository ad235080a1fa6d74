"""Assessment evaluation service.

Runs the full scoring pipeline for a submitted answer array:

    catalog -> validation -> total score -> severity -> safety rule
            -> recommendations, next steps, clinical notes, activities

All steps are deterministic and free of I/O. Validation runs before
anything is scored, so malformed input never reaches the classifier.
"""

from dataclasses import dataclass
from typing import Any, Sequence

from mindscore.models.assessment import (
    AgeGroup,
    AssessmentType,
    ColorPalette,
    RiskLevel,
    SeverityBand,
)
from mindscore.scoring.catalog import get_catalog
from mindscore.scoring.clinical_notes import ClinicalNotes, generate_clinical_notes
from mindscore.scoring.recommendations import (
    DEFAULT_CRISIS_LINE,
    Recommendation,
    TherapeuticActivity,
    next_steps,
    recommend,
    therapeutic_activities,
)
from mindscore.scoring.scorer import score, validate_answers
from mindscore.scoring.severity import apply_safety_rule, classify

# Scoring algorithm version, stored with persisted results
SCORE_VERSION = "1.0.0"


@dataclass
class AssessmentResult:
    """Result of evaluating one answer set."""

    assessment_type: AssessmentType
    age_group: AgeGroup
    score: int
    max_score: int
    severity: SeverityBand
    risk_level: RiskLevel
    color: str
    interpretation: str
    suicidal_ideation: bool
    recommendations: list[Recommendation]
    next_steps: list[str]
    clinical_notes: ClinicalNotes
    activities: list[TherapeuticActivity]
    score_version: str = SCORE_VERSION


class AssessmentService:
    """Evaluates questionnaire answers into an AssessmentResult."""

    def __init__(
        self,
        palette: ColorPalette | str = ColorPalette.CLINICAL,
        crisis_line: str = DEFAULT_CRISIS_LINE,
    ) -> None:
        self.palette = ColorPalette(palette)
        self.crisis_line = crisis_line

    def evaluate(
        self,
        assessment_type: AssessmentType | str,
        answers: Sequence[Any],
        age_group: AgeGroup | str = AgeGroup.ADULT,
        demographics: dict[str, Any] | None = None,
    ) -> AssessmentResult:
        """Score and classify a submitted answer array.

        Args:
            assessment_type: "depression" or "anxiety"
            answers: Raw answers, one per catalog question
            age_group: Age group whose catalog was answered
            demographics: Optional demographics for clinical notes

        Returns:
            AssessmentResult

        Raises:
            UnknownCatalogKey: If no catalog exists for (type, age group)
            InvalidInputLength: If the answer count is wrong
            InvalidInputValue: If an answer is not an integer 0-3
        """
        catalog = get_catalog(assessment_type, age_group)
        answer_set = validate_answers(answers, catalog)

        total = score(answer_set)
        classification = classify(
            total, catalog.assessment_type, catalog.age_group, palette=self.palette
        )
        classification = apply_safety_rule(classification, answer_set)

        return AssessmentResult(
            assessment_type=catalog.assessment_type,
            age_group=catalog.age_group,
            score=total,
            max_score=catalog.max_score,
            severity=classification.severity,
            risk_level=classification.risk_level,
            color=classification.color,
            interpretation=classification.interpretation,
            suicidal_ideation=classification.suicidal_ideation,
            recommendations=recommend(
                catalog.assessment_type,
                classification.severity,
                catalog.age_group,
                suicidal_ideation=classification.suicidal_ideation,
                crisis_line=self.crisis_line,
            ),
            next_steps=next_steps(
                catalog.assessment_type,
                classification.severity,
                suicidal_ideation=classification.suicidal_ideation,
                crisis_line=self.crisis_line,
            ),
            clinical_notes=generate_clinical_notes(
                answer_set, total, classification.severity, demographics
            ),
            activities=therapeutic_activities(catalog.age_group),
        )
