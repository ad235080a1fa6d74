"""Severity classification for depression and anxiety totals.

A single 5-band table is used for both assessment types and every
age group:

- 0-4: Minimal (risk low)
- 5-9: Mild (risk low-moderate)
- 10-14: Moderate (risk moderate)
- 15-19: Moderately Severe (risk moderate-high)
- 20+: Severe (risk high)

Depression carries a safety rule: any non-zero answer to the self-harm
question forces the risk level to high and flags suicidal ideation.
The severity band itself is never changed by the rule.
"""

import logging
from dataclasses import dataclass, replace

from mindscore.models.assessment import (
    AgeGroup,
    AssessmentType,
    ColorPalette,
    RiskLevel,
    SeverityBand,
)
from mindscore.scoring.catalog import get_catalog
from mindscore.scoring.scorer import AnswerSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Classification:
    """Severity classification of a total score."""

    severity: SeverityBand
    risk_level: RiskLevel
    color: str
    interpretation: str
    suicidal_ideation: bool = False


# (lower bound, band, risk level), highest bound first
SEVERITY_BANDS = [
    (20, SeverityBand.SEVERE, RiskLevel.HIGH),
    (15, SeverityBand.MODERATELY_SEVERE, RiskLevel.MODERATE_HIGH),
    (10, SeverityBand.MODERATE, RiskLevel.MODERATE),
    (5, SeverityBand.MILD, RiskLevel.LOW_MODERATE),
    (0, SeverityBand.MINIMAL, RiskLevel.LOW),
]

PALETTES = {
    ColorPalette.CLINICAL: {
        SeverityBand.MINIMAL: "#4caf50",
        SeverityBand.MILD: "#8bc34a",
        SeverityBand.MODERATE: "#ff9800",
        SeverityBand.MODERATELY_SEVERE: "#ff5722",
        SeverityBand.SEVERE: "#f44336",
    },
    ColorPalette.PASTEL: {
        SeverityBand.MINIMAL: "#4ADE80",
        SeverityBand.MILD: "#34D399",
        SeverityBand.MODERATE: "#FBBF24",
        SeverityBand.MODERATELY_SEVERE: "#FB923C",
        SeverityBand.SEVERE: "#F87171",
    },
}

INTERPRETATIONS = {
    AssessmentType.DEPRESSION: {
        SeverityBand.MINIMAL: "Minimal depression symptoms. Continue monitoring and maintain healthy lifestyle practices.",
        SeverityBand.MILD: "Mild depression symptoms present. Consider self-care strategies and monitor for changes.",
        SeverityBand.MODERATE: "Moderate depression symptoms. Professional treatment is recommended for optimal outcomes.",
        SeverityBand.MODERATELY_SEVERE: "Moderately severe depression. Professional treatment is strongly recommended.",
        SeverityBand.SEVERE: "Severe depression symptoms. Immediate professional treatment is essential.",
    },
    AssessmentType.ANXIETY: {
        SeverityBand.MINIMAL: "Minimal anxiety symptoms. Continue current stress management practices.",
        SeverityBand.MILD: "Mild anxiety symptoms. Consider anxiety management techniques and monitor symptoms.",
        SeverityBand.MODERATE: "Moderate anxiety symptoms. Professional treatment may be beneficial.",
        SeverityBand.MODERATELY_SEVERE: "Moderately severe anxiety symptoms. Professional treatment is recommended.",
        SeverityBand.SEVERE: "Severe anxiety symptoms. Professional treatment is strongly recommended.",
    },
}

DEFAULT_INTERPRETATION = "Assessment complete. Consult with healthcare provider for interpretation."


def get_severity_band(total: int) -> tuple[SeverityBand, RiskLevel]:
    """Determine severity band and base risk level from total score."""
    for lower, band, risk in SEVERITY_BANDS:
        if total >= lower:
            return band, risk
    # Negative totals cannot come from a validated AnswerSet
    return SeverityBand.MINIMAL, RiskLevel.LOW


def get_interpretation(assessment_type: AssessmentType, severity: SeverityBand) -> str:
    """Return the interpretation text for a band."""
    return INTERPRETATIONS.get(assessment_type, {}).get(severity, DEFAULT_INTERPRETATION)


def classify(
    total: int,
    assessment_type: AssessmentType | str,
    age_group: AgeGroup | str = AgeGroup.ADULT,
    palette: ColorPalette | str = ColorPalette.CLINICAL,
) -> Classification:
    """Classify a total score.

    Args:
        total: Total score from the scorer
        assessment_type: "depression" or "anxiety"
        age_group: Age group the answers were collected with
        palette: Colour palette for the display colour

    Returns:
        Classification with severity, risk level, colour and interpretation

    Raises:
        UnknownCatalogKey: If the (type, age group) has no catalog
    """
    catalog = get_catalog(assessment_type, age_group)
    severity, risk_level = get_severity_band(total)

    return Classification(
        severity=severity,
        risk_level=risk_level,
        color=PALETTES[ColorPalette(palette)][severity],
        interpretation=get_interpretation(catalog.assessment_type, severity),
    )


def apply_safety_rule(classification: Classification, answers: AnswerSet) -> Classification:
    """Escalate risk when the self-harm question is answered above zero.

    Only catalogs with a designated self-harm question (depression) are
    affected. The severity band is left untouched.
    """
    self_harm_value = answers.self_harm_value
    if self_harm_value is None or self_harm_value == 0:
        return classification

    logger.warning(
        f"Self-harm item positive; risk escalated from "
        f"{classification.risk_level.value} to high"
    )
    return replace(classification, risk_level=RiskLevel.HIGH, suicidal_ideation=True)
