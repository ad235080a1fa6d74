"""Enumerations shared by the scoring engine and the API layer."""

from enum import Enum


class AssessmentType(str, Enum):
    """Questionnaire families supported by the scoring engine."""

    DEPRESSION = "depression"  # PHQ-9 and age-adapted variants
    ANXIETY = "anxiety"  # GAD-7 and age-adapted variants


class AgeGroup(str, Enum):
    """Age groups with their own question wording."""

    CHILD = "child"  # 6-12 years
    TEEN = "teen"  # 13-19 years
    ADULT = "adult"  # 20-64 years
    SENIOR = "senior"  # 65+ years


class SeverityBand(str, Enum):
    """Severity band classifications."""

    MINIMAL = "minimal"
    MILD = "mild"
    MODERATE = "moderate"
    MODERATELY_SEVERE = "moderately severe"
    SEVERE = "severe"


class RiskLevel(str, Enum):
    """Safety-oriented risk level.

    Coarser than the severity band and can be escalated on its own
    by the self-harm rule.
    """

    LOW = "low"
    LOW_MODERATE = "low-moderate"
    MODERATE = "moderate"
    MODERATE_HIGH = "moderate-high"
    HIGH = "high"


class RecommendationPriority(str, Enum):
    """Priority attached to a clinical recommendation."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    URGENT = "urgent"


class ColorPalette(str, Enum):
    """Display palettes for severity colours."""

    CLINICAL = "clinical"
    PASTEL = "pastel"
