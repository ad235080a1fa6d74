"""Domain enums and database models for MindScore.

Database models are imported from their own modules so that the scoring
engine can use the enums without loading SQLAlchemy.
"""

from mindscore.models.assessment import (
    AgeGroup,
    AssessmentType,
    ColorPalette,
    RecommendationPriority,
    RiskLevel,
    SeverityBand,
)

__all__ = [
    "AgeGroup",
    "AssessmentType",
    "ColorPalette",
    "RecommendationPriority",
    "RiskLevel",
    "SeverityBand",
]
