"""Scoring engine for depression and anxiety questionnaires."""

from mindscore.scoring.catalog import CATALOGS, Catalog, Option, Question, get_catalog
from mindscore.scoring.clinical_notes import ClinicalNotes, generate_clinical_notes
from mindscore.scoring.errors import (
    InvalidInputLength,
    InvalidInputValue,
    ScoringError,
    UnknownCatalogKey,
)
from mindscore.scoring.recommendations import (
    Recommendation,
    TherapeuticActivity,
    next_steps,
    recommend,
    therapeutic_activities,
)
from mindscore.scoring.scorer import AnswerSet, score, validate_answers
from mindscore.scoring.severity import Classification, apply_safety_rule, classify

__all__ = [
    "CATALOGS",
    "Catalog",
    "Option",
    "Question",
    "get_catalog",
    "AnswerSet",
    "validate_answers",
    "score",
    "Classification",
    "classify",
    "apply_safety_rule",
    "Recommendation",
    "TherapeuticActivity",
    "recommend",
    "next_steps",
    "therapeutic_activities",
    "ClinicalNotes",
    "generate_clinical_notes",
    "ScoringError",
    "InvalidInputLength",
    "InvalidInputValue",
    "UnknownCatalogKey",
]
