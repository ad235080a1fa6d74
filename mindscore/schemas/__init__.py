"""Pydantic schemas for API request/response validation."""

from mindscore.schemas.assessment import (
    AnalyticsResponse,
    AssessmentHistoryResponse,
    AssessmentRecordRead,
    AssessmentResultResponse,
    AssessmentSubmit,
    CatalogRead,
)

__all__ = [
    "AnalyticsResponse",
    "AssessmentHistoryResponse",
    "AssessmentRecordRead",
    "AssessmentResultResponse",
    "AssessmentSubmit",
    "CatalogRead",
]
