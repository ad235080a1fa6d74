"""Business logic services."""

from mindscore.services.assessment import AssessmentResult, AssessmentService
from mindscore.services.history import AssessmentHistoryService

__all__ = [
    "AssessmentResult",
    "AssessmentService",
    "AssessmentHistoryService",
]
