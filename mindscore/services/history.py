"""Storage and retrieval of scored assessments."""

import logging
from datetime import datetime
from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mindscore.core.logging import assessment_logger
from mindscore.models.assessment import AssessmentType
from mindscore.models.assessment_record import AssessmentRecord
from mindscore.schemas.assessment import ClinicalNotesRead, RecommendationRead
from mindscore.services.assessment import AssessmentResult

logger = logging.getLogger(__name__)


class AssessmentHistoryService:
    """Persists assessment results and reads a user's history."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(
        self,
        user_id: str,
        answers: Sequence[int],
        result: AssessmentResult,
        demographics: dict[str, Any] | None = None,
    ) -> AssessmentRecord:
        """Store a result alongside the answers that produced it."""
        record = AssessmentRecord(
            user_id=user_id,
            assessment_type=result.assessment_type.value,
            age_group=result.age_group.value,
            answers=list(answers),
            total_score=result.score,
            max_score=result.max_score,
            severity=result.severity.value,
            risk_level=result.risk_level.value,
            suicidal_ideation=result.suicidal_ideation,
            recommendations=[
                RecommendationRead.model_validate(r).model_dump(mode="json")
                for r in result.recommendations
            ],
            clinical_notes=ClinicalNotesRead.model_validate(result.clinical_notes).model_dump(
                mode="json"
            ),
            demographics=demographics or {},
            score_version=result.score_version,
        )
        self.session.add(record)
        await self.session.commit()
        await self.session.refresh(record)

        assessment_logger.log(
            action="assessment.submitted",
            user_id=user_id,
            assessment_id=record.id,
            assessment_type=record.assessment_type,
            severity=record.severity,
            risk_level=record.risk_level,
        )
        return record

    async def get(self, assessment_id: str) -> AssessmentRecord | None:
        """Fetch a single stored assessment by id."""
        result = await self.session.execute(
            select(AssessmentRecord).where(AssessmentRecord.id == assessment_id)
        )
        return result.scalar_one_or_none()

    async def list_for_user(
        self,
        user_id: str,
        assessment_type: AssessmentType | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[AssessmentRecord]:
        """List a user's assessments, newest first."""
        query = select(AssessmentRecord).where(AssessmentRecord.user_id == user_id)
        if assessment_type is not None:
            query = query.where(AssessmentRecord.assessment_type == assessment_type.value)

        query = (
            query.order_by(AssessmentRecord.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_since(
        self,
        user_id: str,
        assessment_type: AssessmentType,
        start: datetime,
    ) -> list[AssessmentRecord]:
        """List a user's assessments of one type since ``start``, oldest first."""
        result = await self.session.execute(
            select(AssessmentRecord)
            .where(AssessmentRecord.user_id == user_id)
            .where(AssessmentRecord.assessment_type == assessment_type.value)
            .where(AssessmentRecord.created_at >= start)
            .order_by(AssessmentRecord.created_at.asc())
        )
        return list(result.scalars().all())
