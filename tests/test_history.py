"""Tests for assessment persistence."""

from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from mindscore.models.assessment import AssessmentType
from mindscore.services.assessment import AssessmentService
from mindscore.services.history import AssessmentHistoryService

service = AssessmentService()


async def _submit(
    history: AssessmentHistoryService, user_id: str, assessment_type: str, answers: list[int]
):
    result = service.evaluate(assessment_type, answers)
    return await history.save(user_id, answers, result)


class TestAssessmentHistoryService:
    """Tests for AssessmentHistoryService."""

    async def test_save_stores_result(self, async_session: AsyncSession) -> None:
        history = AssessmentHistoryService(async_session)

        record = await _submit(history, "user-1", "depression", [0] * 8 + [2])

        assert record.id
        assert record.user_id == "user-1"
        assert record.assessment_type == "depression"
        assert record.total_score == 2
        assert record.severity == "minimal"
        assert record.risk_level == "high"
        assert record.suicidal_ideation is True
        assert record.answers == [0] * 8 + [2]
        assert record.recommendations[0]["priority"] == "urgent"
        assert record.clinical_notes["risk_factors"] == ["Suicidal ideation present (Score: 2)"]
        assert record.created_at is not None

    async def test_get(self, async_session: AsyncSession) -> None:
        history = AssessmentHistoryService(async_session)
        record = await _submit(history, "user-1", "anxiety", [1] * 7)

        fetched = await history.get(record.id)

        assert fetched is not None
        assert fetched.total_score == 7

    async def test_get_missing(self, async_session: AsyncSession) -> None:
        history = AssessmentHistoryService(async_session)
        assert await history.get("00000000-0000-0000-0000-000000000000") is None

    async def test_list_for_user_filters(self, async_session: AsyncSession) -> None:
        """Only the owner's records of the requested type are listed."""
        history = AssessmentHistoryService(async_session)
        await _submit(history, "user-1", "depression", [1] * 9)
        await _submit(history, "user-1", "anxiety", [1] * 7)
        await _submit(history, "user-2", "depression", [2] * 9)

        everything = await history.list_for_user("user-1")
        depression = await history.list_for_user(
            "user-1", assessment_type=AssessmentType.DEPRESSION
        )

        assert len(everything) == 2
        assert [r.total_score for r in depression] == [9]

    async def test_list_for_user_pagination(self, async_session: AsyncSession) -> None:
        history = AssessmentHistoryService(async_session)
        for _ in range(3):
            await _submit(history, "user-1", "anxiety", [0] * 7)

        page = await history.list_for_user("user-1", limit=2, offset=2)

        assert len(page) == 1

    async def test_list_since_window_and_order(self, async_session: AsyncSession) -> None:
        """Records before the window are excluded; the rest are oldest first."""
        history = AssessmentHistoryService(async_session)
        now = datetime.now(timezone.utc)

        old = await _submit(history, "user-1", "depression", [3] * 9)
        older = await _submit(history, "user-1", "depression", [2] * 9)
        recent = await _submit(history, "user-1", "depression", [1] * 9)
        old.created_at = now - timedelta(days=400)
        older.created_at = now - timedelta(days=20)
        recent.created_at = now - timedelta(days=1)
        await async_session.commit()

        records = await history.list_since(
            "user-1", AssessmentType.DEPRESSION, now - timedelta(days=30)
        )

        assert [r.total_score for r in records] == [18, 9]
