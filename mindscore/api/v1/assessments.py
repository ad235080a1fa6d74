"""Assessment endpoints: catalogs, submission, history and analytics."""

from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Query, status

from mindscore.api.deps import CurrentUserId, DbSession, Scoring
from mindscore.models.assessment import AgeGroup, AssessmentType
from mindscore.models.assessment_record import AssessmentRecord
from mindscore.schemas.assessment import (
    ActivityRead,
    AnalyticsResponse,
    AssessmentHistoryResponse,
    AssessmentRecordRead,
    AssessmentResultResponse,
    AssessmentSubmit,
    CatalogRead,
    ClinicalNotesRead,
    QuestionRead,
    RecommendationRead,
    TrendPoint,
    TrendSeries,
)
from mindscore.scoring.catalog import INSTRUCTIONS, TIMEFRAME, get_catalog
from mindscore.scoring.severity import SEVERITY_BANDS
from mindscore.services.analytics import (
    DEFAULT_TIMEFRAME,
    calculate_average,
    calculate_trend,
    resolve_timeframe,
    timeframe_start,
)
from mindscore.services.history import AssessmentHistoryService

router = APIRouter()


def _scoring_info(max_score: int) -> dict[str, str]:
    """Score range per band for display, e.g. {"minimal": "0-4"}."""
    info: dict[str, str] = {}
    upper = max_score
    for lower, band, _ in SEVERITY_BANDS:
        info[band.value] = f"{lower}-{upper}"
        upper = lower - 1
    return dict(reversed(info.items()))


@router.get("/history", response_model=AssessmentHistoryResponse)
async def get_assessment_history(
    user_id: CurrentUserId,
    session: DbSession,
    assessment_type: AssessmentType | None = Query(None, alias="type"),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
) -> AssessmentHistoryResponse:
    """Get the caller's stored assessments, newest first."""
    records = await AssessmentHistoryService(session).list_for_user(
        user_id, assessment_type=assessment_type, limit=limit, offset=offset
    )
    return AssessmentHistoryResponse(
        assessments=[AssessmentRecordRead.model_validate(r) for r in records]
    )


@router.get("/analytics", response_model=AnalyticsResponse)
async def get_assessment_analytics(
    user_id: CurrentUserId,
    session: DbSession,
    timeframe: str = Query(DEFAULT_TIMEFRAME),
) -> AnalyticsResponse:
    """Get score trends per assessment type over a timeframe.

    Supported timeframes: 1month, 3months, 6months, 1year.
    Unknown values fall back to 6months.
    """
    timeframe = resolve_timeframe(timeframe)
    start = timeframe_start(timeframe, datetime.now(timezone.utc))
    history = AssessmentHistoryService(session)

    series: dict[AssessmentType, TrendSeries] = {}
    for assessment_type in AssessmentType:
        records = await history.list_since(user_id, assessment_type, start)
        scores = [r.total_score for r in records]
        series[assessment_type] = TrendSeries(
            assessments=[
                TrendPoint(date=r.created_at, score=r.total_score, severity=r.severity)
                for r in records
            ],
            trend=calculate_trend(scores),
            average_score=calculate_average(scores),
            latest_severity=records[-1].severity if records else None,
        )

    return AnalyticsResponse(
        depression=series[AssessmentType.DEPRESSION],
        anxiety=series[AssessmentType.ANXIETY],
        timeframe=timeframe,
        total_assessments=sum(len(s.assessments) for s in series.values()),
    )


@router.get("/{assessment_type}/catalog", response_model=CatalogRead)
async def get_assessment_catalog(
    assessment_type: str,
    age_group: str = Query(AgeGroup.ADULT.value),
) -> CatalogRead:
    """Get the question catalog for an assessment type and age group.

    This endpoint is public so the questionnaire can be rendered
    before sign-in.
    """
    catalog = get_catalog(assessment_type, age_group)
    return CatalogRead(
        assessment_type=catalog.assessment_type,
        age_group=catalog.age_group,
        title=catalog.title,
        description=catalog.description,
        instructions=INSTRUCTIONS,
        timeframe=TIMEFRAME,
        max_score=catalog.max_score,
        scoring_info=_scoring_info(catalog.max_score),
        questions=[QuestionRead.model_validate(q) for q in catalog.questions],
    )


@router.post(
    "/{assessment_type}/submit",
    response_model=AssessmentResultResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_assessment(
    assessment_type: str,
    body: AssessmentSubmit,
    user_id: CurrentUserId,
    session: DbSession,
    scoring: Scoring,
) -> AssessmentResultResponse:
    """Score, classify and store a completed questionnaire.

    Malformed answers are rejected with 400 before anything is scored
    or stored.
    """
    result = scoring.evaluate(
        assessment_type,
        body.answers,
        age_group=body.age_group,
        demographics=body.demographics,
    )

    record = await AssessmentHistoryService(session).save(
        user_id, body.answers, result, demographics=body.demographics
    )

    return AssessmentResultResponse(
        assessment_id=record.id,
        assessment_type=result.assessment_type,
        age_group=result.age_group,
        total_score=result.score,
        max_score=result.max_score,
        severity=result.severity,
        risk_level=result.risk_level,
        color=result.color,
        suicidal_ideation=result.suicidal_ideation,
        interpretation=result.interpretation,
        recommendations=[RecommendationRead.model_validate(r) for r in result.recommendations],
        clinical_notes=ClinicalNotesRead.model_validate(result.clinical_notes),
        next_steps=result.next_steps,
        activities=[ActivityRead.model_validate(a) for a in result.activities],
        score_version=result.score_version,
    )


@router.get("/{assessment_id}", response_model=AssessmentRecordRead)
async def get_assessment(
    assessment_id: str,
    user_id: CurrentUserId,
    session: DbSession,
) -> AssessmentRecord:
    """Get one of the caller's stored assessments."""
    record = await AssessmentHistoryService(session).get(assessment_id)

    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assessment not found",
        )

    if record.user_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied",
        )

    return record
