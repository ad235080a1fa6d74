"""Stored assessment results."""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.dialects.postgresql import JSON
from sqlalchemy.orm import Mapped, mapped_column

from mindscore.db.base import Base, TimestampMixin


class AssessmentRecord(Base, TimestampMixin):
    """A submitted assessment and the result computed for it.

    Written once by the submit endpoint and never updated.
    """

    __tablename__ = "assessment_records"

    # Subject of the bearer token that submitted the assessment
    user_id: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        index=True,
    )
    assessment_type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        index=True,
    )
    age_group: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
    )
    answers: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
    )
    total_score: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )
    max_score: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )
    severity: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
    )
    risk_level: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
    )
    suicidal_ideation: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    recommendations: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
    )
    clinical_notes: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
    )
    demographics: Mapped[dict] = mapped_column(
        JSON,
        default=dict,
        nullable=False,
    )
    # Version of the scoring algorithm used
    score_version: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
    )
