"""Database initialization utilities."""

import logging

from mindscore.db.base import Base
from mindscore.db.session import engine

# Register models on Base.metadata
from mindscore.models.assessment_record import AssessmentRecord  # noqa: F401

logger = logging.getLogger(__name__)


async def create_tables() -> None:
    """Create all database tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")

