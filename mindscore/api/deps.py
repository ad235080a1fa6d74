"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from mindscore.core.config import settings
from mindscore.core.security import decode_access_token
from mindscore.db.session import get_db
from mindscore.services.assessment import AssessmentService

# Security scheme
security = HTTPBearer(auto_error=False)


async def get_current_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> dict | None:
    """Extract and decode the current JWT token."""
    if not credentials:
        return None

    return decode_access_token(credentials.credentials)


async def get_current_user_id(
    token: Annotated[dict | None, Depends(get_current_token)],
) -> str:
    """Get the authenticated user's id from the token subject.

    Raises:
        HTTPException: If the token is missing, invalid or has no subject
    """
    if not token or not token.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return str(token["sub"])


def get_assessment_service() -> AssessmentService:
    """Build the scoring service from settings."""
    return AssessmentService(
        palette=settings.severity_palette,
        crisis_line=settings.crisis_line_text,
    )


# Type aliases for dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
Scoring = Annotated[AssessmentService, Depends(get_assessment_service)]
