"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from mindscore.api.v1 import assessments, health

api_router = APIRouter()

# Health check
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

# Assessments
api_router.include_router(
    assessments.router,
    prefix="/assessments",
    tags=["assessments"],
)
