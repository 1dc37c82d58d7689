"""Health check endpoints."""

from fastapi import APIRouter

from ..deps import get_knowledge_service
from ..models import HealthResponse

router = APIRouter(tags=["health"])

API_VERSION = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        documents="not_checked",
    )


@router.get("/ready", response_model=HealthResponse)
async def readiness_check() -> HealthResponse:
    """Readiness check: verifies that the document store loads."""
    try:
        count = len(get_knowledge_service().list_documents())
        store_status = f"loaded ({count} docs)"
    except Exception as e:
        store_status = f"error: {str(e)}"

    return HealthResponse(
        status="ready",
        version=API_VERSION,
        documents=store_status,
    )
