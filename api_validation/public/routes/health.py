"""
Health check endpoint. Minimal, stable, no business logic.
"""
from fastapi import APIRouter
from datetime import datetime, timezone
from api_validation.public.schemas import HealthResponse
from api_validation.public.settings import settings

router = APIRouter()


@router.get("/health")
def health_check() -> HealthResponse:
    """
    Simple health check. Returns service status, version, commit.
    No validation logic, just a heartbeat.
    """
    return HealthResponse(
        status="ok",
        service="document-contracts-api",
        version=settings.api_version,
        commit=settings.build_commit,
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )
