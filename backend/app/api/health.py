"""Health check endpoint."""

import time
from fastapi import APIRouter

from app.config import get_settings
from app.models.responses import HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """System health check. The service has no external dependencies."""
    return HealthResponse(
        status="healthy",
        version=get_settings().VERSION,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
