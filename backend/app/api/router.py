"""Main API router: combines all endpoint routers."""

from fastapi import APIRouter

from app.api.health import router as health_router
from app.api.measurements import router as measurements_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Measurement form
api_router.include_router(measurements_router, tags=["Measurements"])
