"""Health check endpoint for service monitoring."""

from fastapi import APIRouter
from pydantic import BaseModel

from src import __version__
from src.core.config import settings
from src.infrastructure.database import db_manager

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str
    version: str
    database: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service and its database.",
)
async def health_check() -> HealthResponse:
    database = await db_manager.ping()

    return HealthResponse(
        status="healthy" if database != "down" else "degraded",
        service=settings.app_name,
        version=__version__,
        database=database,
    )
