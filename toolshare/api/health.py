"""Health check endpoint with store record counts and optional database check."""

from typing import Annotated

from fastapi import APIRouter, Depends

from toolshare.api.deps import get_app_settings, get_repositories
from toolshare.core.config import Settings
from toolshare.schemas.health import HealthResponse
from toolshare.services.repository import RecordRepository
from toolshare.services.sql_repository import SqlRepository

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    settings: Annotated[Settings, Depends(get_app_settings)],
    repositories: Annotated[dict[str, RecordRepository], Depends(get_repositories)],
) -> HealthResponse:
    """
    Return service health status and the number of records per store.
    Used by load balancers and monitoring.
    """
    database = None
    if settings.STORE_BACKEND == "sql":
        connected = all(
            repo.is_connected()
            for repo in repositories.values()
            if isinstance(repo, SqlRepository)
        )
        database = "connected" if connected else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        store_backend=settings.STORE_BACKEND,
        stores={name: repo.count() for name, repo in repositories.items()},
        database=database,
    )
