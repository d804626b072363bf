"""Request dependencies shared by the routers."""

from fastapi import Request

from toolshare.core.config import Settings
from toolshare.services.repository import RecordRepository


def get_repositories(request: Request) -> dict[str, RecordRepository]:
    """Dependency returning the repositories opened at application start-up."""
    return request.app.state.repositories


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
