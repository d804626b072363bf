"""API routes."""

from fastapi import APIRouter

from toolshare.api import health, users, werkzeuge

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(werkzeuge.router, prefix="/werkzeuge", tags=["werkzeuge"])
