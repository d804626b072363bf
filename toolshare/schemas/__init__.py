"""Pydantic request/response schemas."""

from toolshare.schemas.common import DeleteResponse, ErrorResponse
from toolshare.schemas.health import HealthResponse
from toolshare.schemas.records import ToolRecord, UserRecord

__all__ = [
    "DeleteResponse",
    "ErrorResponse",
    "HealthResponse",
    "ToolRecord",
    "UserRecord",
]
