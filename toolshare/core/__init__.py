"""Core app configuration, errors and database."""

from toolshare.core.config import Settings, get_settings
from toolshare.core.errors import (
    ApiError,
    BadRequest,
    InternalError,
    MethodNotAllowed,
    NotFound,
    StoreCorruptedError,
)

__all__ = [
    "ApiError",
    "BadRequest",
    "InternalError",
    "MethodNotAllowed",
    "NotFound",
    "Settings",
    "StoreCorruptedError",
    "get_settings",
]
