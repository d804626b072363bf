"""SQLAlchemy ORM models."""

from toolshare.models.base import Base
from toolshare.models.record import StoredRecord

__all__ = ["Base", "StoredRecord"]
