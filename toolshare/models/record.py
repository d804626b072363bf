"""ORM model for records persisted by the sql store backend."""

from sqlalchemy import JSON, Column, Integer, String

from toolshare.models.base import Base


class StoredRecord(Base):
    """
    One record of one store, kept as its raw JSON payload.

    The surrogate primary key preserves insertion order; record_id mirrors
    payload["id"] so lookups do not need to parse JSON.
    """

    __tablename__ = "records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    collection = Column(String(64), nullable=False, index=True)
    record_id = Column(Integer, nullable=False, index=True)
    payload = Column(JSON, nullable=False)
