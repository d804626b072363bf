"""SQL store backend: one row per record in the records table."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session, sessionmaker

from toolshare.core.database import check_db_connected
from toolshare.models import StoredRecord
from toolshare.services.repository import (
    CreateHook,
    Record,
    RecordRepository,
    SeedFactory,
    as_record_id,
    default_create,
)

logger = logging.getLogger(__name__)

# INTEGER columns are signed 64-bit; larger ids cannot be stored, so they never match
MAX_SQL_ID = 2**63 - 1


class SqlRepository(RecordRepository):
    """
    Persist one store in a shared SQL table, scoped by collection name.

    Rows are ordered by their surrogate key, so replace keeps a record's
    position and create appends. Unless initialize is False, the store is
    seeded on construction when it has no rows.
    """

    def __init__(
        self,
        name: str,
        seed: SeedFactory,
        session_factory: sessionmaker[Session],
        label: str | None = None,
        initialize: bool = True,
    ) -> None:
        super().__init__(name, seed, label)
        self._session_factory = session_factory
        if not initialize:
            return
        with self._lock, self._session_factory() as db:
            existing = (
                db.query(func.count(StoredRecord.id))
                .filter(StoredRecord.collection == self.name)
                .scalar()
            )
        if not existing:
            logger.info("Store %s is empty, initializing with defaults", self.name)
            self.reset()

    def _rows(self, db: Session) -> list[StoredRecord]:
        return (
            db.query(StoredRecord)
            .filter(StoredRecord.collection == self.name)
            .order_by(StoredRecord.id)
            .all()
        )

    def _first_row(self, db: Session, record_id: int) -> StoredRecord | None:
        if not -MAX_SQL_ID - 1 <= record_id <= MAX_SQL_ID:
            return None
        return (
            db.query(StoredRecord)
            .filter(
                StoredRecord.collection == self.name,
                StoredRecord.record_id == record_id,
            )
            .order_by(StoredRecord.id)
            .first()
        )

    def _load(self) -> list[Record]:
        with self._session_factory() as db:
            return [dict(row.payload) for row in self._rows(db)]

    def _save(self, records: list[Record]) -> None:
        """Replace every row of this store with records, in order."""
        with self._session_factory() as db:
            db.query(StoredRecord).filter(StoredRecord.collection == self.name).delete(
                synchronize_session=False
            )
            for record in records:
                db.add(self._row(record))
            db.commit()

    def _row(self, record: Record) -> StoredRecord:
        return StoredRecord(
            collection=self.name,
            record_id=as_record_id(record.get("id")),
            payload=record,
        )

    def create(self, body: Record, prepare: CreateHook = default_create) -> Record:
        with self._lock, self._session_factory() as db:
            max_id = (
                db.query(func.max(StoredRecord.record_id))
                .filter(StoredRecord.collection == self.name)
                .scalar()
            )
            record = prepare(body, (max_id or 0) + 1)
            db.add(self._row(record))
            db.commit()
        logger.debug("Created %s id=%s", self.name, record["id"])
        return record

    def replace(self, record: Record) -> Record:
        record_id = as_record_id(record.get("id"))
        with self._lock, self._session_factory() as db:
            row = self._first_row(db, record_id) if record_id is not None else None
            if row is None:
                raise self._not_found()
            row.payload = record
            db.commit()
        logger.debug("Replaced %s id=%s", self.name, record_id)
        return record

    def delete(self, record_id: int | None) -> None:
        with self._lock, self._session_factory() as db:
            row = self._first_row(db, record_id) if record_id is not None else None
            if row is None:
                raise self._not_found()
            db.delete(row)
            db.commit()
        logger.debug("Deleted %s id=%s", self.name, record_id)

    def is_connected(self) -> bool:
        with self._session_factory() as db:
            return check_db_connected(db)
