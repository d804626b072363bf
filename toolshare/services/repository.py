"""Record repositories: the persistence contract shared by every store backend.

A repository owns one store (one collection of records) and exposes
list_records, create, replace, delete and reset. Each read-modify-write cycle
runs under a per-store lock, so writers inside one process never overwrite
each other. Writers in different processes sharing a JSON file still race.
"""

import copy
import logging
import re
import threading
from collections.abc import Callable
from typing import Any

from toolshare.core.errors import NotFound

logger = logging.getLogger(__name__)

Record = dict[str, Any]
SeedFactory = Callable[[], list[Record]]
# Builds the stored record from the client body and the assigned id
CreateHook = Callable[[Record, int], Record]

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def default_create(body: Record, new_id: int) -> Record:
    """Store the client body as-is; the assigned id always wins."""
    return {**body, "id": new_id}


def as_record_id(value: object) -> int | None:
    """Return value as an integer id, or None if it is not a whole number.

    Strings never match numeric ids, and booleans are not ids.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def parse_query_id(raw: str) -> int | None:
    """Parse an id query parameter from its leading integer ("2abc" -> 2, "abc" -> None)."""
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def next_record_id(records: list[Record]) -> int:
    """One more than the largest integer id present, or 1 for an empty store."""
    ids = [rid for rid in (as_record_id(r.get("id")) for r in records) if rid is not None]
    return max(ids, default=0) + 1


def find_index(records: list[Record], record_id: int) -> int | None:
    for index, record in enumerate(records):
        if as_record_id(record.get("id")) == record_id:
            return index
    return None


class RecordRepository:
    """
    Base repository for stores that load and save the whole collection at once.

    Subclasses implement _load and _save; the CRUD algorithm and locking live here.
    """

    def __init__(self, name: str, seed: SeedFactory, label: str | None = None) -> None:
        self.name = name
        self.label = label or name
        self._seed = seed
        self._lock = threading.RLock()

    def _load(self) -> list[Record]:
        raise NotImplementedError

    def _save(self, records: list[Record]) -> None:
        raise NotImplementedError

    def _not_found(self) -> NotFound:
        return NotFound(f"{self.label} not found")

    def list_records(self) -> list[Record]:
        """Return every record in stored order."""
        with self._lock:
            return self._load()

    def count(self) -> int:
        return len(self.list_records())

    def create(self, body: Record, prepare: CreateHook = default_create) -> Record:
        """Assign the next id, append the prepared record and persist."""
        with self._lock:
            records = self._load()
            record = prepare(body, next_record_id(records))
            records.append(record)
            self._save(records)
        logger.debug("Created %s id=%s", self.name, record["id"])
        return record

    def replace(self, record: Record) -> Record:
        """Overwrite the stored record with the same id by record, verbatim.

        Raises NotFound when no stored record has that id.
        """
        record_id = as_record_id(record.get("id"))
        with self._lock:
            records = self._load()
            index = find_index(records, record_id) if record_id is not None else None
            if index is None:
                raise self._not_found()
            records[index] = record
            self._save(records)
        logger.debug("Replaced %s id=%s", self.name, record_id)
        return record

    def delete(self, record_id: int | None) -> None:
        """Remove the first record with record_id. Raises NotFound if there is none."""
        with self._lock:
            records = self._load()
            index = find_index(records, record_id) if record_id is not None else None
            if index is None:
                raise self._not_found()
            del records[index]
            self._save(records)
        logger.debug("Deleted %s id=%s", self.name, record_id)

    def reset(self) -> list[Record]:
        """Overwrite the store with its seed dataset and return it."""
        with self._lock:
            records = self._seed()
            self._save(records)
        logger.info("Seeded store %s with %s default records", self.name, len(records))
        return records


class InMemoryRepository(RecordRepository):
    """Keeps records in process memory. Seeded on construction."""

    def __init__(self, name: str, seed: SeedFactory, label: str | None = None) -> None:
        super().__init__(name, seed, label)
        self._records: list[Record] = []
        self.reset()

    def _load(self) -> list[Record]:
        # Callers mutate the returned list; never hand out the stored objects
        return copy.deepcopy(self._records)

    def _save(self, records: list[Record]) -> None:
        self._records = copy.deepcopy(records)
