"""Build one repository per collection for the configured STORE_BACKEND."""

import logging

from toolshare.core.config import Settings
from toolshare.core.database import build_engine, build_session_factory
from toolshare.models import Base
from toolshare.services.collections import COLLECTIONS, Collection
from toolshare.services.json_repository import JsonFileRepository
from toolshare.services.repository import InMemoryRepository, RecordRepository
from toolshare.services.sql_repository import SqlRepository

logger = logging.getLogger(__name__)


def build_repositories(
    settings: Settings,
    collections: list[Collection] | None = None,
    initialize: bool = True,
) -> dict[str, RecordRepository]:
    """Return {collection name: repository}, seeding any store that does not exist yet.

    With initialize=False stores are not read or seeded on construction, so a
    caller about to reset them is not stopped by a corrupt store.
    """
    collections = collections if collections is not None else list(COLLECTIONS.values())
    backend = settings.STORE_BACKEND
    logger.info("Opening %s stores with backend=%s", len(collections), backend)

    if backend == "memory":
        return {
            c.name: InMemoryRepository(c.name, c.seed, label=c.label) for c in collections
        }

    if backend == "sql":
        engine = build_engine(settings)
        Base.metadata.create_all(engine)
        session_factory = build_session_factory(engine)
        return {
            c.name: SqlRepository(
                c.name, c.seed, session_factory, label=c.label, initialize=initialize
            )
            for c in collections
        }

    return {
        c.name: JsonFileRepository(
            c.name,
            c.seed,
            settings.DATA_DIR,
            label=c.label,
            corrupt_policy=settings.CORRUPT_STORE_POLICY,
            initialize=initialize,
        )
        for c in collections
    }
