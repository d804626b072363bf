"""SQL connection and session management for the sql store backend."""

from pathlib import Path

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from toolshare.core.config import Settings


def build_engine(settings: Settings) -> Engine:
    """Create the engine for DATABASE_URL, creating the SQLite directory if needed."""
    url = make_url(settings.DATABASE_URL)
    connect_args: dict[str, object] = {}
    if url.get_backend_name() == "sqlite":
        # Requests are served from a threadpool
        connect_args["check_same_thread"] = False
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(
        url,
        pool_pre_ping=True,
        echo=settings.DEBUG,
        connect_args=connect_args,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_db_connected(session: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        session.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
