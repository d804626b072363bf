"""The two stores served by the API: users and tools (Werkzeuge).

Each collection bundles what differs between the stores: its name, the label
used in error messages, its seed dataset and its create hook.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from toolshare.schemas.records import ToolRecord, UserRecord
from toolshare.services.repository import (
    CreateHook,
    Record,
    SeedFactory,
    default_create,
)


@dataclass(frozen=True)
class Collection:
    """Static description of one store."""

    name: str
    label: str
    seed: SeedFactory
    prepare_create: CreateHook = default_create


def iso_timestamp(moment: datetime | None = None) -> str:
    """UTC timestamp with millisecond precision and a Z suffix (2024-05-01T12:00:00.000Z)."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def default_users() -> list[Record]:
    users = [
        UserRecord(id=1, name="Administrator", username="admin", password="admin123", role="admin"),
        UserRecord(id=2, name="Max Mustermann", username="max", password="max123", role="user"),
        UserRecord(id=3, name="Anna Schmidt", username="anna", password="anna123", role="user"),
    ]
    return [u.model_dump() for u in users]


def default_tools() -> list[Record]:
    tools = [
        ToolRecord(id=1, name="Bohrmaschine", owner="admin"),
        ToolRecord(
            id=2,
            name="Hammer",
            owner="max",
            status="borrowed",
            borrower="anna",
            borrowedDate=iso_timestamp(),
        ),
    ]
    return [t.model_dump() for t in tools]


def prepare_tool(body: Record, new_id: int) -> Record:
    """A new tool is never created already borrowed."""
    return {
        **body,
        "id": new_id,
        "status": body.get("status") or "available",
        "borrower": None,
        "borrowedDate": None,
    }


USERS = Collection(name="users", label="User", seed=default_users)
WERKZEUGE = Collection(
    name="werkzeuge",
    label="Werkzeug",
    seed=default_tools,
    prepare_create=prepare_tool,
)

COLLECTIONS: dict[str, Collection] = {c.name: c for c in (USERS, WERKZEUGE)}
