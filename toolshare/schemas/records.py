"""Pydantic schemas describing user and tool records.

Records are stored and returned verbatim, so these models never validate
request bodies. They document the known fields and build the seed datasets.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """A user of the lending platform. The password is stored in plain text."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Store-assigned unique id")
    name: str = Field(..., description="Display name")
    username: str = Field(..., description="Login name (not required to be unique)")
    password: str = Field(..., description="Plain-text password")
    role: str = Field(default="user", description="'admin' or 'user'")


class ToolRecord(BaseModel):
    """A borrowable tool (Werkzeug) and its lending state."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Store-assigned unique id")
    name: str = Field(..., description="Tool name")
    owner: str = Field(..., description="Username of the owner (not validated)")
    image: str | None = Field(default=None, description="Image URL or data URI")
    status: str = Field(default="available", description="'available' or 'borrowed'")
    borrower: str | None = Field(default=None, description="Username of the borrower")
    borrowedDate: str | None = Field(
        default=None,
        description="ISO-8601 timestamp of when the tool was borrowed",
    )
