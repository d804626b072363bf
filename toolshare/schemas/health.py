"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    store_backend: Literal["json", "sql", "memory"] = Field(
        description="Configured persistence backend"
    )
    stores: dict[str, int] = Field(
        default_factory=dict,
        description="Number of records per store",
    )
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Database connectivity status when the sql backend is used",
    )
