"""Response schemas shared by both store endpoints."""

from typing import Literal

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., description="Human readable error message")


class DeleteResponse(BaseModel):
    """Body returned after a record was deleted."""

    success: Literal[True] = True
