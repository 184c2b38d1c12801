"""Pydantic schemas for health check responses."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    service: str = Field(default="auth", description="Service name")
    timestamp: datetime = Field(description="Server time of the check (UTC)")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Database connectivity status when check is performed",
    )


class EndpointInfo(BaseModel):
    path: str
    method: str
    description: str


class IndexResponse(BaseModel):
    """Service index: lists the available endpoints."""

    message: str
    version: str
    endpoints: dict[str, EndpointInfo]
