"""Health check and service index endpoints."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ms_auth import __version__
from ms_auth.api.dependencies import get_app_settings, get_db
from ms_auth.core.config import Settings
from ms_auth.core.database import check_db_connected
from ms_auth.schemas.health import EndpointInfo, HealthResponse, IndexResponse

router = APIRouter()

ENDPOINTS = {
    "health": EndpointInfo(path="/health", method="GET", description="Check API health status"),
    "register": EndpointInfo(path="/register", method="POST", description="Register a new user"),
    "login": EndpointInfo(path="/login", method="POST", description="Authenticate user and get token"),
    "protected": EndpointInfo(
        path="/protected", method="GET", description="Test protected route (requires token)"
    ),
    "me": EndpointInfo(
        path="/users/me", method="GET", description="Current user profile (requires token)"
    ),
}


@router.get("/health", response_model=HealthResponse)
def get_health(
    settings: Annotated[Settings, Depends(get_app_settings)],
    db: Annotated[Session, Depends(get_db)],
) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        service="auth",
        timestamp=datetime.now(UTC),
        environment=settings.APP_ENV,
        database=db_status,
    )


@router.get("/", response_model=IndexResponse)
def get_index() -> IndexResponse:
    """List the endpoints this service exposes."""
    return IndexResponse(
        message="Welcome to Auth API",
        version=__version__,
        endpoints=ENDPOINTS,
    )
