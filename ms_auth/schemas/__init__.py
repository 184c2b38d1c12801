"""Pydantic schemas for API and service I/O."""

from ms_auth.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    ProtectedResponse,
    RegisterRequest,
    TokenClaims,
    TokenResponse,
    UserProfile,
    UserPublic,
)
from ms_auth.schemas.health import EndpointInfo, HealthResponse, IndexResponse

__all__ = [
    "EndpointInfo",
    "ErrorResponse",
    "HealthResponse",
    "IndexResponse",
    "LoginRequest",
    "ProtectedResponse",
    "RegisterRequest",
    "TokenClaims",
    "TokenResponse",
    "UserProfile",
    "UserPublic",
]
