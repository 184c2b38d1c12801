"""Request/response schemas for auth operations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Fields for registration; emptiness is checked by the auth service."""

    username: str | None = Field(default=None, description="Username (case-sensitive)")
    password: str | None = Field(default=None, description="Password")
    role: str | None = Field(default=None, description="Free-form role claim")


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str | None = Field(default=None, description="Username")
    password: str | None = Field(default=None, description="Password")


class UserPublic(BaseModel):
    """User as returned by registration (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str


class UserProfile(UserPublic):
    """User profile for GET /users/me."""

    created_at: datetime | None = None


class TokenClaims(BaseModel):
    """Identity embedded in a bearer token."""

    id: int
    username: str
    role: str
    issued_at: datetime
    expires_at: datetime


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    message: str = Field(default="Login successful", description="Success indicator")
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Seconds until the token expires")


class ProtectedResponse(BaseModel):
    """Response for the protected test route."""

    message: str
    user: TokenClaims


class ErrorResponse(BaseModel):
    """Error body returned by every route."""

    error: str
    details: dict | None = None
