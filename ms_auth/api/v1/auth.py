"""Register, login and the token-gated routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from ms_auth.api.dependencies import get_auth_service, get_current_claims
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
from ms_auth.services.auth import AuthService

router = APIRouter()


@router.post(
    "/register",
    response_model=UserPublic,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def register(
    body: RegisterRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> UserPublic:
    """Create a new user. username, password and role are all required."""
    return service.register(body.username, body.password, body.role)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def login(
    body: LoginRequest,
    response: Response,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT access token.
    The token is also sent in the Authorization response header as: Bearer <token>
    """
    result = service.login(body.username, body.password)
    response.headers["Authorization"] = f"Bearer {result.access_token}"
    return result


@router.get("/protected", response_model=ProtectedResponse)
def protected(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
) -> ProtectedResponse:
    """Token-gated route; echoes the caller's claims."""
    return ProtectedResponse(message="Access granted", user=claims)


@router.get(
    "/users/me",
    response_model=UserProfile,
    responses={404: {"model": ErrorResponse}},
)
def read_me(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> UserProfile:
    """Profile of the authenticated user."""
    return service.get_profile(claims.id)
