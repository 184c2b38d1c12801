"""FastAPI dependencies: services built once in create_app and kept on app.state."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from ms_auth.core.config import Settings
from ms_auth.schemas.auth import TokenClaims
from ms_auth.services.auth import AuthService

security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenClaims:
    """
    Require a Bearer token and return its claims.

    A missing header is a 401 here; bad or expired tokens raise TokenInvalidError
    or TokenExpiredError, which the app's error handler maps.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied, token missing",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return service.verify(credentials.credentials)
