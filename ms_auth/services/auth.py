"""
Auth service: Register, Login, Verify and GetProfile.

Each operation is stateless and opens its own session, so calls may run
concurrently from any transport. Bcrypt work is synchronous; callers on an
event loop must dispatch these methods to a worker thread.
"""

import logging
import secrets

from sqlalchemy.orm import Session, sessionmaker

from ms_auth.core.config import Settings
from ms_auth.core.exceptions import (
    AuthError,
    ConflictError,
    InvalidCredentialsError,
    InvalidInputError,
    NotFoundError,
)
from ms_auth.core.security import PasswordHasher, TokenIssuer
from ms_auth.schemas.auth import TokenClaims, TokenResponse, UserProfile, UserPublic
from ms_auth.services.user_store import UserStore

logger = logging.getLogger(__name__)

USERNAME_MAX_LEN = 255


class AuthService:
    """Orchestrates the credential store, password hasher and token issuer."""

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        hasher: PasswordHasher,
        tokens: TokenIssuer,
    ) -> None:
        self._session_factory = session_factory
        self.hasher = hasher
        self.tokens = tokens
        # Verified against on unknown usernames so both login failures cost one bcrypt check.
        self._dummy_hash = hasher.hash(secrets.token_urlsafe(16))

    @classmethod
    def from_settings(
        cls, settings: Settings, session_factory: sessionmaker[Session]
    ) -> "AuthService":
        return cls(
            session_factory=session_factory,
            hasher=PasswordHasher.from_settings(settings),
            tokens=TokenIssuer.from_settings(settings),
        )

    def register(
        self, username: str | None, password: str | None, role: str | None
    ) -> UserPublic:
        """Create a user and return its public view (never the hash)."""
        if not username or not password or not role:
            missing = [
                name
                for name, value in (("username", username), ("password", password), ("role", role))
                if not value
            ]
            raise InvalidInputError(
                "username, password and role are required", {"missing": missing}
            )
        if len(username) > USERNAME_MAX_LEN:
            raise InvalidInputError(
                f"username must be at most {USERNAME_MAX_LEN} characters"
            )

        with self._session_factory() as session:
            store = UserStore(session)
            if store.find_by_username(username) is not None:
                logger.info("Registration rejected, username taken: %s", username)
                raise ConflictError("Username already exists", {"username": username})

            password_hash = self.hasher.hash(password)
            # A concurrent registration may still win here; insert raises ConflictError then.
            user = store.insert(username, password_hash, role)
            public = UserPublic.model_validate(user)

        logger.info("User registered: id=%s username=%s role=%s", public.id, public.username, public.role)
        return public

    def login(self, username: str | None, password: str | None) -> TokenResponse:
        """Check credentials and issue a bearer token."""
        if not username or not password:
            raise InvalidInputError("username and password are required")

        with self._session_factory() as session:
            user = UserStore(session).find_by_username(username)
            if user is None:
                self.hasher.verify(password, self._dummy_hash)
                logger.warning("Failed login, unknown username: %s", username)
                raise NotFoundError("User not found", {"username": username})

            if not self.hasher.verify(password, user.password_hash):
                logger.warning("Failed login, wrong password: %s", username)
                raise InvalidCredentialsError("Incorrect password", {"username": username})

            token = self.tokens.issue(user.id, user.username, user.role)
            logger.info("Successful login: id=%s username=%s", user.id, user.username)

        return TokenResponse(
            access_token=token,
            token_type="bearer",
            expires_in=int(self.tokens.ttl.total_seconds()),
        )

    def verify(self, token: str | None) -> TokenClaims:
        """Gate for protected operations: return the caller's claims or raise."""
        try:
            return self.tokens.verify(token)
        except AuthError as e:
            logger.info("Token rejected: %s", e.message)
            raise

    def get_profile(self, user_id: int) -> UserProfile:
        """Return id, username, role and created_at for an existing user."""
        with self._session_factory() as session:
            user = UserStore(session).find_by_id(user_id)
            if user is None:
                raise NotFoundError("User not found", {"id": user_id})
            return UserProfile.model_validate(user)
