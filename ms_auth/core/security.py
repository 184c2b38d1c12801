"""Password hashing and JWT issuance/verification."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from ms_auth.core.config import Settings
from ms_auth.core.exceptions import TokenExpiredError, TokenInvalidError
from ms_auth.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


def _utcnow() -> datetime:
    return datetime.now(UTC)


class PasswordHasher:
    """Salted bcrypt hashing with a fixed work factor."""

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    @classmethod
    def from_settings(cls, settings: Settings) -> "PasswordHasher":
        return cls(rounds=settings.BCRYPT_ROUNDS)

    @staticmethod
    def _encode(plain_password: str) -> bytes:
        return plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]

    def hash(self, plain_password: str) -> str:
        """Hash a plain-text password for storage. A fresh salt is drawn per call."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(plain_password), salt).decode("utf-8")

    def verify(self, plain_password: str, hashed: str) -> bool:
        """
        Verify a plain password against a stored hash.

        bcrypt.checkpw compares in constant time. A malformed hash counts as a
        failed verification, never an exception.
        """
        try:
            return bcrypt.checkpw(self._encode(plain_password), hashed.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            logger.warning("Password verification failed: stored hash is malformed")
            return False


class TokenIssuer:
    """Signs and validates bearer tokens carrying id, username and role."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("Token signing secret must be non-empty")
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = timedelta(minutes=expire_minutes)
        self._clock = clock

    @classmethod
    def from_settings(
        cls, settings: Settings, clock: Callable[[], datetime] = _utcnow
    ) -> "TokenIssuer":
        return cls(
            secret=settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
            clock=clock,
        )

    def issue(self, user_id: int, username: str, role: str) -> str:
        """Create a JWT whose ``exp`` claim is exactly ``ttl`` after its ``iat`` claim."""
        issued_at = int(self._clock().timestamp())
        payload: dict[str, Any] = {
            "id": user_id,
            "username": username,
            "role": role,
            "iat": issued_at,
            "exp": issued_at + int(self.ttl.total_seconds()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> TokenClaims:
        """
        Validate signature first, then expiry, and return the embedded claims.

        Raises TokenInvalidError for a missing, malformed or tampered token and
        TokenExpiredError once the clock has passed ``exp``.
        """
        if not token:
            raise TokenInvalidError("Missing token")
        try:
            # Expiry is checked below against the injected clock.
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False, "verify_iat": False, "require": ["exp", "iat"]},
            )
        except jwt.PyJWTError as e:
            raise TokenInvalidError("Invalid token", {"reason": str(e)}) from e

        try:
            claims = TokenClaims(
                id=payload["id"],
                username=payload["username"],
                role=payload["role"],
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise TokenInvalidError("Invalid token payload", {"reason": str(e)}) from e

        # Claims have whole-second resolution; the token is valid through its exp second.
        if int(self._clock().timestamp()) > int(claims.expires_at.timestamp()):
            raise TokenExpiredError(
                "Token expired", {"expired_at": claims.expires_at.isoformat()}
            )
        return claims
