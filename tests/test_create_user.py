"""Tests for the create_user CLI (registration without HTTP)."""

import unittest
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from ms_auth.core.config import Settings
from ms_auth.core.database import create_session_factory
from ms_auth.models import Base, User
from ms_auth.scripts import create_user
from ms_auth.services.auth import AuthService


class TestCreateUserCli(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.settings = Settings(
            _env_file=None,
            DATABASE_URL="sqlite://",
            JWT_SECRET="cli-test-secret-0123456789abcdef0123456789",
            BCRYPT_ROUNDS=4,
        )
        patches = [
            patch.object(create_user, "get_settings", return_value=self.settings),
            patch.object(create_user, "create_db_engine", return_value=self.engine),
            # Keep the in-memory database alive for assertions after main() returns.
            patch.object(self.engine, "dispose"),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)

    def test_creates_user_with_default_role(self) -> None:
        self.assertEqual(create_user.main(["alice", "s3cret"]), 0)
        with create_session_factory(self.engine)() as session:
            user = session.query(User).filter(User.username == "alice").one()
            self.assertEqual(user.role, "user")

    def test_existing_user_fails(self) -> None:
        service = AuthService.from_settings(self.settings, create_session_factory(self.engine))
        service.register("alice", "s3cret", "admin")
        with patch("sys.stderr"):
            self.assertEqual(create_user.main(["alice", "other", "admin"]), 1)


if __name__ == "__main__":
    unittest.main()
