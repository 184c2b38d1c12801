"""Validation rules of ms_auth.core.config.Settings."""

import unittest

from pydantic import ValidationError

from ms_auth.core.config import DEFAULT_JWT_SECRET, Settings

STRONG_SECRET = "config-test-secret-0123456789abcdef01234567"


class TestSettingsDefaults(unittest.TestCase):
    def test_defaults(self) -> None:
        s = Settings(_env_file=None)
        self.assertEqual(s.APP_ENV, "dev")
        self.assertEqual(s.JWT_EXPIRE_MINUTES, 60)
        self.assertEqual(s.BCRYPT_ROUNDS, 10)
        self.assertEqual(s.API_PREFIX, "/ms-auth")
        self.assertEqual(s.JWT_SECRET.get_secret_value(), DEFAULT_JWT_SECRET)

    def test_secret_is_masked_in_repr(self) -> None:
        s = Settings(_env_file=None, JWT_SECRET=STRONG_SECRET)
        self.assertNotIn(STRONG_SECRET, repr(s))


class TestCorsOrigins(unittest.TestCase):
    def test_dev_default_is_any_origin(self) -> None:
        self.assertEqual(Settings(_env_file=None).cors_origins, ["*"])

    def test_prod_default_is_no_origin(self) -> None:
        s = Settings(_env_file=None, APP_ENV="prod", JWT_SECRET=STRONG_SECRET)
        self.assertEqual(s.cors_origins, [])

    def test_configured_origins_apply_in_prod(self) -> None:
        s = Settings(
            _env_file=None,
            APP_ENV="prod",
            JWT_SECRET=STRONG_SECRET,
            CORS_ORIGINS=["https://app.example.com"],
        )
        self.assertEqual(s.cors_origins, ["https://app.example.com"])


class TestSettingsValidation(unittest.TestCase):
    def test_rejects_non_postgres_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="mysql://localhost/db")

    def test_rejects_empty_secret(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET="  ")

    def test_rejects_out_of_range_rounds(self) -> None:
        for rounds in (3, 32):
            with self.subTest(rounds=rounds):
                with self.assertRaises(ValidationError):
                    Settings(_env_file=None, BCRYPT_ROUNDS=rounds)

    def test_rejects_out_of_range_expiry(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_EXPIRE_MINUTES=0)

    def test_rejects_asymmetric_algorithm(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_ALGORITHM="RS256")

    def test_api_prefix_normalized(self) -> None:
        self.assertEqual(Settings(_env_file=None, API_PREFIX="/auth/").API_PREFIX, "/auth")
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, API_PREFIX="auth")

    def test_log_level_upper_cased(self) -> None:
        self.assertEqual(Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")


class TestProdRequirements(unittest.TestCase):
    def test_prod_rejects_default_secret(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, APP_ENV="prod")

    def test_prod_rejects_sqlite(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(
                _env_file=None,
                APP_ENV="prod",
                JWT_SECRET=STRONG_SECRET,
                DATABASE_URL="sqlite://",
            )

    def test_prod_accepts_postgres_and_real_secret(self) -> None:
        s = Settings(
            _env_file=None,
            APP_ENV="prod",
            JWT_SECRET=STRONG_SECRET,
            DATABASE_URL="postgresql+psycopg2://u:p@db:5432/auth",
        )
        self.assertFalse(s.is_dev)


if __name__ == "__main__":
    unittest.main()
