"""Checks on the Alembic environment and revision history."""

import unittest
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

ALEMBIC_DIR = Path(__file__).resolve().parents[1] / "alembic"


def _config() -> Config:
    # No ini file, so the test process logging config is left alone.
    cfg = Config()
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    return cfg


class TestMigrations(unittest.TestCase):
    def test_single_head_creates_users(self) -> None:
        script = ScriptDirectory.from_config(_config())
        self.assertEqual(script.get_heads(), ["20261019000000"])
        revision = script.get_revision("20261019000000")
        self.assertIsNone(revision.down_revision)

    def test_offline_mode_is_refused(self) -> None:
        with self.assertRaises(SystemExit):
            command.upgrade(_config(), "head", sql=True)


if __name__ == "__main__":
    unittest.main()
