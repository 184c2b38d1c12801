"""Core configuration, database, security and errors."""

from ms_auth.core.config import Settings, get_settings
from ms_auth.core.database import create_db_engine, create_session_factory

__all__ = ["Settings", "get_settings", "create_db_engine", "create_session_factory"]
