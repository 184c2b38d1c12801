"""SQLAlchemy ORM models."""

from ms_auth.models.base import Base
from ms_auth.models.user import User

__all__ = ["Base", "User"]
