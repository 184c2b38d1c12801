"""ORM model for registered users."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from ms_auth.models.base import Base


class User(Base):
    """
    Registered principal. Created only by registration; never updated or deleted.

    The hash lives in the ``password`` column and is never serialized.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column("password", Text, nullable=False)
    role = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r} role={self.role!r}>"
