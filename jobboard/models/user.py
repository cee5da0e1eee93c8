"""
User model for authentication.

Users are created on registration and never modified or deleted afterwards.
username and email are each unique at the storage level so concurrent
registrations cannot both succeed.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from jobboard.core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """A registered account that can post jobs and write reviews."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    # Authentication credentials
    username = Column(String(20), unique=True, nullable=False, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    jobs = relationship("Job", back_populates="poster")
    reviews = relationship("Review", back_populates="author")

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
