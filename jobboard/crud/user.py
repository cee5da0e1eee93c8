"""
CRUD operations for User model.
"""

from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from jobboard.models.user import User


def create(db: Session, username: str, email: str, password_hash: str) -> User:
    """
    Insert a new user and commit.

    Raises:
        sqlalchemy.exc.IntegrityError: If username or email is already taken
    """
    db_user = User(username=username, email=email, password_hash=password_hash)

    db.add(db_user)
    db.commit()
    db.refresh(db_user)

    return db_user


def get_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def find_conflicts(db: Session, username: str, email: str) -> List[User]:
    """Return users that already hold the given username or email."""
    return db.query(User).filter(or_(User.username == username, User.email == email)).all()


def get_multi(db: Session, skip: int = 0, limit: Optional[int] = None) -> List[User]:
    query = db.query(User).order_by(User.id).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()
