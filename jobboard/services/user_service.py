"""
Read-only user lookups for the public profile endpoints.
"""

from typing import List

from sqlalchemy.orm import Session

from jobboard.core.exceptions import NotFoundError
from jobboard.crud import user as user_crud
from jobboard.models.user import User


class UserService:

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[User]:
        return user_crud.get_multi(self.db)

    def get(self, user_id: int) -> User:
        user = user_crud.get_by_id(self.db, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user
