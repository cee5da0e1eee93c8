"""
Authentication service - registration, login and bearer token checks.
"""

import logging
import re
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.core.config import settings
from jobboard.core.exceptions import AuthError, ConflictError, InternalError, ValidationError
from jobboard.core.security import get_password_hash, issue_token, resolve_token, verify_password
from jobboard.crud import user as user_crud
from jobboard.models.user import User

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 20

# local@domain.tld, nothing fancier
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

INVALID_CREDENTIALS = "Invalid credentials"


def validate_registration(username: Optional[str], email: Optional[str], password: Optional[str]) -> List[str]:
    """Return every rule the registration input breaks (empty list when valid)."""
    errors = []

    if not username:
        errors.append("Username is required")
    elif not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        errors.append(f"Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters")

    if not email:
        errors.append("Email is required")
    elif not EMAIL_PATTERN.match(email):
        errors.append("Invalid email format")

    if not password:
        errors.append("Password is required")
    elif len(password) < settings.PASSWORD_MIN_LENGTH:
        errors.append(f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters")

    return errors


def conflict_message(existing: List[User], username: str, email: str) -> Optional[str]:
    """Describe which of username/email is already taken, or None if neither is."""
    username_taken = any(user.username == username for user in existing)
    email_taken = any(user.email == email for user in existing)

    if username_taken and email_taken:
        return "Username and email already exist"
    if username_taken:
        return "Username already exists"
    if email_taken:
        return "Email already exists"
    return None


class AuthService:
    """Handles all authentication business logic for one request."""

    def __init__(self, db: Session):
        self.db = db

    def register(self, username: Optional[str], email: Optional[str], password: Optional[str]) -> User:
        """
        Create a user account.

        Raises:
            ValidationError: Listing every violated input rule
            ConflictError: If the username and/or email is already registered
        """
        errors = validate_registration(username, email, password)
        if errors:
            raise ValidationError(errors)

        message = conflict_message(user_crud.find_conflicts(self.db, username, email), username, email)
        if message:
            raise ConflictError(message)

        password_hash = get_password_hash(password)

        try:
            user = user_crud.create(self.db, username=username, email=email, password_hash=password_hash)
        except IntegrityError:
            # Lost a race with a concurrent registration; the unique
            # constraints rejected our insert
            self.db.rollback()
            message = conflict_message(user_crud.find_conflicts(self.db, username, email), username, email)
            logger.warning(f"Concurrent registration conflict for username '{username}'")
            raise ConflictError(message or "Username or email already exists")
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to store new user '{username}'")
            raise InternalError()

        logger.info(f"New user registered: {user.username} (id: {user.id})")
        return user

    def login(self, username: Optional[str], password: Optional[str]) -> Tuple[User, str]:
        """
        Check credentials and issue a bearer token.

        Unknown usernames and wrong passwords fail identically.
        """
        user = user_crud.get_by_username(self.db, username) if username else None
        if not user or not password or not verify_password(password, user.password_hash):
            logger.info(f"Failed login attempt for username '{username}'")
            raise AuthError(INVALID_CREDENTIALS)

        logger.info(f"User logged in: {user.username} (id: {user.id})")
        return user, issue_token(user.id)

    def authenticate(self, token: str) -> User:
        """Resolve a bearer token to the user it identifies."""
        user_id = resolve_token(token)
        user = user_crud.get_by_id(self.db, user_id) if user_id is not None else None
        if user is None:
            raise AuthError("Invalid token")
        return user
