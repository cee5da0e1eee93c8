"""
Security utilities for password hashing and bearer tokens.

Passwords are hashed using bcrypt. Bearer tokens follow settings.TOKEN_SCHEME:
"user_id" hands the user's id back verbatim (no signature, no expiry; kept
for existing clients), "jwt" issues HS256 tokens carrying the id in "sub".
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from jobboard.core.config import settings
from jobboard.core.database import MAX_ID

# Password hashing context (bcrypt)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)

# Bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password. Never raises."""
    password_bytes = plain_password.encode('utf-8')[:BCRYPT_MAX_BYTES]
    try:
        return pwd_context.verify(password_bytes, hashed_password)
    except (ValueError, TypeError):
        # Unknown or malformed hash
        return False


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Passwords longer than 72 bytes are truncated to comply with bcrypt.
    """
    password_bytes = password.encode('utf-8')[:BCRYPT_MAX_BYTES]
    return pwd_context.hash(password_bytes)


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT access token for the given user id."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": str(user_id),
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def issue_token(user_id: int) -> str:
    """Issue a bearer token for a user according to the configured scheme."""
    if settings.TOKEN_SCHEME == "jwt":
        return create_access_token(user_id)
    return str(user_id)


def resolve_token(token: str) -> Optional[int]:
    """
    Extract the user id carried by a bearer token.

    Returns None when the token is malformed, forged, expired, or carries an
    id no row could have.
    """
    if settings.TOKEN_SCHEME == "jwt":
        try:
            payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        except JWTError:
            return None
        subject = payload.get("sub")
    else:
        subject = token

    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        return None
    return user_id if 1 <= user_id <= MAX_ID else None
