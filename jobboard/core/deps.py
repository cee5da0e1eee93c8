"""
FastAPI dependencies for authentication and service construction.

Services are built per request around the request's database session, so
nothing is shared between requests except the Database handle itself.
"""

from typing import Annotated, Optional

from fastapi import Depends, Path, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from jobboard.core.database import MAX_ID, get_db
from jobboard.core.exceptions import AuthError
from jobboard.models.user import User
from jobboard.services.auth_service import AuthService
from jobboard.services.job_service import JobService
from jobboard.services.review_service import ReviewService
from jobboard.services.user_service import UserService

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error is off so missing headers produce our own 401 body
security = HTTPBearer(auto_error=False)

# Path ids outside the storable range are rejected as malformed (400)
RecordId = Annotated[int, Path(ge=1, le=MAX_ID)]


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


def get_job_service(db: Session = Depends(get_db)) -> JobService:
    return JobService(db)


def get_review_service(db: Session = Depends(get_db)) -> ReviewService:
    return ReviewService(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """
    Resolve the caller from the Authorization header.

    Raises:
        AuthError: Header missing, not a Bearer value, or token unknown
    """
    if credentials is None:
        if "authorization" not in request.headers:
            raise AuthError("Authorization header missing")
        raise AuthError("Unauthorized")

    return auth_service.authenticate(credentials.credentials)
