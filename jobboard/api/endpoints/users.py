from typing import List
from fastapi import APIRouter, Depends

from jobboard.core.deps import RecordId, get_job_service, get_user_service
from jobboard.schemas.job import JobResponse
from jobboard.schemas.user import UserResponse
from jobboard.services.job_service import JobService
from jobboard.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[UserResponse])
def list_users(user_service: UserService = Depends(get_user_service)):
    """List every registered user (public fields only)."""
    return user_service.list()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: RecordId, user_service: UserService = Depends(get_user_service)):
    return user_service.get(user_id)


@router.get("/{user_id}/jobs", response_model=List[JobResponse])
def list_user_jobs(user_id: RecordId, job_service: JobService = Depends(get_job_service)):
    """Jobs posted by a user, newest first. Unknown users simply have none."""
    return job_service.list_by_user(user_id)
