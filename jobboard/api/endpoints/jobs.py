from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from jobboard.core.deps import RecordId, get_current_user, get_job_service
from jobboard.models.user import User
from jobboard.schemas.job import JobCreateResponse, JobResponse, JobWriteRequest, MessageResponse
from jobboard.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.post("", status_code=201, response_model=JobCreateResponse)
def create_job(
    request: JobWriteRequest,
    current_user: User = Depends(get_current_user),
    job_service: JobService = Depends(get_job_service)
):
    """
    Create a new job posting.

    The poster is always the authenticated caller; a `posted_by` field in
    the body is ignored.
    """
    job = job_service.create(request.model_dump(), poster=current_user)
    return JobCreateResponse(job_id=job.id)


@router.get("", response_model=List[JobResponse])
def list_jobs(
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    job_service: JobService = Depends(get_job_service)
):
    """
    List jobs newest first, each with the poster's username.

    Args:
        skip: Number of records to skip (default: 0)
        limit: Maximum number of records to return (default: all)
    """
    return job_service.list(skip=skip, limit=limit)


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: RecordId, job_service: JobService = Depends(get_job_service)):
    """Retrieve a job by ID."""
    return job_service.get(job_id)


@router.put("/{job_id}", response_model=MessageResponse)
def update_job(
    job_id: RecordId,
    request: JobWriteRequest,
    current_user: User = Depends(get_current_user),
    job_service: JobService = Depends(get_job_service)
):
    """
    Replace a job's content. title and company are required; optional
    fields that are left out are cleared.
    """
    job_service.update(job_id, request.model_dump(), actor=current_user)
    return MessageResponse(message="Job updated successfully")


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: RecordId,
    current_user: User = Depends(get_current_user),
    job_service: JobService = Depends(get_job_service)
):
    """
    Delete a job by ID, together with its reviews.
    """
    job_service.delete(job_id, actor=current_user)
    return MessageResponse(message="Job deleted")
