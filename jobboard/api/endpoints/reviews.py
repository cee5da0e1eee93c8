"""
API endpoints for job reviews.
"""

from typing import List
from fastapi import APIRouter, Depends

from jobboard.core.deps import RecordId, get_current_user, get_review_service
from jobboard.models.user import User
from jobboard.schemas.review import ReviewCreateRequest, ReviewResponse
from jobboard.services.review_service import ReviewService

router = APIRouter(prefix="/jobs/{job_id}/reviews", tags=["Reviews"])


@router.post("", status_code=201, response_model=ReviewResponse)
def create_review(
    job_id: RecordId,
    request: ReviewCreateRequest,
    current_user: User = Depends(get_current_user),
    review_service: ReviewService = Depends(get_review_service)
):
    """
    Review a job as the authenticated user.

    Content must be at least 10 characters and rating an integer from 1 to 5.
    Returns the stored review with the author's username.
    """
    return review_service.create(job_id, request.content, request.rating, author=current_user)


@router.get("", response_model=List[ReviewResponse])
def list_reviews(job_id: RecordId, review_service: ReviewService = Depends(get_review_service)):
    """Reviews for a job, newest first. 404 if the job does not exist."""
    return review_service.list(job_id)
