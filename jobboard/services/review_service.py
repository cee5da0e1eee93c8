"""
Review service - reviews attached to job postings.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.core.exceptions import InternalError, NotFoundError, ValidationError
from jobboard.crud import job as job_crud
from jobboard.crud import review as review_crud
from jobboard.models.review import MAX_RATING, MIN_CONTENT_LENGTH, MIN_RATING, Review
from jobboard.models.user import User

logger = logging.getLogger(__name__)


def validate_review(content: Optional[str], rating: Optional[int]) -> List[str]:
    errors = []

    if not content:
        errors.append("Content is required")
    elif len(content) < MIN_CONTENT_LENGTH:
        errors.append(f"Content must be at least {MIN_CONTENT_LENGTH} characters")

    if rating is None:
        errors.append("Rating is required")
    elif isinstance(rating, bool) or not MIN_RATING <= rating <= MAX_RATING:
        errors.append(f"Rating must be an integer between {MIN_RATING} and {MAX_RATING}")

    return errors


class ReviewService:

    def __init__(self, db: Session):
        self.db = db

    def create(self, job_id: int, content: Optional[str], rating: Optional[int], author: User) -> Review:
        """
        Post a review on an existing job as the authenticated `author`.

        Raises:
            ValidationError: Content too short/missing or rating out of range
            NotFoundError: If the job does not exist
        """
        errors = validate_review(content, rating)
        if errors:
            raise ValidationError(errors)

        self._require_job(job_id)

        try:
            review = review_crud.create(self.db, job_id=job_id, user_id=author.id, content=content, rating=rating)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to store review for job {job_id}")
            raise InternalError()

        logger.info(f"User {author.id} reviewed job {job_id} (rating {rating})")
        return review

    def list(self, job_id: int) -> List[Review]:
        """Reviews for a job, newest first."""
        self._require_job(job_id)
        return review_crud.get_by_job(self.db, job_id)

    def _require_job(self, job_id: int) -> None:
        if not job_crud.exists(self.db, job_id):
            raise NotFoundError("Job not found")
