"""
Job posting service.

Jobs are always attributed to the authenticated caller. Any authenticated
user may edit or delete any job unless ENFORCE_JOB_OWNERSHIP is switched on.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.core.config import settings
from jobboard.core.exceptions import ForbiddenError, InternalError, NotFoundError, ValidationError
from jobboard.crud import job as job_crud
from jobboard.models.job import Job
from jobboard.models.user import User

logger = logging.getLogger(__name__)


def validate_job_fields(fields: dict) -> List[str]:
    errors = []
    if not fields.get("title"):
        errors.append("Title is required")
    if not fields.get("company"):
        errors.append("Company is required")
    return errors


class JobService:

    def __init__(self, db: Session):
        self.db = db

    def create(self, fields: dict, poster: User) -> Job:
        """Create a job posted by `poster`. Any client supplied posted_by is ignored."""
        errors = validate_job_fields(fields)
        if errors:
            raise ValidationError(errors, message="Title and company are required")

        try:
            job = job_crud.create(self.db, fields, posted_by=poster.id)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to create job for user {poster.id}")
            raise InternalError()

        logger.info(f"Created job {job.id}: {job.title} at {job.company} (posted by {poster.username})")
        return job

    def list(self, skip: int = 0, limit: Optional[int] = None) -> List[Job]:
        return job_crud.get_multi(self.db, skip=skip, limit=limit)

    def get(self, job_id: int) -> Job:
        job = job_crud.get_by_id(self.db, job_id)
        if not job:
            raise NotFoundError("Job not found")
        return job

    def list_by_user(self, user_id: int) -> List[Job]:
        return job_crud.get_by_poster(self.db, user_id)

    def update(self, job_id: int, fields: dict, actor: User) -> Job:
        """
        Replace the content of a job. title and company must be present;
        optional fields left out of `fields` are cleared.
        """
        errors = validate_job_fields(fields)
        if errors:
            raise ValidationError(errors, message="Title and company are required")

        job = self.get(job_id)
        self._check_ownership(job, actor)

        try:
            job = job_crud.replace(self.db, job, fields)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to update job {job_id}")
            raise InternalError()

        logger.info(f"Job {job_id} updated by user {actor.id}")
        return job

    def delete(self, job_id: int, actor: User) -> None:
        if settings.ENFORCE_JOB_OWNERSHIP:
            self._check_ownership(self.get(job_id), actor)

        try:
            deleted = job_crud.delete(self.db, job_id)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to delete job {job_id}")
            raise InternalError()

        if not deleted:
            raise NotFoundError("Job not found")

        logger.info(f"Deleted job {job_id} (by user {actor.id})")

    def _check_ownership(self, job: Job, actor: User) -> None:
        if settings.ENFORCE_JOB_OWNERSHIP and job.posted_by != actor.id:
            logger.warning(f"User {actor.id} tried to modify job {job.id} posted by {job.posted_by}")
            raise ForbiddenError("Not allowed to modify this job")
