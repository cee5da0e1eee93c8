"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the service layer.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from jobboard.models.job import Job

# Columns a client may set on create or replace on update
CONTENT_FIELDS = ("title", "company", "location", "description", "requirements", "salary")


def _newest_first(query):
    # id breaks ties between rows created within the same clock tick
    return query.order_by(Job.created_at.desc(), Job.id.desc())


def create(db: Session, fields: dict, posted_by: int) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        fields: Validated job content (see CONTENT_FIELDS)
        posted_by: Id of the user posting the job

    Returns:
        Created Job instance with id
    """
    db_job = Job(posted_by=posted_by, **{name: fields.get(name) for name in CONTENT_FIELDS})

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: int) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Returns:
        Job instance if found, None otherwise
    """
    return db.query(Job).filter(Job.id == job_id).first()


def exists(db: Session, job_id: int) -> bool:
    return db.query(Job.id).filter(Job.id == job_id).first() is not None


def get_multi(db: Session, skip: int = 0, limit: Optional[int] = None) -> List[Job]:
    """
    Retrieve jobs newest first with optional pagination.

    Args:
        db: Database session
        skip: Number of records to skip (offset)
        limit: Maximum number of records to return (None for all)

    Returns:
        List of Job instances
    """
    query = _newest_first(db.query(Job)).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_by_poster(db: Session, user_id: int) -> List[Job]:
    """Jobs posted by one user, newest first."""
    return _newest_first(db.query(Job).filter(Job.posted_by == user_id)).all()


def replace(db: Session, job: Job, fields: dict) -> Job:
    """
    Overwrite every content column of a job. Fields missing from
    `fields` are cleared.
    """
    for name in CONTENT_FIELDS:
        setattr(job, name, fields.get(name))

    db.commit()
    db.refresh(job)

    return job


def delete(db: Session, job_id: int) -> bool:
    """
    Delete a job by ID. Its reviews go with it.

    Returns:
        True if deleted, False if not found
    """
    deleted = db.query(Job).filter(Job.id == job_id).delete(synchronize_session=False)
    db.commit()

    return deleted > 0
