"""
CRUD operations for Review model.
"""

from typing import List
from sqlalchemy.orm import Session
from jobboard.models.review import Review


def create(db: Session, job_id: int, user_id: int, content: str, rating: int) -> Review:
    db_review = Review(job_id=job_id, user_id=user_id, content=content, rating=rating)

    db.add(db_review)
    db.commit()
    db.refresh(db_review)

    return db_review


def get_by_job(db: Session, job_id: int) -> List[Review]:
    """Reviews for a job, newest first."""
    return (
        db.query(Review)
        .filter(Review.job_id == job_id)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )
