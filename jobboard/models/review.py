"""
Review model.

A review is written by an authenticated user against an existing job and is
never edited afterwards. Rating is bounded 1..5 by a CHECK constraint.
"""

from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from jobboard.core.database import Base
from jobboard.models.user import utcnow

MIN_RATING = 1
MAX_RATING = 5
MIN_CONTENT_LENGTH = 10


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        CheckConstraint(f"rating >= {MIN_RATING} AND rating <= {MAX_RATING}", name="ck_reviews_rating_range"),
    )

    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)

    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    job = relationship("Job", back_populates="reviews")
    author = relationship("User", back_populates="reviews", lazy="joined")

    @property
    def user_username(self):
        return self.author.username if self.author else None

    def __repr__(self):
        return f"<Review(id={self.id}, job_id={self.job_id}, rating={self.rating})>"
