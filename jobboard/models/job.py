from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from jobboard.core.database import Base
from jobboard.models.user import utcnow


class Job(Base):
    """
    Job posting attributed to the user who created it.
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    company = Column(String, nullable=False)
    location = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    requirements = Column(Text, nullable=True)
    salary = Column(String, nullable=True)  # free text, e.g. "$120k - $140k"

    posted_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    # Relationships
    poster = relationship("User", back_populates="jobs", lazy="joined")
    reviews = relationship("Review", back_populates="job", cascade="all, delete-orphan", passive_deletes=True)

    @property
    def posted_by_username(self):
        return self.poster.username if self.poster else None

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', company='{self.company}')>"
