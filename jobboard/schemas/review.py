"""
Pydantic schemas for job reviews.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class ReviewCreateRequest(BaseModel):
    """Body for posting a review. Range and length rules live in the review service."""
    content: Optional[str] = None
    rating: Optional[int] = None


class ReviewResponse(BaseModel):
    """A review joined with its author's username."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    rating: int
    job_id: int
    user_id: int
    user_username: Optional[str] = None
    created_at: datetime
