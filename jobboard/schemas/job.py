from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class JobWriteRequest(BaseModel):
    """Body for creating or replacing a job posting. title and company are checked by the service."""
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    salary: Optional[str] = None


class JobResponse(BaseModel):
    """Schema for job response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    company: str
    location: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    salary: Optional[str] = None
    posted_by: int
    posted_by_username: Optional[str] = None
    created_at: datetime


class JobCreateResponse(BaseModel):
    """Schema for job creation response"""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    job_id: int = Field(..., alias="jobId")


class MessageResponse(BaseModel):
    success: bool = True
    message: str
