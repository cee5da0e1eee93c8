"""
Database models package.
"""

from jobboard.models.user import User
from jobboard.models.job import Job
from jobboard.models.review import Review

__all__ = ["User", "Job", "Review"]
