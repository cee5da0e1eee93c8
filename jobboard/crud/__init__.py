"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between services and database operations,
following the Repository pattern.
"""

from jobboard.crud import job, review, user

__all__ = ["job", "review", "user"]
