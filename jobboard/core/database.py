from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from jobboard.core.config import settings

# Create Base class for models
Base = declarative_base()

# Largest primary key SQLite can store (signed 64-bit INTEGER)
MAX_ID = 2**63 - 1


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ships with foreign key enforcement switched off per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Storage handle owning the SQLAlchemy engine and session factory.

    One instance is built by the application factory and shared by every
    request through the get_db dependency. Call dispose() on shutdown.
    """

    def __init__(self, url: Optional[str] = None, engine: Optional[Engine] = None, echo: bool = False):
        if engine is None:
            url = url or settings.DATABASE_URL
            connect_args = {}
            if url.startswith("sqlite"):
                # Requests are served from a thread pool
                connect_args["check_same_thread"] = False
            engine = create_engine(url, echo=echo, pool_pre_ping=True, connect_args=connect_args)

        if engine.dialect.name == "sqlite":
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)

        self.engine = engine
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def create_all(self) -> None:
        """Create any missing tables. Alembic remains the source of truth in production."""
        from jobboard import models  # noqa: F401  (registers models on Base.metadata)
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
