"""
Tests for the Alembic migration chain.

The schema built by `alembic upgrade head` must match the models and carry
the constraints the services rely on.
"""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from jobboard.core.config import settings
from jobboard.core.database import Base
from jobboard import models  # noqa: F401

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def migrated_engine(tmp_path, monkeypatch):
    """Run every migration against a fresh SQLite file."""
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setattr(settings, "DATABASE_URL", url)

    config = Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    command.upgrade(config, "head")

    engine = create_engine(url)
    yield engine
    engine.dispose()


class TestInitialSchema:

    def test_tables_match_models(self, migrated_engine):
        inspector = inspect(migrated_engine)

        for table in Base.metadata.sorted_tables:
            columns = {column["name"] for column in inspector.get_columns(table.name)}
            assert columns == set(table.columns.keys()), table.name

    def test_username_and_email_unique(self, migrated_engine):
        indexes = {index["name"]: index for index in inspect(migrated_engine).get_indexes("users")}

        assert indexes["ix_users_username"]["column_names"] == ["username"]
        assert indexes["ix_users_username"]["unique"]
        assert indexes["ix_users_email"]["column_names"] == ["email"]
        assert indexes["ix_users_email"]["unique"]

    def test_rating_check_constraint(self, migrated_engine):
        names = [check["name"] for check in inspect(migrated_engine).get_check_constraints("reviews")]

        assert "ck_reviews_rating_range" in names

    def test_reviews_cascade_with_their_job(self, migrated_engine):
        foreign_keys = inspect(migrated_engine).get_foreign_keys("reviews")
        to_jobs = [fk for fk in foreign_keys if fk["referred_table"] == "jobs"]

        assert len(to_jobs) == 1
        assert to_jobs[0]["constrained_columns"] == ["job_id"]
        assert to_jobs[0]["options"].get("ondelete") == "CASCADE"
