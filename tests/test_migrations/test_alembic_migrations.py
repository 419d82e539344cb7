"""Tests for the Alembic migrations."""

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _config(db_file: Path) -> Config:
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", f"sqlite:///{db_file}")
    return cfg


def test_upgrade_creates_expected_tables_and_indexes(tmp_path: Path):
    """Test upgrading to head builds the news schema."""
    db_file = tmp_path / "migrations.sqlite3"
    command.upgrade(_config(db_file), "head")

    engine = create_engine(f"sqlite:///{db_file}")
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        post_indexes = {index["name"] for index in inspector.get_indexes("posts")}
        post_columns = {column["name"] for column in inspector.get_columns("posts")}
    finally:
        engine.dispose()

    assert {"categories", "authors", "posts", "youtube_videos", "live_settings"} <= tables
    assert {"ix_posts_publish_date", "ix_posts_category_id"} <= post_indexes
    assert {"tags", "keywords", "views", "publish_date"} <= post_columns


def test_downgrade_drops_tables(tmp_path: Path):
    """Test downgrading to base removes the news tables."""
    db_file = tmp_path / "migrations.sqlite3"
    cfg = _config(db_file)
    command.upgrade(cfg, "head")
    command.downgrade(cfg, "base")

    engine = create_engine(f"sqlite:///{db_file}")
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()

    assert tables <= {"alembic_version"}
