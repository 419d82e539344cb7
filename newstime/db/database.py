"""Database engine, sessions and connectivity checks."""

import logging
from collections.abc import Generator

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from newstime.config import get_settings

logger = logging.getLogger(__name__)

# MySQL closes connections idle longer than wait_timeout (8h by default)
MYSQL_POOL_RECYCLE = 3600


def engine_options(database_url: str, debug: bool = False) -> dict:
    """Build ``create_engine`` keyword arguments for a database URL.

    SQLite gets a thread-shareable connection and no pool sizing; MySQL
    gets a pre-pinged, recycled pool.

    Args:
        database_url: SQLAlchemy database URL.
        debug: Echo SQL statements.

    Returns:
        dict: Engine options.
    """
    options: dict = {"echo": debug}
    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        return options

    options.update(
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        pool_recycle=MYSQL_POOL_RECYCLE,
    )
    if database_url.startswith("mysql"):
        options["connect_args"] = {"charset": "utf8mb4"}
    return options


settings = get_settings()

engine: Engine = create_engine(
    settings.database_url,
    **engine_options(settings.database_url, settings.debug),
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a request-scoped session, closed afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create missing tables when running in debug mode.

    Deployed databases are built by the Alembic migrations instead.

    Args:
        bind: Engine to create tables on, defaults to the application engine.
    """
    if not settings.debug:
        return

    from newstime.db.models import Base

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Debug mode: database tables created")


def check_connection(db: Session) -> bool:
    """Check that the database answers a trivial query.

    Args:
        db: Database session.

    Returns:
        bool: True if the database is reachable.
    """
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False
