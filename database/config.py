# Database Configuration and Session Management

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from contextlib import contextmanager
import logging

from config.app_config import DATABASE_URL

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    # SQLite (local runs, tests) does not take pool sizing and needs cross-thread access
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_size": 10, "max_overflow": 20}


# Create engine
engine = create_engine(
    DATABASE_URL,
    echo=False,  # Set to True for SQL query logging
    **_engine_options(DATABASE_URL)
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency for FastAPI
def get_db() -> Session:
    """
    FastAPI dependency to get database session.
    Usage: db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_context():
    """
    Context manager for database session.
    Usage:
    with get_db_context() as db:
        # do something with db
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db(bind=None):
    """
    Initialize database tables.
    Run this once to create all tables.
    """
    from database.models import Base
    from database import marketplace_models, creator_tools_models  # noqa: F401 - register tables

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables created successfully")


if __name__ == "__main__":
    # Create tables when run directly
    logging.basicConfig(level=logging.INFO)
    init_db()
