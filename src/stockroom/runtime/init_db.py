"""Database initialization script."""

from loguru import logger

from stockroom.core.services.database.db_session import DbSessionService
from stockroom.runtime.context import get_config


def init_db() -> None:
    """Create all database tables."""
    db = DbSessionService()
    try:
        db.create_all()
    finally:
        db.dispose()
    logger.info("Database initialized at {}", get_config().database.url)


if __name__ == "__main__":
    init_db()
